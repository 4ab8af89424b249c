"""Database configuration for the reservations service."""

import logging
from typing import Any, Dict

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from senderos.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across the threadpool used by FastAPI
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 10,          # Máx. conexiones en el pool
        "max_overflow": 20,       # Conexiones extra si el pool está lleno
        "pool_timeout": 30,       # Espera máx. para obtener una conexión
        "pool_recycle": 1800,     # Recicla conexiones cada 30 min
        "pool_pre_ping": True,    # Testea conexión antes de usarla
    }


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def verify_database_connection() -> None:
    """Ensure the service can connect to the configured database."""

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Database connection validation failed")
        raise RuntimeError("Failed to connect to the reservations database") from exc


__all__ = ["Base", "SessionLocal", "engine", "verify_database_connection"]
