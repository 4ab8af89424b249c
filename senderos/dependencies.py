"""Shared dependencies for the reservations service."""

from collections.abc import Iterator

from sqlalchemy.orm import Session

from senderos.core.database import SessionLocal


def get_db() -> Iterator[Session]:
    """Provide one session per request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
