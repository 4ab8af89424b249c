"""Configuration settings for the reservations service."""

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings:
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Senderos Reservations Service")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./senderos.db")
    ALLOWED_ORIGINS: List[str] = _split_origins(
        os.getenv(
            "ALLOWED_ORIGINS",
            "https://reservas-senderosamados.rsanjur.com",
        )
    )
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
