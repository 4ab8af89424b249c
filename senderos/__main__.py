"""Run the reservations API with uvicorn: ``python -m senderos``."""

import uvicorn

from senderos.core.config import settings
from senderos.core.logging import configure_logging


def main() -> None:
    configure_logging()
    uvicorn.run(
        "senderos.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
