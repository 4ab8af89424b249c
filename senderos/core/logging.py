"""Root logger setup shared by the server, migration and seed entry points."""

import logging

from senderos.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
