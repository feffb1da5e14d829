"""
Application logger.

Modules import the shared ``logger`` from here; ``setup_logging`` is called
once from the application lifespan.
"""

import logging

from opsboard.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("opsboard")


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the process."""
    settings = get_settings()
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format=LOG_FORMAT,
    )
    # SQL echo is controlled by SQL_ECHO, keep the engine logger quiet otherwise
    if not settings.SQL_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
