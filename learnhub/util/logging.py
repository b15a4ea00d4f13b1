"""Stdlib logging setup.

Application events go through logfire; this only routes the plain
``logging`` records emitted by uvicorn, SQLAlchemy, asyncpg and alembic.
"""

import logging
import sys

from learnhub.config import Settings

# Third-party loggers that are too chatty at INFO outside debug mode
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)
    logging.getLogger("learnhub").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
