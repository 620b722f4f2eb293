"""Standard library logging for code that doesn't go through logfire."""

import logging
import sys

from anonboard.config import Settings

# Third-party loggers that are too chatty below WARNING
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout at the level implied by DEBUG.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("anonboard").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
