"""Logging setup for the persistence layer.

Cache coordinator logs HIT/MISS/SET/DELETE at DEBUG, so cache traffic is
only visible with ``DEBUG=true``. Pattern invalidations log at INFO.
"""

import logging
import sys

from elemo.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Driver loggers that are noisy at DEBUG
_QUIET_LOGGERS = ("redis", "asyncio")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging on stdout.

    Args:
        settings: Loaded settings; defaults to get_settings(). Level is
            DEBUG when settings.debug is true, otherwise INFO.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)
