"""
Logging configuration for scripts built on the library.

The library itself only creates module loggers; applications call
configure_logging() once at startup.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> int:
    """
    Configure the root logger.

    Args:
        level: Level name such as "DEBUG". Falls back to the LOG_LEVEL
            environment variable, then to INFO.

    Returns:
        The numeric level that was applied.
    """
    name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    return numeric
