import logging
import os
import sys
from typing import Optional

DEFAULT_LOG_FORMAT = """%(asctime)s - %(name)s - %(levelname)s - %(message)s"""


def _default_level() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    return level if isinstance(level, int) else logging.INFO


def get_logger(
    name: str,
    level: Optional[int] = None,
    log_format: str = DEFAULT_LOG_FORMAT,
    stream=sys.stdout,
) -> logging.Logger:
    """
    Return a logger with the given name and configuration.

    Args:
        name: Logger name, usually ``__name__``.
        level: Logging level (e.g. logging.INFO). Defaults to ``LOG_LEVEL`` from the
            environment, falling back to INFO.
        log_format: Log message format string.
        stream: Stream the handler writes to (default: sys.stdout).

    Returns:
        The configured logging.Logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else _default_level())

    # skip if a handler is already attached, otherwise every import duplicates lines
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter(log_format)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
