"""
Logging helpers for authgate.

The library logs through the standard logging module. A NOTICE level sits
between INFO and WARNING for conditions that are expected but worth noting,
like an unknown role name or a stale session.
"""

import logging
from typing import Any, Union

NOTICE = 25

logging.addLevelName(NOTICE, "NOTICE")

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the authgate namespace."""
    if name != "authgate" and not name.startswith("authgate."):
        name = f"authgate.{name}"
    return logging.getLogger(name)


def notice(logger: LoggerLike, message: str, **context: Any) -> None:
    """Log a message at NOTICE level with structured context."""
    logger.log(NOTICE, message, extra=context)
