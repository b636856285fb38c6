"""
Logging setup for the application.

Root logger gets a console handler (plus a file handler when LOG_FILE is
set). ``logging.basicConfig`` is a no-op once the root logger has
handlers, so repeated ``create_application`` calls and pytest's log
capture keep their configuration.
"""

# Standard library imports
import logging
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger

    Args:
        level: Level name such as "DEBUG" or "info"; unknown names mean INFO
        logfile: Optional path of a file that receives the same records

    Returns:
        The ``user_backend`` package logger
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, mode="a", encoding="utf-8"))

    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

    return logging.getLogger("user_backend")
