"""
Logging configuration for the Car Hire API.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger and routes the Uvicorn server loggers
through it, so request logs from ``run.py`` and the application's own
logs share one format and one level.  ``DEBUG=true`` in the settings
forces the ``DEBUG`` level regardless of ``LOG_LEVEL``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn.  They carry their own handlers when uvicorn
# configures logging itself; ``run.py`` disables that.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str, debug: bool = False) -> int:
    """Return the numeric level for ``level``; unknown names mean INFO."""
    if debug:
        return logging.DEBUG
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger and the server loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    debug : bool
        When true the level is ``DEBUG`` whatever ``level`` says.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a repeated create_app().
        return

    numeric_level = resolve_level(level, debug)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True
        server_logger.setLevel(numeric_level)
