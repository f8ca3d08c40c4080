"""
Logging for the catalog.

Records from every ``bookcatalog.*`` module go through the package
logger. ``setup_logging`` gives that logger a console handler and, when
``LOG_FILE`` is set, a file handler. Handlers are named so a second
call (another ``create_app`` in the same process, the menu started
after the API) re-applies the level without stacking duplicates.
Records still propagate, so pytest's ``caplog`` and any root handlers
the host installs see them too.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "bookcatalog"
CONSOLE_HANDLER = "bookcatalog.console"
FILE_HANDLER = "bookcatalog.file"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


def _install(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(_FORMATTER)
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the ``bookcatalog`` package logger.

    Parameters
    ----------
    level : str
        Level name such as ``"debug"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Also write records to this file (appended, UTF-8).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level(level))

    installed = {h.get_name() for h in logger.handlers}
    if CONSOLE_HANDLER not in installed:
        _install(logger, logging.StreamHandler(), CONSOLE_HANDLER)
    if logfile and FILE_HANDLER not in installed:
        _install(logger, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"), FILE_HANDLER)
    return logger
