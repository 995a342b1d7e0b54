"""Logger configuration for pkgreport."""

import logging
import sys
from pathlib import Path

from pkgreport_logging.formatters import SafeFormatter
from pkgreport_logging.utils import get_log_level

_HANDLER_MARKER = "_pkgreport_handler"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a pkgreport module.

    Parameters
    ----------
    name : str
        Usually ``__name__`` of the calling module

    Returns
    -------
    logging.Logger
        Standard library logger
    """
    return logging.getLogger(name)


def configure_logger(
    name: str,
    level: str | None = None,
    to_console: bool = False,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Configure a package logger.

    Handlers previously installed by this function are removed first so repeated
    configuration does not duplicate records.

    Parameters
    ----------
    name : str
        Logger name, typically a top-level package name
    level : str | None
        Level name; defaults to :func:`get_log_level`
    to_console : bool
        Whether to add a stderr handler
    log_file : str | Path | None
        Optional file to append records to

    Returns
    -------
    logging.Logger
        The configured logger
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    effective = (level or get_log_level()).upper()
    logger.setLevel(getattr(logging, effective, logging.WARNING))

    handlers: list[logging.Handler] = []
    if to_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(SafeFormatter())
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)

    if not handlers:
        logger.addHandler(_null_handler())

    return logger


def _null_handler() -> logging.Handler:
    handler = logging.NullHandler()
    setattr(handler, _HANDLER_MARKER, True)
    return handler
