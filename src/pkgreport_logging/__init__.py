"""Logging helpers shared by the pkgreport packages.

Every module obtains its logger through :func:`get_logger` so that a single call to
:func:`configure_logger` at startup controls where records go.
"""

from pkgreport_logging.config import configure_logger, get_logger
from pkgreport_logging.formatters import SafeFormatter
from pkgreport_logging.utils import get_log_file_path, get_log_level

__all__ = [
    "SafeFormatter",
    "configure_logger",
    "get_log_file_path",
    "get_log_level",
    "get_logger",
]
