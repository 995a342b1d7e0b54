"""Environment helpers for logging configuration."""

import os
from pathlib import Path

LOG_LEVEL_ENV = "PKGREPORT_LOG_LEVEL"
LOG_FILE_ENV = "PKGREPORT_LOG_FILE"

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    """Return the log level requested through the environment.

    Parameters
    ----------
    default : str
        Level used when the variable is unset or not a known level name

    Returns
    -------
    str
        Upper-case level name
    """
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if level in VALID_LOG_LEVELS:
        return level
    return default


def get_log_file_path(name: str = "pkgreport") -> Path:
    """Return the log file path, honoring ``PKGREPORT_LOG_FILE``."""
    override = os.environ.get(LOG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cache" / "pkgreport" / "logs" / f"{name}.log"
