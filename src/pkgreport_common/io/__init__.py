"""File IO helpers (pkgreport_common.io)."""

from .files import FileOperationError, safe_read_yaml

__all__ = [
    "FileOperationError",
    "safe_read_yaml",
]
