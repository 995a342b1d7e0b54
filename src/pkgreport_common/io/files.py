"""Reading pkgreport configuration files."""

from pathlib import Path
from typing import Any

import yaml


class FileOperationError(Exception):
    """A configuration file could not be read or parsed."""

    def __init__(self, path: Path, problem: str) -> None:
        super().__init__(f"{problem}: {path}")
        self.path = path
        self.problem = problem


def safe_read_yaml(path: Path) -> dict[str, Any]:
    """Read one layer of pkgreport configuration.

    Parameters
    ----------
    path : Path
        Location of a ``config.yaml`` or ``.pkgreport.yaml`` file

    Returns
    -------
    dict[str, Any]
        The top-level mapping; empty for an empty document

    Raises
    ------
    FileOperationError
        If the file is missing, unreadable, not YAML, or not a mapping
    """
    if not path.is_file():
        raise FileOperationError(path, "Configuration file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileOperationError(path, f"Configuration file unreadable ({e.strerror})") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FileOperationError(path, "Configuration file is not valid YAML") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FileOperationError(
            path,
            f"Configuration must be a mapping of sections, got {type(data).__name__}",
        )
    return data
