"""Project/user YAML configuration loading for pkgreport.

Locates, loads, and deep-merges configuration from the user
(``~/.config/pkgreport/config.yaml``) and project (``.pkgreport.yaml``) files on top
of the built-in defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pkgreport_common.io import FileOperationError, safe_read_yaml
from pkgreport_logging import get_logger

logger = get_logger(__name__)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dictionaries in place and return ``base``.

    Values from ``override`` take precedence. Nested dicts are merged
    recursively; other values are replaced.
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def default_config() -> dict[str, Any]:
    """Return the default configuration structure."""
    return {
        "output": {
            "verbosity": "normal",
            "machine_readable": False,
            "color": True,
        },
        "prompts": {
            "non_interactive": False,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, returning an empty dict when unusable.

    Missing files, unreadable files, and documents whose top level is not a
    mapping all yield ``{}``.
    """
    try:
        if not path.exists():
            return {}
        return safe_read_yaml(path)
    except FileOperationError as e:
        logger.debug("Ignoring configuration file %s: %s", path, e)
        return {}


def get_user_config_path() -> Path:
    """Get path to user-level configuration file."""
    return Path.home() / ".config" / "pkgreport" / "config.yaml"


def get_project_config_path(project_root: Path) -> Path:
    """Get path to project-level configuration file."""
    return project_root / ".pkgreport.yaml"


def load_merged_config(project_root: Path | None = None) -> dict[str, Any]:
    """Load default + user + project YAML config into a single dict."""
    cfg = default_config()

    user_cfg = load_yaml(get_user_config_path())
    if user_cfg:
        deep_merge(cfg, user_cfg)

    if project_root is not None:
        project_cfg = load_yaml(get_project_config_path(project_root))
        if project_cfg:
            deep_merge(cfg, project_cfg)

    return cfg
