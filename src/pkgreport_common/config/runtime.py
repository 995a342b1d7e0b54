"""Environment-driven configuration for pkgreport.

Environment variables override whatever the YAML layers resolved to, so a wrapper
script can force machine-readable or non-interactive mode without touching files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pkgreport_common.config.project import load_merged_config
from pkgreport_logging import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

VERBOSITY_NAMES = ("quiet", "normal", "high", "debug")


class EnvVars:
    """Environment variable names."""

    VERBOSITY = "PKGREPORT_VERBOSITY"
    MACHINE_READABLE = "PKGREPORT_MACHINE_READABLE"
    NON_INTERACTIVE = "PKGREPORT_NON_INTERACTIVE"
    COLOR = "PKGREPORT_COLOR"
    LOG_LEVEL = "PKGREPORT_LOG_LEVEL"
    LOG_FILE = "PKGREPORT_LOG_FILE"


def read_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    Unrecognized values fall back to ``default``.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.debug("Ignoring non-boolean value %r for %s", raw, name)
    return default


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return default


def _as_verbosity(value: Any, default: str = "normal") -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        clamped = max(0, min(value, len(VERBOSITY_NAMES) - 1))
        return VERBOSITY_NAMES[clamped]
    if isinstance(value, str) and value.strip().lower() in VERBOSITY_NAMES:
        return value.strip().lower()
    return default


@dataclass(frozen=True)
class ReportingConfig:
    """Resolved settings for the reporting layer.

    Attributes
    ----------
    verbosity : str
        One of ``quiet``, ``normal``, ``high``, ``debug``
    machine_readable : bool
        Render XML elements instead of human text
    non_interactive : bool
        Never block on prompts; answer with the default
    color : bool
        Allow ANSI colors in human output
    log_level : str
        Level name for the pkgreport loggers
    log_file : str | None
        Optional log file path
    """

    verbosity: str = "normal"
    machine_readable: bool = False
    non_interactive: bool = False
    color: bool = True
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportingConfig:
        """Build a config from a merged configuration mapping."""
        output = data.get("output") or {}
        prompts = data.get("prompts") or {}
        logging_cfg = data.get("logging") or {}
        return cls(
            verbosity=_as_verbosity(output.get("verbosity")),
            machine_readable=_as_bool(output.get("machine_readable"), False),
            non_interactive=_as_bool(prompts.get("non_interactive"), False),
            color=_as_bool(output.get("color"), True),
            log_level=str(logging_cfg.get("level") or "WARNING").upper(),
            log_file=logging_cfg.get("file") or None,
        )

    def with_env_overrides(self) -> ReportingConfig:
        """Return a copy with environment variables applied."""
        verbosity = self.verbosity
        raw_verbosity = os.environ.get(EnvVars.VERBOSITY)
        if raw_verbosity is not None:
            verbosity = _as_verbosity(
                int(raw_verbosity) if raw_verbosity.strip().isdigit() else raw_verbosity,
                default=self.verbosity,
            )
        return ReportingConfig(
            verbosity=verbosity,
            machine_readable=read_bool(EnvVars.MACHINE_READABLE, self.machine_readable),
            non_interactive=read_bool(EnvVars.NON_INTERACTIVE, self.non_interactive),
            color=read_bool(EnvVars.COLOR, self.color),
            log_level=os.environ.get(EnvVars.LOG_LEVEL, self.log_level).upper(),
            log_file=os.environ.get(EnvVars.LOG_FILE, self.log_file),
        )


def load_reporting_config(project_root: Path | None = None) -> ReportingConfig:
    """Resolve defaults, YAML layers, and environment into a ``ReportingConfig``.

    Parameters
    ----------
    project_root : Path | None
        Directory holding an optional ``.pkgreport.yaml``

    Returns
    -------
    ReportingConfig
        Effective configuration
    """
    merged = load_merged_config(project_root)
    config = ReportingConfig.from_dict(merged).with_env_overrides()
    logger.debug("Resolved reporting config: %s", config)
    return config
