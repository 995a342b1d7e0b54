"""Shared configuration utilities for pkgreport (pkgreport_common.config).

This package provides:
- project: YAML-based project/user configuration loader
- runtime: environment overrides and the ``ReportingConfig`` value object
"""

from .project import deep_merge, load_merged_config
from .runtime import EnvVars, ReportingConfig, load_reporting_config

__all__ = [
    "EnvVars",
    "ReportingConfig",
    "deep_merge",
    "load_merged_config",
    "load_reporting_config",
]
