"""
Configuration module for mathdistance.

Loads settings from YAML files, with the file location overridable
through the MATHDISTANCE_CONFIG environment variable.

Example:
    >>> from config import load_config
    >>> from mathdistance import DistanceCalculator
    >>>
    >>> settings = load_config()
    >>> calc = DistanceCalculator.from_settings(settings)
"""

from .settings import (
    Settings,
    load_config,
    get_default_config_path,
    CONFIG_ENV_VAR,
)

__all__ = [
    "Settings",
    "load_config",
    "get_default_config_path",
    "CONFIG_ENV_VAR",
]
