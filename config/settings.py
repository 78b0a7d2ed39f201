"""
Configuration management for mathdistance.

Provides a dataclass for configuration and utilities
for loading settings from YAML files.
"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
from typing import Optional

import yaml

from mathdistance.utils.logging import get_logger, setup_logger


logger = get_logger("mathdistance.config")

CONFIG_ENV_VAR = "MATHDISTANCE_CONFIG"


@dataclass
class Settings:
    """
    Main settings container for mathdistance.

    Attributes:
        default_metric: Metric name or alias used by DistanceCalculator.from_settings
        minkowski_order: Order used when the default metric is Minkowski
        log_level: Logging level
        log_file: Optional file receiving log records
    """
    default_metric: str = "euclidean"
    minkowski_order: float = 3.0
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """
        Create Settings from dictionary.

        Raises:
            TypeError: If data holds an unknown key
        """
        return cls(**data)

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        return asdict(self)

    def configure_logging(self) -> logging.Logger:
        """Apply log_level and log_file to the package logger."""
        return setup_logger("mathdistance", level=self.log_level, log_file=self.log_file)


def get_default_config_path() -> Path:
    """Get path to default configuration file."""
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)

    # Check for config in current directory
    local_config = Path("./config/default_config.yaml")
    if local_config.exists():
        return local_config

    # Fall back to the config shipped with the package
    return Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Settings object with loaded configuration

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./my_config.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return Settings()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    logger.debug(f"Loaded config from {path}")
    return Settings.from_dict(data)
