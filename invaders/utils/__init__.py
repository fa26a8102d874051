"""Configuration loading and logging setup."""

from .config_loader import (
    Config,
    DisplayConfig,
    LoggingConfig,
    config_from_dict,
    load_config,
    save_config,
)
from .logging_setup import setup_logging

__all__ = [
    "Config",
    "DisplayConfig",
    "LoggingConfig",
    "config_from_dict",
    "load_config",
    "save_config",
    "setup_logging",
]
