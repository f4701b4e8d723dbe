"""Settings and logging configuration."""

from .base import BaseSettings, ConfigError
from .logging import LoggingConfigurator
from .settings import FORMAT_CHECKS_KEY, LOG_LEVEL_KEY, Settings

__all__ = [
    "FORMAT_CHECKS_KEY",
    "LOG_LEVEL_KEY",
    "BaseSettings",
    "ConfigError",
    "LoggingConfigurator",
    "Settings",
]
