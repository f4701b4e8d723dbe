"""Utilities related to logging."""

import logging
import os
from logging.config import dictConfig
from typing import Optional

from .base import BaseSettings, ConfigError
from .settings import LOG_LEVEL_KEY

ROOT_LOGGER_NAME = "ugradid_common"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


class LoggingConfigurator:
    """Utility class used to configure logging for the package."""

    @classmethod
    def configure(
        cls,
        log_level: Optional[str] = None,
        settings: Optional[BaseSettings] = None,
    ) -> logging.Logger:
        """Configure the package logger.

        The level is taken from `log_level`, then the `log.level` setting,
        then the LOG_LEVEL environment variable.

        Args:
            log_level: Optional log level name
            settings: Optional settings to read the level from

        Returns:
            The configured package logger

        Raises:
            ConfigError: If the resolved level is not a known level name

        """
        level = (
            log_level
            or (settings and settings.get_str(LOG_LEVEL_KEY))
            or os.getenv("LOG_LEVEL")
            or DEFAULT_LOG_LEVEL
        ).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unrecognized log level: {level}")

        dictConfig(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {"default": {"format": LOG_FORMAT}},
                "handlers": {
                    "console": {
                        "class": "logging.StreamHandler",
                        "formatter": "default",
                    }
                },
                "loggers": {
                    ROOT_LOGGER_NAME: {
                        "level": level,
                        "handlers": ["console"],
                        "propagate": False,
                    }
                },
            }
        )
        return logging.getLogger(ROOT_LOGGER_NAME)
