"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import PACKAGE_LOGGER, configure_logging
from .settings import (
    CATALOG_ENV,
    LOG_LEVEL_ENV,
    AppConfig,
    get_catalog_path,
    get_log_level,
)

__all__ = [
    "CATALOG_ENV",
    "LOG_LEVEL_ENV",
    "PACKAGE_LOGGER",
    "AppConfig",
    "ConfigurationError",
    "configure_logging",
    "get_catalog_path",
    "get_log_level",
    "optional_env_var",
]
