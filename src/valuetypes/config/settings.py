"""Application settings read from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "VALUETYPES_LOG_LEVEL"
CATALOG_ENV: Final[str] = "VALUETYPES_CATALOG"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class AppConfig:
    log_level: int = DEFAULT_LOG_LEVEL
    catalog_path: Path | None = None

    @classmethod
    def from_environment(cls) -> AppConfig:
        return cls(log_level=get_log_level(), catalog_path=get_catalog_path())


def get_log_level() -> int:
    """Resolve ``VALUETYPES_LOG_LEVEL`` (a level name such as ``DEBUG``) to a logging level."""

    name = optional_env_var(LOG_LEVEL_ENV)
    if name is None:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {name}")
    return level


def get_catalog_path() -> Path | None:
    """Return the catalogue file named by ``VALUETYPES_CATALOG``, if set."""

    value = optional_env_var(CATALOG_ENV)
    if value is None:
        return None
    return Path(value).expanduser()
