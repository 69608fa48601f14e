"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
from typing import Final

PACKAGE_LOGGER: Final[str] = "valuetypes"
THIRD_PARTY_LEVEL: Final[int] = logging.WARNING


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Install a terse CLI handler on the root logger and apply ``level`` to this package.

    Third-party loggers (SQLAlchemy, pydantic) stay at WARNING whatever ``level`` is, so
    ``VALUETYPES_LOG_LEVEL=DEBUG`` only turns up our own output. ``force=True`` replaces
    handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=max(level, THIRD_PARTY_LEVEL),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
