"""Shared logging helpers for metaloader."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "METALOADER_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(value: str | None, *, default: int = logging.INFO) -> int:
    """Translate a level name (``"debug"``, ``"WARNING"``) or number into a logging level."""

    if value is None or not value.strip():
        return default
    candidate = value.strip()
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelNamesMapping().get(candidate.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with the loader's terse CLI format.

    When ``level`` is omitted it is read from ``METALOADER_LOG_LEVEL`` and falls
    back to INFO. Pass ``force=True`` to reconfigure during tests.
    """

    effective = level if level is not None else resolve_log_level(os.getenv(LOG_LEVEL_ENV))
    logging.basicConfig(
        level=effective,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
