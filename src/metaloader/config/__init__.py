"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_path, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging, resolve_log_level
from .storage import (
    DatabaseConfig,
    LoaderConfig,
    StorageConfig,
    get_database_config,
    get_database_uri,
    get_loader_config,
    get_storage_config,
)

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "LoaderConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_database_uri",
    "get_loader_config",
    "get_storage_config",
    "optional_env_path",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
]
