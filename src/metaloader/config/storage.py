"""Data storage configuration helpers."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_path

APP_DIR_NAME: Final[str] = "metaloader"
DEFAULT_DB_FILENAME: Final[str] = "metadata.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def database_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.database_filename

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Where module definitions are read from and advisory artifacts are written."""

    output_dir: Path
    modules_dir: Path | None = None

    @property
    def generated_views_dir(self) -> Path:
        return self.output_dir / "views"


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    data_dir = optional_env_path("METALOADER_DATA_DIR") or _default_data_dir()
    return StorageConfig(data_dir=data_dir)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.database_uri())


def get_database_uri() -> str:
    return get_database_config().uri


def get_loader_config() -> LoaderConfig:
    output_dir = optional_env_path("METALOADER_OUTPUT_DIR")
    if output_dir is None:
        output_dir = Path(tempfile.gettempdir()) / APP_DIR_NAME / "generated"
    return LoaderConfig(
        output_dir=output_dir,
        modules_dir=optional_env_path("METALOADER_MODULES_DIR"),
    )
