from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from metaloader.adapters.sqlalchemy import start_mappers
from metaloader.adapters.sqlalchemy.migrations import upgrade_head
from metaloader.adapters.sqlalchemy.unit_of_work import SqlAlchemyMetaUnitOfWork, shutdown, startup

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def modules_root(tmp_path: Path) -> Path:
    """Writable copy of the sample module tree under ``tests/data/modules``."""

    target = tmp_path / "modules"
    shutil.copytree(DATA_DIR / "modules", target)
    return target


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyMetaUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyMetaUnitOfWork:
        return SqlAlchemyMetaUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()
