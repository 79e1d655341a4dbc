"""SQLAlchemy adapter package for the metadata store."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyActionMenuRepository,
    SqlAlchemyActionRepository,
    SqlAlchemyChartRepository,
    SqlAlchemyGroupRepository,
    SqlAlchemyMenuRepository,
    SqlAlchemySelectRepository,
    SqlAlchemyViewRepository,
)
from .unit_of_work import SqlAlchemyMetaUnitOfWork, shutdown, startup

__all__ = [
    "SqlAlchemyActionMenuRepository",
    "SqlAlchemyActionRepository",
    "SqlAlchemyChartRepository",
    "SqlAlchemyGroupRepository",
    "SqlAlchemyMenuRepository",
    "SqlAlchemyMetaUnitOfWork",
    "SqlAlchemySelectRepository",
    "SqlAlchemyViewRepository",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
