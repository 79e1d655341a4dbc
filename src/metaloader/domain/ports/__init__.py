"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    GroupRepository,
    MetaActionMenuRepository,
    MetaActionRepository,
    MetaChartRepository,
    MetaMenuRepository,
    MetaSelectRepository,
    MetaViewRepository,
    NamedRepository,
    Repository,
)
from .sources import DefinitionSerializer, DefinitionSource, FieldInfo, ModelInfo, ModelRegistry
from .unit_of_work import MetaRepositories, MetaUnitOfWork, RepositoryCollection, UnitOfWork

__all__ = [
    "DefinitionSerializer",
    "DefinitionSource",
    "FieldInfo",
    "GroupRepository",
    "MetaActionMenuRepository",
    "MetaActionRepository",
    "MetaChartRepository",
    "MetaMenuRepository",
    "MetaRepositories",
    "MetaSelectRepository",
    "MetaUnitOfWork",
    "MetaViewRepository",
    "ModelInfo",
    "ModelRegistry",
    "NamedRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
