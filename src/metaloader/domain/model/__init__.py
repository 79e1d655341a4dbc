"""Public domain model surface."""

from __future__ import annotations

from metaloader.domain.model.auth import Group
from metaloader.domain.model.entity import Entity, ModuleOwned
from metaloader.domain.model.enums import MODEL_LESS_VIEW_TYPES, EntityKind, ViewType
from metaloader.domain.model.meta import (
    MetaAction,
    MetaActionMenu,
    MetaChart,
    MetaChartConfig,
    MetaChartSeries,
    MetaMenu,
    MetaSelect,
    MetaSelectItem,
    MetaView,
)
from metaloader.domain.model.module import Module

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    "ModuleOwned",
    # metadata
    "MetaView",
    "MetaSelect",
    "MetaSelectItem",
    "MetaAction",
    "MetaMenu",
    "MetaActionMenu",
    "MetaChart",
    "MetaChartSeries",
    "MetaChartConfig",
    # auth
    "Group",
    # modules
    "Module",
    # enums
    "EntityKind",
    "ViewType",
    "MODEL_LESS_VIEW_TYPES",
]
