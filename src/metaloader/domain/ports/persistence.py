"""Ports for persisting metadata records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from metaloader.domain.model import (
        Group,
        MetaAction,
        MetaActionMenu,
        MetaChart,
        MetaMenu,
        MetaSelect,
        MetaView,
    )


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent record store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class NamedRepository[TEntity](Repository[TEntity], Protocol):
    """Records whose ``name`` is unique within their kind."""

    def find_by_name(self, name: str) -> TEntity | None: ...


@runtime_checkable
class MetaViewRepository(Repository["MetaView"], Protocol):
    """Views may share a name, so lookups are by xml id or (name, module)."""

    def find_by_xml_id(self, xml_id: str) -> MetaView | None: ...

    def find_by_module(self, name: str, module: str) -> MetaView | None: ...

    def find_by_name(self, name: str) -> Sequence[MetaView]:
        """Return every view called ``name``, highest priority first."""
        ...

    def count_by_model(self, model: str) -> int: ...


@runtime_checkable
class MetaSelectRepository(NamedRepository["MetaSelect"], Protocol):
    """Repository contract for selections."""


@runtime_checkable
class MetaActionRepository(NamedRepository["MetaAction"], Protocol):
    """Repository contract for actions."""


@runtime_checkable
class MetaMenuRepository(NamedRepository["MetaMenu"], Protocol):
    """Repository contract for menus."""


@runtime_checkable
class MetaActionMenuRepository(NamedRepository["MetaActionMenu"], Protocol):
    """Repository contract for action-menus."""


@runtime_checkable
class MetaChartRepository(NamedRepository["MetaChart"], Protocol):
    """Repository contract for charts."""


@runtime_checkable
class GroupRepository(Repository["Group"], Protocol):
    """Repository contract for permission groups."""

    def find_by_code(self, code: str) -> Group | None: ...
