"""Persisted metadata records. Ownership lives on aggregate roots.

Aggregate roots here:
- MetaSelect owns its MetaSelectItems (rebuilt on every write)
- MetaChart owns MetaChartSeries + MetaChartConfig (rebuilt on every write)
- MetaMenu / MetaActionMenu reference parents and actions by identity
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from metaloader.domain.model.entity import Entity, ModuleOwned
from metaloader.domain.model.enums import EntityKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from metaloader.domain.model.auth import Group


@dataclass(eq=False, kw_only=True)
class MetaView(ModuleOwned):
    """Persisted projection of a view definition.

    Several records may share ``name``; read-time resolution picks the one with
    the highest ``priority``. ``xml_id`` is unique when present.
    """

    KIND: ClassVar[EntityKind] = EntityKind.VIEW

    xml_id: str | None = None
    title: str | None = None
    type: str | None = None
    model: str | None = None
    body: str | None = None
    priority: int = 0


@dataclass(eq=False, kw_only=True)
class MetaSelectItem(Entity):
    KIND: ClassVar[EntityKind] = EntityKind.SELECTION

    value: str
    title: str | None = None
    order: int = 0


@dataclass(eq=False, kw_only=True)
class MetaSelect(ModuleOwned):
    KIND: ClassVar[EntityKind] = EntityKind.SELECTION

    _items: list[MetaSelectItem] = field(default_factory=list["MetaSelectItem"], repr=False)

    @property
    def items(self) -> tuple[MetaSelectItem, ...]:
        return tuple(sorted(self._items, key=lambda item: item.order))

    def clear_items(self) -> None:
        self._items.clear()

    def add_item(self, value: str, title: str | None = None) -> MetaSelectItem:
        """Append an option, numbering it after the ones already present."""
        item = MetaSelectItem(value=value, title=title, order=len(self._items))
        self._items.append(item)
        return item


@dataclass(eq=False, kw_only=True)
class MetaAction(ModuleOwned):
    KIND: ClassVar[EntityKind] = EntityKind.ACTION

    type: str | None = None
    model: str | None = None
    body: str | None = None


def _check_parent_chain(
    node: MetaMenu | MetaActionMenu,
    parent: MetaMenu | MetaActionMenu,
    settled: Callable[[Entity], bool] | None,
) -> None:
    current: MetaMenu | MetaActionMenu | None = parent
    while current is not None:
        if current is node:
            raise ValueError(f"Menu parent cycle: {node.name!r} -> {parent.name!r}")
        if settled is not None and not settled(current):
            # its parent link may still be rewritten
            return
        current = current.parent


@dataclass(eq=False, kw_only=True)
class MetaMenu(ModuleOwned):
    KIND: ClassVar[EntityKind] = EntityKind.MENU

    title: str | None = None
    icon: str | None = None
    priority: int | None = None
    top: bool | None = None
    left: bool = True
    mobile: bool | None = None

    parent: MetaMenu | None = field(default=None, repr=False)
    action: MetaAction | None = field(default=None, repr=False)
    _groups: set[Group] = field(default_factory=set["Group"], repr=False)

    @property
    def groups(self) -> frozenset[Group]:
        return frozenset(self._groups)

    def replace_groups(self, groups: Iterable[Group]) -> None:
        self._groups.clear()
        self._groups.update(groups)

    def set_parent(
        self, parent: MetaMenu | None, *, settled: Callable[[Entity], bool] | None = None
    ) -> None:
        """Attach ``parent``; refuses assignments that would close a cycle.

        With ``settled``, the ancestor walk stops at the first ancestor for which
        it returns ``False``, since that ancestor's own parent is not final yet.
        """
        if parent is not None:
            _check_parent_chain(self, parent, settled)
        self.parent = parent

    def ancestors(self) -> tuple[MetaMenu, ...]:
        chain: list[MetaMenu] = []
        current = self.parent
        while current is not None:
            chain.append(current)
            current = current.parent
        return tuple(chain)


@dataclass(eq=False, kw_only=True)
class MetaActionMenu(ModuleOwned):
    """Menu bar action; lighter than MetaMenu (category instead of icon/layout)."""

    KIND: ClassVar[EntityKind] = EntityKind.ACTION_MENU

    title: str | None = None
    category: str | None = None

    parent: MetaActionMenu | None = field(default=None, repr=False)
    action: MetaAction | None = field(default=None, repr=False)

    def set_parent(
        self, parent: MetaActionMenu | None, *, settled: Callable[[Entity], bool] | None = None
    ) -> None:
        if parent is not None:
            _check_parent_chain(self, parent, settled)
        self.parent = parent


@dataclass(eq=False, kw_only=True)
class MetaChartSeries(Entity):
    KIND: ClassVar[EntityKind] = EntityKind.CHART

    key: str
    group_by: str | None = None
    type: str | None = None
    side: str | None = None
    aggregate: str | None = None
    order: int = 0


@dataclass(eq=False, kw_only=True)
class MetaChartConfig(Entity):
    KIND: ClassVar[EntityKind] = EntityKind.CHART

    name: str
    value: str | None = None
    order: int = 0


@dataclass(eq=False, kw_only=True)
class MetaChart(ModuleOwned):
    KIND: ClassVar[EntityKind] = EntityKind.CHART

    title: str | None = None
    stacked: bool | None = None
    query: str | None = None
    query_type: str | None = None
    category_key: str | None = None
    category_type: str | None = None
    category_title: str | None = None

    _series: list[MetaChartSeries] = field(default_factory=list["MetaChartSeries"], repr=False)
    _config: list[MetaChartConfig] = field(default_factory=list["MetaChartConfig"], repr=False)

    @property
    def series(self) -> tuple[MetaChartSeries, ...]:
        return tuple(sorted(self._series, key=lambda item: item.order))

    @property
    def config(self) -> tuple[MetaChartConfig, ...]:
        return tuple(sorted(self._config, key=lambda item: item.order))

    def clear_series(self) -> None:
        self._series.clear()

    def clear_config(self) -> None:
        self._config.clear()

    def add_series(self, series: MetaChartSeries) -> None:
        series.order = len(self._series)
        self._series.append(series)

    def add_config(self, config: MetaChartConfig) -> None:
        config.order = len(self._config)
        self._config.append(config)
