"""Parsed, in-memory definitions supplied by modules.

Definitions are a closed set of kinds (views, selections, actions, menus and
action-menus) grouped into one :class:`DefinitionBatch` per source file. The
loader dispatches on the concrete class; nothing here touches the store.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar

from metaloader.domain.model.enums import ViewType

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def lower_hyphen(name: str) -> str:
    """``ActionView`` -> ``action-view``; ``SaleOrderLine`` -> ``sale-order-line``."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


# Views -----------------------------------------------------------------------


@dataclass(kw_only=True)
class FieldItem:
    name: str
    title: str | None = None
    col_span: int | None = None
    show_title: bool | None = None


@dataclass(kw_only=True)
class ViewDefinition:
    TYPE: ClassVar[ViewType]

    name: str
    id: str | None = None
    title: str | None = None
    model: str | None = None

    @property
    def type(self) -> ViewType:
        return self.TYPE

    @property
    def default_title(self) -> str | None:
        return self.title


@dataclass(kw_only=True)
class FormView(ViewDefinition):
    TYPE: ClassVar[ViewType] = ViewType.FORM

    items: list[FieldItem] = field(default_factory=list["FieldItem"])


@dataclass(kw_only=True)
class GridView(ViewDefinition):
    TYPE: ClassVar[ViewType] = ViewType.GRID

    items: list[FieldItem] = field(default_factory=list["FieldItem"])


@dataclass(kw_only=True)
class SearchView(ViewDefinition):
    TYPE: ClassVar[ViewType] = ViewType.SEARCH

    items: list[FieldItem] = field(default_factory=list["FieldItem"])


@dataclass(kw_only=True)
class TreeView(ViewDefinition):
    TYPE: ClassVar[ViewType] = ViewType.TREE


@dataclass(kw_only=True)
class PortalView(ViewDefinition):
    TYPE: ClassVar[ViewType] = ViewType.PORTAL


@dataclass(kw_only=True)
class ChartQuery:
    text: str
    type: str = "select"


@dataclass(kw_only=True)
class ChartCategory:
    key: str
    type: str | None = None
    title: str | None = None


@dataclass(kw_only=True)
class ChartSeries:
    key: str
    type: str | None = None
    group_by: str | None = None
    side: str | None = None
    aggregate: str | None = None


@dataclass(kw_only=True)
class ChartConfigItem:
    name: str
    value: str | None = None


@dataclass(kw_only=True)
class ChartView(ViewDefinition):
    TYPE: ClassVar[ViewType] = ViewType.CHART

    query: ChartQuery
    category: ChartCategory
    series: list[ChartSeries] = field(default_factory=list["ChartSeries"])
    config: list[ChartConfigItem] | None = None
    stacked: bool | None = None


# Selections ------------------------------------------------------------------


@dataclass(kw_only=True)
class SelectionOption:
    value: str
    title: str | None = None


@dataclass(kw_only=True)
class SelectionDefinition:
    name: str
    options: list[SelectionOption] = field(default_factory=list["SelectionOption"])


# Actions ---------------------------------------------------------------------


@dataclass(kw_only=True)
class ActionDefinition:
    """Base of all action payloads; the persisted type is derived from the class."""

    name: str

    @property
    def type(self) -> str:
        return lower_hyphen(type(self).__name__)


@dataclass(kw_only=True)
class ActionView(ActionDefinition):
    model: str | None = None
    title: str | None = None
    views: list[str] = field(default_factory=list[str])
    domain: str | None = None


@dataclass(kw_only=True)
class ActionRecord(ActionDefinition):
    model: str
    fields: dict[str, str] = field(default_factory=dict[str, str])


@dataclass(kw_only=True)
class ActionMethod(ActionDefinition):
    call: str
    model: str | None = None


@dataclass(kw_only=True)
class ActionValidate(ActionDefinition):
    checks: list[str] = field(default_factory=list[str])


@dataclass(kw_only=True)
class ActionCondition(ActionDefinition):
    checks: list[str] = field(default_factory=list[str])


@dataclass(kw_only=True)
class ActionGroup(ActionDefinition):
    actions: list[str] = field(default_factory=list[str])


# Menus -----------------------------------------------------------------------


@dataclass(kw_only=True)
class MenuItemDefinition:
    """Used for both menus and action-menus; action-menus ignore the layout hints."""

    name: str
    title: str | None = None
    parent: str | None = None
    action: str | None = None
    icon: str | None = None
    priority: int | None = None
    groups: str | None = None
    top: bool | None = None
    left: bool | None = None
    mobile: bool | None = None
    category: str | None = None


# Batches ---------------------------------------------------------------------


type Definition = ViewDefinition | SelectionDefinition | ActionDefinition | MenuItemDefinition


@dataclass(kw_only=True)
class DefinitionBatch:
    """Definitions parsed from one source file, in declaration order."""

    source: str = "<memory>"
    views: list[ViewDefinition] = field(default_factory=list["ViewDefinition"])
    selections: list[SelectionDefinition] = field(default_factory=list["SelectionDefinition"])
    actions: list[ActionDefinition] = field(default_factory=list["ActionDefinition"])
    menus: list[MenuItemDefinition] = field(default_factory=list["MenuItemDefinition"])
    action_menus: list[MenuItemDefinition] = field(default_factory=list["MenuItemDefinition"])

    def __len__(self) -> int:
        return (
            len(self.views)
            + len(self.selections)
            + len(self.actions)
            + len(self.menus)
            + len(self.action_menus)
        )
