"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Discriminator for visited tracking, pending references and counters."""

    VIEW = "view"
    CHART = "chart"
    SELECTION = "selection"
    ACTION = "action"
    MENU = "menu"
    ACTION_MENU = "action-menu"
    GROUP = "group"


class ViewType(StrEnum):
    FORM = "form"
    GRID = "grid"
    TREE = "tree"
    CHART = "chart"
    PORTAL = "portal"
    SEARCH = "search"

    @property
    def is_model_less(self) -> bool:
        return self in MODEL_LESS_VIEW_TYPES


MODEL_LESS_VIEW_TYPES: frozenset[ViewType] = frozenset(
    {ViewType.TREE, ViewType.CHART, ViewType.PORTAL, ViewType.SEARCH}
)
