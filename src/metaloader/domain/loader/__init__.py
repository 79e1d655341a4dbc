"""Metadata load pipeline.

Each definition kind has a phase that applies the upsert policy for that kind;
phases share a :class:`LoadSession` carrying the visited tracker and the
pending-reference registry for one load invocation.
"""

from __future__ import annotations

from .actions import ActionPhase, import_action
from .context import LoadCounters, LoadSession
from .defaults import DefaultViewSynthesizer, create_default_views
from .errors import (
    DefinitionParseError,
    InvalidDefinitionError,
    LoadError,
    ModuleDependencyError,
    UnresolvedReferenceError,
)
from .groups import resolve_groups
from .menus import (
    ActionMenuPhase,
    MenuPhase,
    check_menu_cycles,
    import_action_menu,
    import_menu,
)
from .orchestrator import DEFAULT_PHASES, LoaderPhase, LoadResult, MetadataLoader, order_modules
from .selections import SelectionPhase, import_selection
from .tracking import UnresolvedReferenceRegistry, VisitedTracker
from .views import ViewPhase, import_chart, import_view

__all__ = [
    "DEFAULT_PHASES",
    "ActionMenuPhase",
    "ActionPhase",
    "DefaultViewSynthesizer",
    "DefinitionParseError",
    "InvalidDefinitionError",
    "LoadCounters",
    "LoadError",
    "LoadResult",
    "LoadSession",
    "LoaderPhase",
    "MenuPhase",
    "MetadataLoader",
    "ModuleDependencyError",
    "SelectionPhase",
    "UnresolvedReferenceError",
    "UnresolvedReferenceRegistry",
    "ViewPhase",
    "VisitedTracker",
    "check_menu_cycles",
    "create_default_views",
    "import_action",
    "import_action_menu",
    "import_chart",
    "import_menu",
    "import_selection",
    "import_view",
    "order_modules",
    "resolve_groups",
]
