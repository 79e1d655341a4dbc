"""Errors raised while loading module definitions.

Everything here aborts the whole session: the caller rolls back the unit of
work and retries once the offending definition is fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from metaloader.domain.model import EntityKind


class LoadError(RuntimeError):
    """Base class for failed load sessions."""


class InvalidDefinitionError(LoadError):
    """Raised for malformed definitions (missing or unknown model, menu cycles)."""


class DefinitionParseError(LoadError):
    """Raised when a definition source file cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Unable to parse {source}: {reason}")
        self.source = source


class ModuleDependencyError(LoadError):
    """Raised when modules in a multi-module load depend on unknown or cyclic modules."""


class UnresolvedReferenceError(LoadError):
    """Raised at the end of a session when references were never satisfied."""

    def __init__(self, unresolved: Iterable[tuple[EntityKind, str]]) -> None:
        self.unresolved = frozenset(unresolved)
        listing = ", ".join(f"{kind}:{name}" for kind, name in sorted(self.unresolved))
        super().__init__(f"Unresolved references: {listing}")
