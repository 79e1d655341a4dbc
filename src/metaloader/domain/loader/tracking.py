"""Session-scoped bookkeeping: visited names and pending references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from metaloader.domain.model import EntityKind

type TrackingKey = tuple[EntityKind, str]


@dataclass(slots=True)
class VisitedTracker:
    """Remembers which ``(kind, name)`` pairs were already processed."""

    _seen: set[TrackingKey] = field(default_factory=set[TrackingKey])

    def is_visited(self, kind: EntityKind, name: str) -> bool:
        """Return ``True`` for repeats; the first call marks the pair as visited."""
        key = (kind, name)
        if key in self._seen:
            return True
        self._seen.add(key)
        return False

    def __len__(self) -> int:
        return len(self._seen)


@dataclass(slots=True)
class UnresolvedReferenceRegistry:
    """Entities waiting for a target that has not been saved yet.

    Keys name the *target*: ``(EntityKind.ACTION, "open-orders")`` collects every
    menu waiting for that action. Lists keep registration order and are handed
    over exactly once by :meth:`resolve`.
    """

    _pending: dict[TrackingKey, list[Any]] = field(default_factory=dict[TrackingKey, list[Any]])

    def set_unresolved(self, kind: EntityKind, target: str, waiting: object) -> None:
        self._pending.setdefault((kind, target), []).append(waiting)

    def resolve(self, kind: EntityKind, target: str) -> list[Any]:
        return self._pending.pop((kind, target), [])

    def unresolved_keys(self) -> set[TrackingKey]:
        return set(self._pending)

    def clear(self) -> None:
        self._pending.clear()
