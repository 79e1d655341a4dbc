"""Per-session state shared by every loader phase."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from metaloader.domain.loader.tracking import UnresolvedReferenceRegistry, VisitedTracker

if TYPE_CHECKING:
    from pathlib import Path
    from uuid import UUID

    from metaloader.domain.model import Entity, EntityKind, Module
    from metaloader.domain.ports import DefinitionSerializer, MetaRepositories, ModelRegistry


@dataclass(slots=True)
class LoadCounters:
    """Per-kind tallies reported back to the caller."""

    created: Counter[EntityKind] = field(default_factory=Counter["EntityKind"])
    updated: Counter[EntityKind] = field(default_factory=Counter["EntityKind"])
    skipped: Counter[EntityKind] = field(default_factory=Counter["EntityKind"])
    resolved: Counter[EntityKind] = field(default_factory=Counter["EntityKind"])
    generated: list[Path] = field(default_factory=list["Path"])

    @property
    def written(self) -> int:
        return self.created.total() + self.updated.total()


@dataclass(slots=True)
class LoadSession:
    """Mutable context for one load invocation.

    A session is created per :meth:`MetadataLoader.load` call and never shared:
    the visited tracker and the pending-reference registry must not leak
    between loads. ``module`` is the module whose definitions are currently
    being processed and changes while a multi-module session advances.
    """

    module: Module
    update: bool
    repositories: MetaRepositories
    models: ModelRegistry
    serializer: DefinitionSerializer
    visited: VisitedTracker = field(default_factory=VisitedTracker)
    unresolved: UnresolvedReferenceRegistry = field(default_factory=UnresolvedReferenceRegistry)
    counters: LoadCounters = field(default_factory=LoadCounters)
    _written: dict[UUID, Entity] = field(default_factory=dict["UUID", "Entity"])

    @property
    def module_name(self) -> str:
        return self.module.name

    def is_up_to_date(
        self, entity: Entity, *, persisted: bool, update: bool | None = None
    ) -> bool:
        """Update gate: ``True`` when the write for ``entity`` must be skipped.

        Records already written in this session are never written twice; records
        persisted by an earlier load are only rewritten when an update was requested.
        ``update`` overrides the session flag for a single write.
        """

        if self.was_written(entity):
            return True
        return persisted and not (self.update if update is None else update)

    def was_written(self, entity: Entity) -> bool:
        return entity.id in self._written

    def written[TEntity: Entity](self, entity_type: type[TEntity]) -> list[TEntity]:
        """Records of ``entity_type`` written so far in this session, in write order."""
        return [entity for entity in self._written.values() if isinstance(entity, entity_type)]

    def mark_written(self, entity: Entity, *, created: bool) -> None:
        self._written[entity.id] = entity
        if created:
            self.counters.created[entity.kind] += 1
        else:
            self.counters.updated[entity.kind] += 1

    def mark_skipped(self, kind: EntityKind) -> None:
        self.counters.skipped[kind] += 1
