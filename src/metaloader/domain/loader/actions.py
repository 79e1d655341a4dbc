"""Action handler; saving an action binds every menu that was waiting for it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from metaloader.domain.model import EntityKind, MetaAction, MetaActionMenu, MetaMenu

if TYPE_CHECKING:
    from metaloader.domain.definitions import ActionDefinition, DefinitionBatch
    from metaloader.domain.loader.context import LoadSession

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ActionPhase:
    name: str = "actions"

    def run(self, batch: DefinitionBatch, *, session: LoadSession) -> None:
        for action in batch.actions:
            import_action(action, session=session)


def import_action(action: ActionDefinition, *, session: LoadSession) -> MetaAction | None:
    if session.visited.is_visited(EntityKind.ACTION, action.name):
        log.warning("Skipping duplicate action: %s", action.name)
        session.mark_skipped(EntityKind.ACTION)
        return None

    log.info("Loading action: %s", action.name)

    repo = session.repositories.actions
    entity = repo.find_by_name(action.name)
    persisted = entity is not None
    if entity is None:
        entity = MetaAction(name=action.name)

    if session.is_up_to_date(entity, persisted=persisted):
        session.mark_skipped(EntityKind.ACTION)
        return None

    entity.body = session.serializer.serialize(action)
    entity.model = getattr(action, "model", None)
    entity.assign_module(session.module_name)
    entity.type = action.type

    repo.add(entity)
    session.mark_written(entity, created=not persisted)

    for pending in session.unresolved.resolve(EntityKind.ACTION, entity.name):
        log.info("Resolved action of %s: %s", pending.kind, pending.name)
        pending.action = entity
        _save_pending(pending, session=session)

    return entity


def _save_pending(pending: MetaMenu | MetaActionMenu, *, session: LoadSession) -> None:
    if isinstance(pending, MetaMenu):
        session.repositories.menus.add(pending)
    else:
        session.repositories.action_menus.add(pending)
    session.counters.resolved[pending.kind] += 1
