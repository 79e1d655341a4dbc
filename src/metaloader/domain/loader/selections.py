"""Selection handler: reload replaces the option list wholesale."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from metaloader.domain.model import EntityKind, MetaSelect

if TYPE_CHECKING:
    from metaloader.domain.definitions import DefinitionBatch, SelectionDefinition
    from metaloader.domain.loader.context import LoadSession

log = logging.getLogger(__name__)


@dataclass(slots=True)
class SelectionPhase:
    name: str = "selections"

    def run(self, batch: DefinitionBatch, *, session: LoadSession) -> None:
        for selection in batch.selections:
            import_selection(selection, session=session)


def import_selection(
    selection: SelectionDefinition, *, session: LoadSession
) -> MetaSelect | None:
    if session.visited.is_visited(EntityKind.SELECTION, selection.name):
        log.warning("Skipping duplicate selection: %s", selection.name)
        session.mark_skipped(EntityKind.SELECTION)
        return None

    log.info("Loading selection: %s", selection.name)

    repo = session.repositories.selections
    select = repo.find_by_name(selection.name)
    persisted = select is not None
    if select is None:
        select = MetaSelect(name=selection.name)

    if session.is_up_to_date(select, persisted=persisted):
        session.mark_skipped(EntityKind.SELECTION)
        return None

    select.clear_items()
    select.assign_module(session.module_name)

    for option in selection.options:
        select.add_item(option.value, option.title)

    repo.add(select)
    session.mark_written(select, created=not persisted)
    return select
