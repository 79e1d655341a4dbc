"""View and chart handlers.

Views are the one kind allowed to share a logical name: a module may override
another module's view by declaring the same name under a different xml id.
The newcomer is stored next to the existing record with a higher priority and
read-time resolution picks the highest priority. Views without an xml id are
matched within their own module only and are stored with priority 0.
"""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from typing import TYPE_CHECKING

from metaloader.domain.definitions import ChartView
from metaloader.domain.loader.errors import InvalidDefinitionError
from metaloader.domain.model import (
    EntityKind,
    MetaChart,
    MetaChartConfig,
    MetaChartSeries,
    MetaView,
)

if TYPE_CHECKING:
    from metaloader.domain.definitions import DefinitionBatch, ViewDefinition
    from metaloader.domain.loader.context import LoadSession

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ViewPhase:
    name: str = "views"

    def run(self, batch: DefinitionBatch, *, session: LoadSession) -> None:
        for view in batch.views:
            import_view(view, session=session)


def _resolve_model(view: ViewDefinition, session: LoadSession) -> str | None:
    if view.type.is_model_less:
        return None
    if view.model is None or not view.model.strip():
        raise InvalidDefinitionError(f"Invalid view {view.name!r}, model name missing.")
    info = session.models.get(view.model.strip())
    if info is None:
        raise InvalidDefinitionError(f"Invalid view {view.name!r}, model not found: {view.model}")
    return info.name


def import_view(
    view: ViewDefinition, *, session: LoadSession, update: bool | None = None
) -> MetaView | None:
    """Upsert ``view``; returns the written record or ``None`` when skipped.

    ``update`` overrides the session's update flag for this view only.
    """

    xml_id = view.id
    if xml_id is not None and session.visited.is_visited(EntityKind.VIEW, xml_id):
        log.warning("Skipping duplicate view id: %s", xml_id)
        session.mark_skipped(EntityKind.VIEW)
        return None

    log.info("Loading view: %s", view.name)

    model = _resolve_model(view, session)

    if isinstance(view, ChartView):
        import_chart(view, session=session)
        return None

    repo = session.repositories.views
    existing = (
        repo.find_by_xml_id(xml_id)
        if xml_id is not None
        else repo.find_by_module(view.name, session.module_name)
    )

    entity: MetaView
    persisted = existing is not None
    if existing is not None:
        entity = existing
    else:
        entity = MetaView(name=view.name)
        same_name = repo.find_by_name(view.name) if xml_id is not None else []
        if same_name:
            # override of a view owned under another id
            entity.priority = max(other.priority for other in same_name) + 1
            log.info(
                "View %s overrides %d existing record(s) with priority %d",
                view.name,
                len(same_name),
                entity.priority,
            )

    forced = session.update if update is None else update
    if session.is_up_to_date(entity, persisted=persisted, update=forced):
        if persisted and xml_id is None and not forced:
            log.warning("Duplicate view without id: %s", view.name)
        session.mark_skipped(EntityKind.VIEW)
        return None

    entity.xml_id = xml_id
    entity.title = view.default_title
    entity.type = view.type.value
    entity.model = model
    entity.assign_module(session.module_name)
    entity.body = session.serializer.serialize(view)

    repo.add(entity)
    session.mark_written(entity, created=not persisted)
    return entity


def import_chart(view: ChartView, *, session: LoadSession) -> MetaChart | None:
    if session.visited.is_visited(EntityKind.CHART, view.name):
        log.warning("Skipping duplicate chart: %s", view.name)
        session.mark_skipped(EntityKind.CHART)
        return None

    log.info("Loading chart: %s", view.name)

    repo = session.repositories.charts
    entity = repo.find_by_name(view.name)
    persisted = entity is not None
    if entity is None:
        entity = MetaChart(name=view.name)

    if session.is_up_to_date(entity, persisted=persisted):
        session.mark_skipped(EntityKind.CHART)
        return None

    entity.clear_series()
    entity.clear_config()

    entity.assign_module(session.module_name)
    entity.title = view.default_title
    entity.stacked = view.stacked

    entity.query = textwrap.dedent(view.query.text).strip()
    entity.query_type = view.query.type

    entity.category_key = view.category.key
    entity.category_type = view.category.type
    entity.category_title = view.category.title

    for series in view.series:
        entity.add_series(
            MetaChartSeries(
                key=series.key,
                group_by=series.group_by,
                type=series.type,
                side=series.side,
                aggregate=series.aggregate,
            )
        )

    for config in view.config or ():
        entity.add_config(MetaChartConfig(name=config.name, value=config.value))

    repo.add(entity)
    session.mark_written(entity, created=not persisted)
    return entity

