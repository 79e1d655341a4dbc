"""Default form/grid views for models that ship without any view."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from metaloader.domain.definitions import FieldItem, FormView, GridView, lower_hyphen
from metaloader.domain.loader.views import import_view

if TYPE_CHECKING:
    from pathlib import Path

    from metaloader.domain.loader.context import LoadSession
    from metaloader.domain.ports import FieldInfo, ModelInfo

log = logging.getLogger(__name__)

# identity, optimistic locking and audit columns never show up in generated views
EXCLUDED_FIELDS: Final[re.Pattern[str]] = re.compile(
    r"id|version|selected|created_?(by|on)|updated_?(by|on)",
    re.IGNORECASE,
)

COLLECTION_COL_SPAN: Final[int] = 4


def default_view_fields(model: ModelInfo) -> list[FieldInfo]:
    return [
        field
        for field in model.fields
        if not field.primary and not field.version and not EXCLUDED_FIELDS.fullmatch(field.name)
    ]


def create_default_views(model: ModelInfo) -> tuple[FormView, GridView]:
    """Build ``<slug>-form`` (every field) and ``<slug>-grid`` (no collections)."""

    name = lower_hyphen(model.simple_name)
    title = model.simple_name

    form_items: list[FieldItem] = []
    grid_items: list[FieldItem] = []
    for field in default_view_fields(model):
        if field.collection:
            form_items.append(
                FieldItem(name=field.name, col_span=COLLECTION_COL_SPAN, show_title=False)
            )
            continue
        item = FieldItem(name=field.name)
        grid_items.append(item)
        form_items.append(item)

    form = FormView(name=f"{name}-form", title=title, model=model.name, items=form_items)
    grid = GridView(name=f"{name}-grid", title=title, model=model.name, items=grid_items)
    return form, grid


@dataclass(slots=True)
class DefaultViewSynthesizer:
    """Feeds generated views through the regular view policy, never as an update.

    When ``output_dir`` is set, each generated pair is also written to
    ``<output_dir>/views/<Model>.json``. That file is advisory: failing to
    write it is logged and never fails the load.
    """

    output_dir: Path | None = None

    def run(self, *, session: LoadSession) -> list[ModelInfo]:
        generated: list[ModelInfo] = []
        for model in session.models.models():
            if model.module != session.module_name:
                continue
            if session.repositories.views.count_by_model(model.name) > 0:
                continue

            log.info("Creating default views: %s", model.name)
            form, grid = create_default_views(model)
            import_view(form, session=session, update=False)
            import_view(grid, session=session, update=False)
            generated.append(model)

            if self.output_dir is not None:
                text = session.serializer.serialize_document([grid, form])
                self._write(self.output_dir, model, text, session=session)
        return generated

    @staticmethod
    def _write(output_dir: Path, model: ModelInfo, text: str, *, session: LoadSession) -> None:
        target = output_dir / "views" / f"{model.simple_name}.json"
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError:
            log.error("Unable to create: %s", target)  # noqa: TRY400
            return
        log.info("Generated default views: %s", target)
        session.counters.generated.append(target)
