"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from metaloader.adapters.definitions import FileDefinitionSource, JsonDefinitionSerializer
from metaloader.adapters.models import CatalogModelRegistry
from metaloader.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyMetaUnitOfWork,
    is_started,
    startup,
)
from metaloader.config import ConfigurationError, get_loader_config
from metaloader.domain.loader import DefaultViewSynthesizer, MetadataLoader
from metaloader.domain.ports.unit_of_work import MetaUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Sequence

    from metaloader.domain.loader import LoadResult
    from metaloader.domain.model import Module
    from metaloader.domain.ports import ModelRegistry

UnitOfWorkFactory = Callable[[], MetaUnitOfWork]


log = getLogger(__name__)


def build_catalog_registry(source: FileDefinitionSource) -> CatalogModelRegistry:
    """Collect the ``models.json`` catalogs of every module under the source root."""

    registry = CatalogModelRegistry()
    for module in source.discover_modules():
        for model in source.models(module):
            registry.register(model)
    return registry


def resolve_modules(source: FileDefinitionSource, names: Sequence[str]) -> list[Module]:
    if not names:
        return source.discover_modules()
    return [source.module(name) for name in names]


def load_modules(
    names: Sequence[str] = (),
    *,
    path: Path | None = None,
    update: bool = False,
    models: ModelRegistry | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    output_dir: Path | None = None,
    write_generated: bool = True,
) -> LoadResult:
    """Load the named modules (or every module found) in one session.

    ``path`` defaults to ``METALOADER_MODULES_DIR``. Generated default views
    are written below ``output_dir`` (``METALOADER_OUTPUT_DIR``) unless
    ``write_generated`` is off.
    """

    config = get_loader_config()
    root = path or config.modules_dir
    if root is None:
        raise ConfigurationError(
            "No module directory given; pass a path or set METALOADER_MODULES_DIR"
        )

    if unit_of_work_factory is None and not is_started():
        startup()

    source = FileDefinitionSource(Path(root))
    modules = resolve_modules(source, names)
    if not modules:
        raise ConfigurationError(f"No modules found under {root}")

    loader = MetadataLoader(
        source=source,
        models=models or build_catalog_registry(source),
        serializer=JsonDefinitionSerializer(),
        unit_of_work_factory=unit_of_work_factory or SqlAlchemyMetaUnitOfWork,
        synthesizer=DefaultViewSynthesizer(
            output_dir=(output_dir or config.output_dir) if write_generated else None
        ),
    )
    log.info(
        "Starting load: modules=%s, root=%s, update=%s",
        ", ".join(module.name for module in modules),
        root,
        update,
    )

    result = loader.load_all(modules, update=update)

    log.info(
        "Finished load: created=%s, updated=%s, skipped=%s, generated=%s",
        result.counters.created.total(),
        result.counters.updated.total(),
        result.counters.skipped.total(),
        len(result.counters.generated),
    )
    return result
