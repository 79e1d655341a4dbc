"""Load orchestrator: batches in file order, kinds in a fixed order.

Within each batch the phases run views, selections, actions, menus and then
action-menus. Once every module of the session is processed the pending
reference registry must be empty and no menu parent chain may loop;
otherwise the whole session fails and the unit of work rolls back. Default
views are synthesized last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from metaloader.domain.loader.actions import ActionPhase
from metaloader.domain.loader.context import LoadCounters, LoadSession
from metaloader.domain.loader.defaults import DefaultViewSynthesizer
from metaloader.domain.loader.errors import (
    LoadError,
    ModuleDependencyError,
    UnresolvedReferenceError,
)
from metaloader.domain.loader.menus import ActionMenuPhase, MenuPhase, check_menu_cycles
from metaloader.domain.loader.selections import SelectionPhase
from metaloader.domain.loader.views import ViewPhase

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from metaloader.domain.definitions import DefinitionBatch
    from metaloader.domain.model import Module
    from metaloader.domain.ports import (
        DefinitionSerializer,
        DefinitionSource,
        MetaUnitOfWork,
        ModelRegistry,
    )

log = logging.getLogger(__name__)


class LoaderPhase(Protocol):
    """Contract implemented by each per-kind handler."""

    name: str

    def run(self, batch: DefinitionBatch, *, session: LoadSession) -> None: ...


DEFAULT_PHASES: tuple[LoaderPhase, ...] = (
    ViewPhase(),
    SelectionPhase(),
    ActionPhase(),
    MenuPhase(),
    ActionMenuPhase(),
)


@dataclass(slots=True)
class LoadResult:
    """Outcome of a committed load session."""

    modules: tuple[str, ...]
    counters: LoadCounters


def order_modules(modules: Iterable[Module]) -> list[Module]:
    """Order ``modules`` so that dependencies come first, keeping input order otherwise.

    Dependencies outside the given set are assumed to be installed already.
    """

    by_name: dict[str, Module] = {}
    for module in modules:
        if module.name in by_name:
            raise ModuleDependencyError(f"Module listed twice: {module.name}")
        by_name[module.name] = module

    ordered: list[Module] = []
    state: dict[str, bool] = {}  # False while visiting, True once placed

    def visit(module: Module, path: tuple[str, ...]) -> None:
        placed = state.get(module.name)
        if placed:
            return
        if placed is False:
            cycle = " -> ".join((*path, module.name))
            raise ModuleDependencyError(f"Cyclic module dependency: {cycle}")
        state[module.name] = False
        for dependency in module.depends:
            if dependency in by_name:
                visit(by_name[dependency], (*path, module.name))
        state[module.name] = True
        ordered.append(module)

    for module in by_name.values():
        visit(module, ())
    return ordered


@dataclass(slots=True)
class MetadataLoader:
    """Entry point merging module definitions into the metadata store."""

    source: DefinitionSource
    models: ModelRegistry
    serializer: DefinitionSerializer
    unit_of_work_factory: Callable[[], MetaUnitOfWork]
    synthesizer: DefaultViewSynthesizer | None = field(default_factory=DefaultViewSynthesizer)
    phases: Sequence[LoaderPhase] = DEFAULT_PHASES

    def load(self, module: Module, *, update: bool = False) -> LoadResult:
        """Load one module in its own session; raises :class:`LoadError` on failure."""

        return self.load_all([module], update=update)

    def load_all(self, modules: Iterable[Module], *, update: bool = False) -> LoadResult:
        """Load several modules in one session, dependencies first."""

        ordered = order_modules(modules)
        if not ordered:
            raise LoadError("No modules to load")

        with self.unit_of_work_factory() as uow:
            session = LoadSession(
                module=ordered[0],
                update=update,
                repositories=uow.repositories,
                models=self.models,
                serializer=self.serializer,
            )
            for module in ordered:
                session.module = module
                self._process_module(session)

            check_menu_cycles(session)
            self._check_unresolved(session)

            if self.synthesizer is not None:
                for module in ordered:
                    session.module = module
                    self.synthesizer.run(session=session)

            uow.commit()

        log.info(
            "Loaded %s: written=%s, skipped=%s, resolved=%s",
            ", ".join(module.name for module in ordered),
            session.counters.written,
            session.counters.skipped.total(),
            session.counters.resolved.total(),
        )
        return LoadResult(
            modules=tuple(module.name for module in ordered),
            counters=session.counters,
        )

    def _process_module(self, session: LoadSession) -> None:
        for batch in self.source.batches(session.module):
            log.info("Importing: %s", batch.source)
            for phase in self.phases:
                phase.run(batch, session=session)

    @staticmethod
    def _check_unresolved(session: LoadSession) -> None:
        unresolved = session.unresolved.unresolved_keys()
        if unresolved:
            log.error("Unresolved items: %s", sorted(unresolved))
            raise UnresolvedReferenceError(unresolved)
