"""In-memory fakes for loader tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from metaloader.adapters.definitions import JsonDefinitionSerializer
from metaloader.adapters.models import CatalogModelRegistry
from metaloader.domain.loader import LoadSession
from metaloader.domain.model import (
    Group,
    MetaAction,
    MetaActionMenu,
    MetaChart,
    MetaMenu,
    MetaSelect,
    MetaView,
    Module,
)
from metaloader.domain.ports import FieldInfo, MetaRepositories, ModelInfo

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from types import TracebackType

    from metaloader.domain.definitions import DefinitionBatch
    from metaloader.domain.model import ModuleOwned


SALE_ORDER = "com.example.sale.SaleOrder"
SALE_ORDER_LINE = "com.example.sale.SaleOrderLine"


def make_model(
    name: str = SALE_ORDER,
    *,
    module: str = "sale",
    fields: Sequence[FieldInfo] | None = None,
) -> ModelInfo:
    if fields is None:
        fields = (
            FieldInfo(name="id", primary=True),
            FieldInfo(name="version", version=True),
            FieldInfo(name="name"),
            FieldInfo(name="amount"),
            FieldInfo(name="lines", collection=True),
            FieldInfo(name="createdOn"),
        )
    return ModelInfo(name=name, module=module, fields=tuple(fields))


class FakeViewRepository:
    def __init__(self) -> None:
        self.items: list[MetaView] = []

    def add(self, entity: MetaView) -> None:
        if entity not in self.items:
            self.items.append(entity)

    def find_by_xml_id(self, xml_id: str) -> MetaView | None:
        return next((view for view in self.items if view.xml_id == xml_id), None)

    def find_by_module(self, name: str, module: str) -> MetaView | None:
        matches = [view for view in self.items if view.name == name and view.module == module]
        return max(matches, key=lambda view: view.priority, default=None)

    def find_by_name(self, name: str) -> list[MetaView]:
        matches = [view for view in self.items if view.name == name]
        return sorted(matches, key=lambda view: view.priority, reverse=True)

    def count_by_model(self, model: str) -> int:
        return sum(1 for view in self.items if view.model == model)


class FakeNamedRepository[TEntity: ModuleOwned]:
    def __init__(self) -> None:
        self.items: list[TEntity] = []
        self.add_calls = 0

    def add(self, entity: TEntity) -> None:
        self.add_calls += 1
        if entity not in self.items:
            self.items.append(entity)

    def find_by_name(self, name: str) -> TEntity | None:
        return next((item for item in self.items if item.name == name), None)


class FakeGroupRepository:
    def __init__(self) -> None:
        self.items: list[Group] = []

    def add(self, entity: Group) -> None:
        if entity not in self.items:
            self.items.append(entity)

    def find_by_code(self, code: str) -> Group | None:
        return next((group for group in self.items if group.code == code), None)


@dataclass
class FakeRepositories:
    views: FakeViewRepository = field(default_factory=FakeViewRepository)
    selections: FakeNamedRepository[MetaSelect] = field(default_factory=FakeNamedRepository)
    actions: FakeNamedRepository[MetaAction] = field(default_factory=FakeNamedRepository)
    menus: FakeNamedRepository[MetaMenu] = field(default_factory=FakeNamedRepository)
    action_menus: FakeNamedRepository[MetaActionMenu] = field(
        default_factory=FakeNamedRepository
    )
    charts: FakeNamedRepository[MetaChart] = field(default_factory=FakeNamedRepository)
    groups: FakeGroupRepository = field(default_factory=FakeGroupRepository)

    def as_ports(self) -> MetaRepositories:
        return MetaRepositories(
            views=self.views,
            selections=self.selections,
            actions=self.actions,
            menus=self.menus,
            action_menus=self.action_menus,
            charts=self.charts,
            groups=self.groups,
        )


class FakeUnitOfWork:
    """Keeps writes in shared fake repositories; counts commits and rollbacks."""

    def __init__(self, store: FakeRepositories) -> None:
        self._store = store
        self.committed = False
        self.rolled_back = False

    @property
    def repositories(self) -> MetaRepositories:
        return self._store.as_ports()

    def __enter__(self) -> FakeUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True


@dataclass
class FakeUnitOfWorkFactory:
    store: FakeRepositories = field(default_factory=FakeRepositories)
    created: list[FakeUnitOfWork] = field(default_factory=list["FakeUnitOfWork"])

    def __call__(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork(self.store)
        self.created.append(uow)
        return uow

    @property
    def last(self) -> FakeUnitOfWork:
        return self.created[-1]


@dataclass
class StaticDefinitionSource:
    """Definition source returning prepared batches per module name."""

    batches_by_module: dict[str, list[DefinitionBatch]] = field(
        default_factory=dict[str, list["DefinitionBatch"]]
    )
    requested: list[str] = field(default_factory=list[str])

    def add(self, module: str, *batches: DefinitionBatch) -> None:
        self.batches_by_module.setdefault(module, []).extend(batches)

    def batches(self, module: Module) -> Iterator[DefinitionBatch]:
        self.requested.append(module.name)
        yield from self.batches_by_module.get(module.name, [])


def make_registry(models: Iterable[ModelInfo] | None = None) -> CatalogModelRegistry:
    if models is None:
        models = (make_model(),)
    return CatalogModelRegistry(models)


def make_session(
    *,
    module: str = "sale",
    update: bool = False,
    store: FakeRepositories | None = None,
    models: Iterable[ModelInfo] | None = None,
) -> LoadSession:
    return LoadSession(
        module=Module(name=module),
        update=update,
        repositories=(store or FakeRepositories()).as_ports(),
        models=make_registry(models),
        serializer=JsonDefinitionSerializer(),
    )
