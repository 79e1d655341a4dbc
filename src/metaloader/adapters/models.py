"""Model registries: which data-model classes exist and which fields they carry."""

from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from metaloader.domain.ports import FieldInfo, ModelInfo

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)

PRIMARY_FIELD = "id"
VERSION_FIELD = "version"

_COLLECTION_ORIGINS: tuple[type, ...] = (list, set, frozenset, tuple, Iterable)
_COLLECTION_PREFIXES = ("list[", "set[", "frozenset[", "tuple[", "Sequence[", "Iterable[")


class CatalogModelRegistry:
    """Registry over already-described models, keyed by qualified name."""

    def __init__(self, models: Iterable[ModelInfo] = ()) -> None:
        self._models: dict[str, ModelInfo] = {}
        for model in models:
            self.register(model)

    def register(self, model: ModelInfo) -> None:
        if model.name in self._models:
            log.warning("Replacing registered model: %s", model.name)
        self._models[model.name] = model

    def models(self) -> Iterator[ModelInfo]:
        return iter(self._models.values())

    def get(self, name: str) -> ModelInfo | None:
        return self._models.get(name)

    def __len__(self) -> int:
        return len(self._models)


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_collection(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(_COLLECTION_PREFIXES)
    origin = typing.get_origin(hint) or hint
    if not isinstance(origin, type) or issubclass(origin, (str, bytes, Mapping)):
        return False
    return issubclass(origin, _COLLECTION_ORIGINS)


def _own_annotations(cls: type) -> dict[str, Any]:
    own = inspect.get_annotations(cls)
    if dataclasses.is_dataclass(cls):
        return {f.name: f.type for f in dataclasses.fields(cls) if f.name in own}
    return own


def reflect_fields(cls: type) -> tuple[FieldInfo, ...]:
    """Fields of ``cls``, inherited ones first; private and class-level names are skipped."""

    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        # annotations referencing names only imported for type checking
        hints = {}

    fields: dict[str, FieldInfo] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, raw in _own_annotations(klass).items():
            if name.startswith("_") or name in fields:
                continue
            hint = hints.get(name, raw)
            if typing.get_origin(hint) is ClassVar or (
                isinstance(hint, str) and hint.startswith("ClassVar")
            ):
                continue
            fields[name] = FieldInfo(
                name=name,
                collection=_is_collection(hint),
                primary=name == PRIMARY_FIELD,
                version=name == VERSION_FIELD,
            )
    return tuple(fields.values())


class ReflectingModelRegistry(CatalogModelRegistry):
    """Registry fed with annotated Python classes, typically dataclasses.

    >>> registry = ReflectingModelRegistry()
    >>> registry.register_class(SaleOrder, module="sales")  # doctest: +SKIP
    """

    def register_class(self, cls: type, *, module: str, name: str | None = None) -> ModelInfo:
        info = ModelInfo(
            name=name or qualified_name(cls),
            module=module,
            fields=reflect_fields(cls),
        )
        self.register(info)
        return info
