"""Ports for the collaborators feeding the loader: definitions, models, serialization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from metaloader.domain.definitions import Definition, DefinitionBatch, ViewDefinition
    from metaloader.domain.model import Module


@runtime_checkable
class DefinitionSource(Protocol):
    """Yields one parsed batch per source file of ``module``, in file order."""

    def batches(self, module: Module) -> Iterable[DefinitionBatch]: ...


@dataclass(frozen=True, slots=True)
class FieldInfo:
    name: str
    collection: bool = False
    primary: bool = False
    version: bool = False


@dataclass(frozen=True, slots=True)
class ModelInfo:
    """Reflected data-model class: qualified name, owning module and fields.

    ``fields`` lists inherited fields first, then the ones declared on the class.
    """

    name: str
    module: str
    fields: tuple[FieldInfo, ...] = ()

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


@runtime_checkable
class ModelRegistry(Protocol):
    """Enumerates the data-model classes known to the system."""

    def models(self) -> Iterable[ModelInfo]: ...

    def get(self, name: str) -> ModelInfo | None: ...


@runtime_checkable
class DefinitionSerializer(Protocol):
    """Turns definitions into their canonical text form (opaque to the loader)."""

    def serialize(self, definition: Definition) -> str: ...

    def serialize_document(self, views: Sequence[ViewDefinition]) -> str: ...
