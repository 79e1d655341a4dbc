"""Canonical JSON text for stored definition bodies and generated files.

The output of :meth:`JsonDefinitionSerializer.serialize_document` is itself a
valid definition document, so a generated view file can be copied into a
module's ``views`` directory and loaded like any hand-written one.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from metaloader.domain.definitions import ActionDefinition, ViewDefinition

if TYPE_CHECKING:
    from collections.abc import Sequence

    from metaloader.domain.definitions import Definition

_JSON_OBJECT: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


@cache
def _adapter(definition_type: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(definition_type)


def definition_payload(definition: Definition) -> dict[str, Any]:
    """Plain JSON-compatible mapping for ``definition``, tagged with its type when it has one."""

    payload: dict[str, Any] = _adapter(type(definition)).dump_python(
        definition, mode="json", exclude_none=True
    )
    if isinstance(definition, ViewDefinition):
        return {"type": definition.type.value, **payload}
    if isinstance(definition, ActionDefinition):
        return {"type": definition.type, **payload}
    return payload


@dataclass(slots=True)
class JsonDefinitionSerializer:
    indent: int | None = 2

    def serialize(self, definition: Definition) -> str:
        return self._dump(definition_payload(definition))

    def serialize_document(self, views: Sequence[ViewDefinition]) -> str:
        return self._dump({"views": [definition_payload(view) for view in views]})

    def _dump(self, payload: dict[str, Any]) -> str:
        return _JSON_OBJECT.dump_json(payload, indent=self.indent).decode("utf-8")
