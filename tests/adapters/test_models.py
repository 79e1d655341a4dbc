from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from metaloader.adapters.models import (
    CatalogModelRegistry,
    ReflectingModelRegistry,
    qualified_name,
    reflect_fields,
)
from metaloader.domain.ports import ModelInfo


@dataclass
class _AuditedModel:
    id: int = 0
    version: int = 0
    created_on: str | None = None


@dataclass
class SaleOrder(_AuditedModel):
    TABLE: ClassVar[str] = "sale_order"

    name: str = ""
    amount: float = 0.0
    lines: list[str] = field(default_factory=list[str])
    tags: set[str] = field(default_factory=set[str])
    options: dict[str, str] = field(default_factory=dict[str, str])
    _cache: dict[str, str] = field(default_factory=dict[str, str])


def test_reflect_fields_lists_inherited_fields_first() -> None:
    fields = reflect_fields(SaleOrder)

    assert [info.name for info in fields] == [
        "id",
        "version",
        "created_on",
        "name",
        "amount",
        "lines",
        "tags",
        "options",
    ]


def test_reflect_fields_flags_identity_version_and_collections() -> None:
    by_name = {info.name: info for info in reflect_fields(SaleOrder)}

    assert by_name["id"].primary
    assert by_name["version"].version
    assert by_name["lines"].collection
    assert by_name["tags"].collection
    assert not by_name["options"].collection
    assert not by_name["name"].collection


def test_reflecting_registry_registers_qualified_names() -> None:
    registry = ReflectingModelRegistry()

    info = registry.register_class(SaleOrder, module="sale")

    assert info.name == qualified_name(SaleOrder)
    assert info.simple_name == "SaleOrder"
    assert registry.get(info.name) is info
    assert list(registry.models()) == [info]


def test_catalog_registry_lookup() -> None:
    model = ModelInfo(name="com.example.Partner", module="base")
    registry = CatalogModelRegistry([model])

    assert registry.get("com.example.Partner") is model
    assert registry.get("Partner") is None
    assert len(registry) == 1
