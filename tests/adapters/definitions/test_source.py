from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest

from metaloader.adapters.definitions import FileDefinitionSource
from metaloader.domain.definitions import ChartView
from metaloader.domain.loader import DefinitionParseError
from metaloader.domain.model import Module


def test_batches_follow_file_name_order(modules_root: Path) -> None:
    source = FileDefinitionSource(modules_root)

    batches = list(source.batches(Module(name="sale")))

    assert [Path(batch.source).name for batch in batches] == [
        "01_menus.json",
        "02_actions.json",
        "03_overrides.json",
    ]
    assert [item.name for item in batches[0].menus] == ["menu-sales", "menu-sale-orders"]
    assert isinstance(batches[1].views[0], ChartView)


def test_module_without_views_directory_yields_nothing(tmp_path: Path) -> None:
    source = FileDefinitionSource(tmp_path)

    assert list(source.batches(Module(name="empty"))) == []


def test_invalid_file_raises_parse_error(tmp_path: Path) -> None:
    views_dir = tmp_path / "broken" / "views"
    views_dir.mkdir(parents=True)
    bad = views_dir / "01.json"
    bad.write_text('{"views": [{"type": "form"}]}', encoding="utf-8")

    with pytest.raises(DefinitionParseError) as excinfo:
        list(FileDefinitionSource(tmp_path).batches(Module(name="broken")))

    assert excinfo.value.source == str(bad)


def test_malformed_json_raises_parse_error(tmp_path: Path) -> None:
    views_dir = tmp_path / "broken" / "views"
    views_dir.mkdir(parents=True)
    (views_dir / "01.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DefinitionParseError):
        list(FileDefinitionSource(tmp_path).batches(Module(name="broken")))


def test_manifest_and_discovery(modules_root: Path) -> None:
    source = FileDefinitionSource(modules_root)

    modules = source.discover_modules()

    assert [module.name for module in modules] == ["base", "sale"]
    assert modules[1].depends == ("base",)
    assert modules[1].title == "Sales"
    assert source.module("missing") == Module(name="missing")


def test_model_catalog_is_read_per_module(modules_root: Path) -> None:
    source = FileDefinitionSource(modules_root)

    [partner] = source.models("base")

    assert partner.name == "com.example.base.Partner"
    assert partner.module == "base"
    assert [field.name for field in partner.fields if field.collection] == ["addresses"]
    assert source.models("missing") == []
