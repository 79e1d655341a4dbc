from __future__ import annotations

import pytest

from metaloader.domain.model import (
    EntityKind,
    MetaActionMenu,
    MetaChart,
    MetaChartSeries,
    MetaMenu,
    MetaSelect,
    Module,
    ViewType,
)


def test_entities_get_identity_on_creation() -> None:
    first = MetaMenu(name="menu")
    second = MetaMenu(name="menu")

    assert first.id != second.id
    assert first != second
    assert first.kind is EntityKind.MENU


def test_select_items_are_numbered_and_cleared() -> None:
    select = MetaSelect(name="status")
    select.add_item("b", "B")
    select.add_item("a")

    assert [(item.value, item.order) for item in select.items] == [("b", 0), ("a", 1)]

    select.clear_items()
    select.add_item("c")

    assert [(item.value, item.order) for item in select.items] == [("c", 0)]


def test_chart_series_order_follows_insertion() -> None:
    chart = MetaChart(name="chart")
    chart.add_series(MetaChartSeries(key="x"))
    chart.add_series(MetaChartSeries(key="y"))

    assert [series.order for series in chart.series] == [0, 1]


def test_menu_parent_chain_and_cycle_detection() -> None:
    root = MetaMenu(name="root")
    child = MetaMenu(name="child")
    leaf = MetaMenu(name="leaf")
    child.set_parent(root)
    leaf.set_parent(child)

    assert leaf.ancestors() == (child, root)

    with pytest.raises(ValueError, match="cycle"):
        root.set_parent(leaf)

    root.set_parent(None)
    assert root.parent is None


def test_cycle_check_stops_at_unsettled_ancestor() -> None:
    first = MetaMenu(name="first")
    second = MetaMenu(name="second")
    second.set_parent(first)

    first.set_parent(second, settled=lambda menu: menu is not second)

    assert first.parent is second
    with pytest.raises(ValueError, match="cycle"):
        first.set_parent(second, settled=lambda _: True)


def test_action_menu_rejects_self_parent() -> None:
    menu = MetaActionMenu(name="print")

    with pytest.raises(ValueError, match="cycle"):
        menu.set_parent(menu)


def test_module_names_must_not_be_blank() -> None:
    with pytest.raises(ValueError, match="blank"):
        Module(name="  ")


def test_model_less_view_types() -> None:
    assert ViewType.TREE.is_model_less
    assert ViewType.CHART.is_model_less
    assert not ViewType.FORM.is_model_less
    assert not ViewType.GRID.is_model_less
