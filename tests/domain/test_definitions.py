from __future__ import annotations

import pytest

from metaloader.domain.definitions import (
    ActionCondition,
    ActionRecord,
    ActionView,
    DefinitionBatch,
    FormView,
    MenuItemDefinition,
    PortalView,
    lower_hyphen,
)
from metaloader.domain.model import ViewType


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("ActionView", "action-view"),
        ("SaleOrderLine", "sale-order-line"),
        ("HTTPRequest", "http-request"),
        ("Partner", "partner"),
    ],
)
def test_lower_hyphen(name: str, expected: str) -> None:
    assert lower_hyphen(name) == expected


def test_action_type_comes_from_class_name() -> None:
    assert ActionView(name="a").type == "action-view"
    assert ActionRecord(name="b", model="x").type == "action-record"
    assert ActionCondition(name="c").type == "action-condition"


def test_view_type_is_class_level() -> None:
    assert FormView(name="f").type is ViewType.FORM
    assert PortalView(name="p").type is ViewType.PORTAL


def test_batch_length_counts_every_kind() -> None:
    batch = DefinitionBatch(
        views=[FormView(name="f")],
        actions=[ActionView(name="a")],
        menus=[MenuItemDefinition(name="m")],
        action_menus=[MenuItemDefinition(name="am")],
    )

    assert len(batch) == 4
