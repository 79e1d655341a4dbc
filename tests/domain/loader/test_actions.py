from __future__ import annotations

import json

from metaloader.domain.definitions import ActionGroup, ActionMethod, ActionView, MenuItemDefinition
from metaloader.domain.loader import import_action, import_action_menu, import_menu
from metaloader.domain.model import EntityKind
from tests.helpers.metadata import SALE_ORDER, FakeRepositories, make_session


def test_action_type_and_model_are_derived_from_definition() -> None:
    action = import_action(
        ActionView(name="action-orders", model=SALE_ORDER, views=["order-grid"]),
        session=make_session(),
    )

    assert action is not None
    assert action.type == "action-view"
    assert action.model == SALE_ORDER
    assert action.module == "sale"
    assert action.body is not None
    assert json.loads(action.body)["views"] == ["order-grid"]


def test_action_without_model_stores_none() -> None:
    action = import_action(
        ActionGroup(name="action-batch", actions=["a", "b"]), session=make_session()
    )

    assert action is not None
    assert action.type == "action-group"
    assert action.model is None


def test_saving_action_binds_waiting_menus_and_action_menus() -> None:
    store = FakeRepositories()
    session = make_session(store=store)
    menu = import_menu(
        MenuItemDefinition(name="menu-orders", action="action-orders"), session=session
    )
    action_menu = import_action_menu(
        MenuItemDefinition(name="print-orders", action="action-orders"), session=session
    )
    assert menu is not None
    assert action_menu is not None
    assert menu.action is None

    action = import_action(ActionMethod(name="action-orders", call="Orders:run"), session=session)

    assert menu.action is action
    assert action_menu.action is action
    assert session.unresolved.unresolved_keys() == set()
    assert session.counters.resolved[EntityKind.MENU] == 1
    assert session.counters.resolved[EntityKind.ACTION_MENU] == 1


def test_reload_with_update_keeps_identity() -> None:
    store = FakeRepositories()
    first = import_action(
        ActionMethod(name="action-x", call="A:a"), session=make_session(store=store)
    )

    second = import_action(
        ActionMethod(name="action-x", call="B:b"), session=make_session(store=store, update=True)
    )

    assert second is first
    assert second is not None
    assert second.body is not None
    assert json.loads(second.body)["call"] == "B:b"
