"""Tests for SQLAlchemy repositories."""

from __future__ import annotations

from sqlalchemy.orm import Session  # noqa: TC002

from metaloader.adapters.sqlalchemy.repositories import (
    SqlAlchemyGroupRepository,
    SqlAlchemyMenuRepository,
    SqlAlchemySelectRepository,
    SqlAlchemyViewRepository,
)
from metaloader.domain.model import Group, MetaMenu, MetaSelect, MetaView


def test_view_repository_lookups(sqlite_session: Session) -> None:
    repository = SqlAlchemyViewRepository(sqlite_session)
    base = MetaView(name="partner-form", xml_id="base-form", module="base", model="Partner")
    override = MetaView(
        name="partner-form", xml_id="sale-form", module="sale", model="Partner", priority=1
    )
    loose = MetaView(name="partner-grid", module="base", model="Partner")
    for view in (base, override, loose):
        repository.add(view)
    sqlite_session.commit()

    assert repository.find_by_xml_id("sale-form") is override
    assert repository.find_by_xml_id("missing") is None
    assert repository.find_by_module("partner-form", "base") is base
    assert repository.find_by_module("partner-grid", "sale") is None
    assert list(repository.find_by_name("partner-form")) == [override, base]
    assert repository.count_by_model("Partner") == 3
    assert repository.count_by_model("Other") == 0


def test_named_repository_round_trips_select_items(sqlite_session: Session) -> None:
    repository = SqlAlchemySelectRepository(sqlite_session)
    select = MetaSelect(name="status", module="sale")
    select.add_item("draft", "Draft")
    select.add_item("done", "Done")
    repository.add(select)
    sqlite_session.commit()
    sqlite_session.expire_all()

    loaded = repository.find_by_name("status")

    assert loaded is not None
    assert [(item.value, item.order) for item in loaded.items] == [("draft", 0), ("done", 1)]
    assert repository.find_by_name("missing") is None


def test_rebuilt_select_items_replace_old_rows(sqlite_session: Session) -> None:
    repository = SqlAlchemySelectRepository(sqlite_session)
    select = MetaSelect(name="status")
    select.add_item("draft")
    repository.add(select)
    sqlite_session.commit()

    select.clear_items()
    select.add_item("open")
    sqlite_session.commit()
    sqlite_session.expire_all()

    loaded = repository.find_by_name("status")
    assert loaded is not None
    assert [item.value for item in loaded.items] == ["open"]


def test_menu_parent_and_groups_persist(sqlite_session: Session) -> None:
    menus = SqlAlchemyMenuRepository(sqlite_session)
    groups = SqlAlchemyGroupRepository(sqlite_session)
    admins = Group(code="admins", name="Admins")
    groups.add(admins)
    root = MetaMenu(name="menu-root")
    child = MetaMenu(name="menu-child", left=False)
    child.set_parent(root)
    child.replace_groups([admins])
    menus.add(root)
    menus.add(child)
    sqlite_session.commit()
    sqlite_session.expire_all()

    loaded = menus.find_by_name("menu-child")

    assert loaded is not None
    assert loaded.parent is menus.find_by_name("menu-root")
    assert loaded.left is False
    assert loaded.groups == frozenset({admins})
    assert groups.find_by_code("admins") is admins
    assert groups.find_by_code("nobody") is None
