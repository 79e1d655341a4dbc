from __future__ import annotations

from metaloader.domain.definitions import SelectionDefinition, SelectionOption
from metaloader.domain.loader import import_selection
from metaloader.domain.model import EntityKind
from tests.helpers.metadata import FakeRepositories, make_session


def _selection(*values: str) -> SelectionDefinition:
    return SelectionDefinition(
        name="sale.order.status",
        options=[SelectionOption(value=value, title=value.title()) for value in values],
    )


def test_selection_items_are_numbered_in_declaration_order() -> None:
    select = import_selection(_selection("draft", "confirmed"), session=make_session())

    assert select is not None
    assert [(item.value, item.title, item.order) for item in select.items] == [
        ("draft", "Draft", 0),
        ("confirmed", "Confirmed", 1),
    ]


def test_forced_reload_replaces_items() -> None:
    store = FakeRepositories()
    import_selection(
        _selection("draft", "confirmed", "cancelled"), session=make_session(store=store)
    )

    session = make_session(store=store, update=True)
    select = import_selection(_selection("open", "closed"), session=session)

    assert select is not None
    assert [item.value for item in select.items] == ["open", "closed"]
    assert [item.order for item in select.items] == [0, 1]
    assert len(store.selections.items) == 1
    assert session.counters.updated[EntityKind.SELECTION] == 1


def test_reload_without_update_leaves_items_alone() -> None:
    store = FakeRepositories()
    import_selection(_selection("draft"), session=make_session(store=store))

    result = import_selection(_selection("other"), session=make_session(store=store))

    assert result is None
    [select] = store.selections.items
    assert [item.value for item in select.items] == ["draft"]


def test_duplicate_selection_in_session_is_skipped() -> None:
    session = make_session()

    import_selection(_selection("draft"), session=session)
    result = import_selection(_selection("other"), session=session)

    assert result is None
    assert session.counters.skipped[EntityKind.SELECTION] == 1
