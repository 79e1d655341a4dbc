from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

from metaloader.domain.definitions import FormView
from metaloader.domain.loader import DefaultViewSynthesizer, create_default_views, import_view
from metaloader.domain.loader.defaults import default_view_fields
from metaloader.domain.model import EntityKind
from metaloader.domain.ports import FieldInfo
from tests.helpers.metadata import (
    SALE_ORDER,
    SALE_ORDER_LINE,
    FakeRepositories,
    make_model,
    make_session,
)


def test_default_fields_skip_identity_version_and_audit_columns() -> None:
    model = make_model(
        fields=(
            FieldInfo(name="id", primary=True),
            FieldInfo(name="version", version=True),
            FieldInfo(name="rowVersion", version=True),
            FieldInfo(name="selected"),
            FieldInfo(name="createdBy"),
            FieldInfo(name="created_on"),
            FieldInfo(name="UPDATEDON"),
            FieldInfo(name="identifier"),
            FieldInfo(name="name"),
        )
    )

    assert [field.name for field in default_view_fields(model)] == ["identifier", "name"]


def test_create_default_views_shapes_form_and_grid() -> None:
    form, grid = create_default_views(make_model())

    assert form.name == "sale-order-form"
    assert grid.name == "sale-order-grid"
    assert form.title == grid.title == "SaleOrder"
    assert form.model == grid.model == SALE_ORDER
    assert [(item.name, item.col_span, item.show_title) for item in form.items] == [
        ("name", None, None),
        ("amount", None, None),
        ("lines", 4, False),
    ]
    assert [item.name for item in grid.items] == ["name", "amount"]


def test_synthesizer_generates_views_for_models_without_views(tmp_path: Path) -> None:
    store = FakeRepositories()
    session = make_session(
        store=store,
        models=(make_model(), make_model(SALE_ORDER_LINE, fields=())),
    )
    import_view(
        FormView(name="sale-order-line-form", model=SALE_ORDER_LINE), session=session
    )

    generated = DefaultViewSynthesizer(output_dir=tmp_path).run(session=session)

    assert [model.name for model in generated] == [SALE_ORDER]
    assert {view.name for view in store.views.items} == {
        "sale-order-line-form",
        "sale-order-form",
        "sale-order-grid",
    }
    target = tmp_path / "views" / "SaleOrder.json"
    assert session.counters.generated == [target]
    document = json.loads(target.read_text(encoding="utf-8"))
    assert [view["name"] for view in document["views"]] == ["sale-order-grid", "sale-order-form"]
    assert [view["type"] for view in document["views"]] == ["grid", "form"]


def test_synthesizer_ignores_models_of_other_modules() -> None:
    store = FakeRepositories()
    session = make_session(store=store, module="base")

    generated = DefaultViewSynthesizer().run(session=session)

    assert generated == []
    assert store.views.items == []


def test_synthesizer_is_idempotent() -> None:
    store = FakeRepositories()
    DefaultViewSynthesizer().run(session=make_session(store=store))

    generated = DefaultViewSynthesizer().run(session=make_session(store=store))

    assert generated == []
    assert len(store.views.items) == 2


def test_unwritable_output_is_logged_and_skipped(tmp_path: Path) -> None:
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory", encoding="utf-8")
    store = FakeRepositories()
    session = make_session(store=store)

    generated = DefaultViewSynthesizer(output_dir=blocker).run(session=session)

    assert [model.name for model in generated] == [SALE_ORDER]
    assert len(store.views.items) == 2
    assert session.counters.generated == []


def test_synthesized_views_never_overwrite_under_forced_reload() -> None:
    store = FakeRepositories()
    import_view(
        FormView(name="sale-order-form", model=SALE_ORDER_LINE, title="Lines"),
        session=make_session(store=store, models=(make_model(SALE_ORDER_LINE),)),
    )
    session = make_session(store=store, update=True)

    DefaultViewSynthesizer().run(session=session)

    form = store.views.find_by_module("sale-order-form", "sale")
    assert form is not None
    assert (form.model, form.title) == (SALE_ORDER_LINE, "Lines")
    assert session.counters.skipped[EntityKind.VIEW] == 1
