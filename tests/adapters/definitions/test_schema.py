from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from metaloader.adapters.definitions import DefinitionDocument
from metaloader.adapters.definitions.schema import ChartViewSchema, FormViewSchema
from metaloader.adapters.definitions.translator import translate_document
from metaloader.domain.definitions import ActionMethod, ChartView, FormView


def test_views_are_discriminated_by_type() -> None:
    document = DefinitionDocument.model_validate(
        {
            "views": [
                {"type": "form", "name": "f", "model": "m", "items": [{"name": "a"}]},
                {
                    "type": "chart",
                    "name": "c",
                    "query": {"text": "select 1"},
                    "category": {"key": "k"},
                },
            ]
        }
    )

    assert isinstance(document.views[0], FormViewSchema)
    assert isinstance(document.views[1], ChartViewSchema)


def test_unknown_view_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DefinitionDocument.model_validate({"views": [{"type": "kanban", "name": "k"}]})


def test_unmodeled_keys_are_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    payload = {"menus": [{"name": "m", "colour": "red"}, {"name": "n", "colour": "blue"}]}

    with caplog.at_level(logging.WARNING):
        DefinitionDocument.model_validate(payload)
        DefinitionDocument.model_validate(payload)

    messages = [record.getMessage() for record in caplog.records if "colour" in record.getMessage()]
    assert len(messages) <= 1


def test_translate_document_builds_domain_definitions() -> None:
    document = DefinitionDocument.model_validate(
        {
            "views": [
                {"type": "form", "name": "f", "id": "x", "model": "m", "items": [{"name": "a"}]},
                {
                    "type": "chart",
                    "name": "c",
                    "query": {"text": "select 1", "type": "sql"},
                    "category": {"key": "k"},
                    "series": [{"key": "s", "type": "bar"}],
                },
            ],
            "actions": [{"type": "action-method", "name": "act", "call": "A:b"}],
            "action_menus": [{"name": "print", "category": "reports"}],
        }
    )

    batch = translate_document(document, source="views.json")

    form, chart = batch.views
    assert isinstance(form, FormView)
    assert form.id == "x"
    assert [item.name for item in form.items] == ["a"]
    assert isinstance(chart, ChartView)
    assert chart.query.type == "sql"
    assert chart.config is None
    assert batch.actions == [ActionMethod(name="act", call="A:b")]
    assert batch.action_menus[0].category == "reports"
    assert batch.source == "views.json"


def test_numeric_selection_values_are_read_as_text() -> None:
    document = DefinitionDocument.model_validate_json(
        '{"selections": [{"name": "status", "options": '
        '[{"value": 1, "title": "Open"}, {"value": 2, "title": "Closed"}]}]}'
    )

    batch = translate_document(document, source="status.json")

    [selection] = batch.selections
    assert [(option.value, option.title) for option in selection.options] == [
        ("1", "Open"),
        ("2", "Closed"),
    ]
