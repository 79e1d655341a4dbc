"""Translate validated definition documents into domain definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from metaloader.domain.definitions import (
    ActionCondition,
    ActionDefinition,
    ActionGroup,
    ActionMethod,
    ActionRecord,
    ActionValidate,
    ActionView,
    ChartCategory,
    ChartConfigItem,
    ChartQuery,
    ChartSeries,
    ChartView,
    DefinitionBatch,
    FieldItem,
    FormView,
    GridView,
    MenuItemDefinition,
    PortalView,
    SearchView,
    SelectionDefinition,
    SelectionOption,
    TreeView,
    ViewDefinition,
)
from metaloader.domain.model import Module
from metaloader.domain.ports import FieldInfo, ModelInfo

from .schema import (
    ActionConditionSchema,
    ActionGroupSchema,
    ActionMethodSchema,
    ActionRecordSchema,
    ActionValidateSchema,
    ActionViewSchema,
    ChartViewSchema,
    FieldSchema,
    FormViewSchema,
    GridViewSchema,
    PortalViewSchema,
    SearchViewSchema,
    TreeViewSchema,
)

if TYPE_CHECKING:
    from .schema import (
        ActionSchema,
        DefinitionDocument,
        MenuItemSchema,
        ModelCatalog,
        ModuleManifest,
        SelectionSchema,
        ViewSchema,
    )


def _items(items: list[FieldSchema]) -> list[FieldItem]:
    return [
        FieldItem(
            name=item.name,
            title=item.title,
            col_span=item.col_span,
            show_title=item.show_title,
        )
        for item in items
    ]


def _chart(view: ChartViewSchema) -> ChartView:
    return ChartView(
        name=view.name,
        id=view.id,
        title=view.title,
        model=view.model,
        stacked=view.stacked,
        query=ChartQuery(text=view.query.text, type=view.query.type),
        category=ChartCategory(
            key=view.category.key,
            type=view.category.type,
            title=view.category.title,
        ),
        series=[
            ChartSeries(
                key=series.key,
                type=series.type,
                group_by=series.group_by,
                side=series.side,
                aggregate=series.aggregate,
            )
            for series in view.series
        ],
        config=(
            None
            if view.config is None
            else [ChartConfigItem(name=item.name, value=item.value) for item in view.config]
        ),
    )


def translate_view(view: ViewSchema) -> ViewDefinition:
    common = {"name": view.name, "id": view.id, "title": view.title, "model": view.model}
    match view:
        case FormViewSchema():
            return FormView(**common, items=_items(view.items))
        case GridViewSchema():
            return GridView(**common, items=_items(view.items))
        case SearchViewSchema():
            return SearchView(**common, items=_items(view.items))
        case TreeViewSchema():
            return TreeView(**common)
        case PortalViewSchema():
            return PortalView(**common)
        case ChartViewSchema():
            return _chart(view)


def translate_selection(selection: SelectionSchema) -> SelectionDefinition:
    return SelectionDefinition(
        name=selection.name,
        options=[
            SelectionOption(value=option.value, title=option.title)
            for option in selection.options
        ],
    )


def translate_action(action: ActionSchema) -> ActionDefinition:
    match action:
        case ActionViewSchema():
            return ActionView(
                name=action.name,
                model=action.model,
                title=action.title,
                views=list(action.views),
                domain=action.domain,
            )
        case ActionRecordSchema():
            return ActionRecord(name=action.name, model=action.model, fields=dict(action.fields))
        case ActionMethodSchema():
            return ActionMethod(name=action.name, call=action.call, model=action.model)
        case ActionValidateSchema():
            return ActionValidate(name=action.name, checks=list(action.checks))
        case ActionConditionSchema():
            return ActionCondition(name=action.name, checks=list(action.checks))
        case ActionGroupSchema():
            return ActionGroup(name=action.name, actions=list(action.actions))


def translate_menu(item: MenuItemSchema) -> MenuItemDefinition:
    return MenuItemDefinition(
        name=item.name,
        title=item.title,
        parent=item.parent,
        action=item.action,
        icon=item.icon,
        priority=item.priority,
        groups=item.groups,
        top=item.top,
        left=item.left,
        mobile=item.mobile,
        category=item.category,
    )


def translate_document(document: DefinitionDocument, *, source: str) -> DefinitionBatch:
    return DefinitionBatch(
        source=source,
        views=[translate_view(view) for view in document.views],
        selections=[translate_selection(selection) for selection in document.selections],
        actions=[translate_action(action) for action in document.actions],
        menus=[translate_menu(item) for item in document.menus],
        action_menus=[translate_menu(item) for item in document.action_menus],
    )


def translate_manifest(manifest: ModuleManifest, *, default_name: str) -> Module:
    return Module(
        name=manifest.name or default_name,
        depends=tuple(manifest.depends),
        title=manifest.title,
    )


def translate_catalog(catalog: ModelCatalog, *, module: str) -> list[ModelInfo]:
    return [
        ModelInfo(
            name=model.name,
            module=module,
            fields=tuple(
                FieldInfo(
                    name=field.name,
                    collection=field.collection,
                    primary=field.primary,
                    version=field.version,
                )
                for field in model.fields
            ),
        )
        for model in catalog.models
    ]
