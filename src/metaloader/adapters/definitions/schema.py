"""On-disk schemas for module definition files, manifests and model catalogs.

A module directory looks like::

    <root>/<module>/module.json        optional manifest (title, depends)
    <root>/<module>/models.json        optional model field catalog
    <root>/<module>/views/*.json       definition documents, loaded in file-name order
"""

from __future__ import annotations

import logging
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class DefinitionBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[tuple[str, str]]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        owner = type(self).__name__
        new_keys = {(owner, key) for key in extras}.difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Definition %s: unmodeled keys: %s",
            owner,
            ", ".join(sorted(key for _, key in new_keys)),
        )


# Views -----------------------------------------------------------------------


class FieldSchema(DefinitionBaseModel):
    name: str
    title: str | None = None
    col_span: int | None = None
    show_title: bool | None = None


class _ViewSchema(DefinitionBaseModel):
    name: str
    id: str | None = None
    title: str | None = None
    model: str | None = None


class FormViewSchema(_ViewSchema):
    type: Literal["form"]
    items: list[FieldSchema] = Field(default_factory=list["FieldSchema"])


class GridViewSchema(_ViewSchema):
    type: Literal["grid"]
    items: list[FieldSchema] = Field(default_factory=list["FieldSchema"])


class SearchViewSchema(_ViewSchema):
    type: Literal["search"]
    items: list[FieldSchema] = Field(default_factory=list["FieldSchema"])


class TreeViewSchema(_ViewSchema):
    type: Literal["tree"]


class PortalViewSchema(_ViewSchema):
    type: Literal["portal"]


class ChartQuerySchema(DefinitionBaseModel):
    text: str
    type: str = "select"


class ChartCategorySchema(DefinitionBaseModel):
    key: str
    type: str | None = None
    title: str | None = None


class ChartSeriesSchema(DefinitionBaseModel):
    key: str
    type: str | None = None
    group_by: str | None = None
    side: str | None = None
    aggregate: str | None = None


class ChartConfigSchema(DefinitionBaseModel):
    name: str
    value: str | None = None


class ChartViewSchema(_ViewSchema):
    type: Literal["chart"]
    query: ChartQuerySchema
    category: ChartCategorySchema
    series: list[ChartSeriesSchema] = Field(default_factory=list["ChartSeriesSchema"])
    config: list[ChartConfigSchema] | None = None
    stacked: bool | None = None


type ViewSchema = Annotated[
    FormViewSchema
    | GridViewSchema
    | SearchViewSchema
    | TreeViewSchema
    | PortalViewSchema
    | ChartViewSchema,
    Field(discriminator="type"),
]


# Selections ------------------------------------------------------------------


class SelectionOptionSchema(DefinitionBaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str
    title: str | None = None


class SelectionSchema(DefinitionBaseModel):
    name: str
    options: list[SelectionOptionSchema] = Field(default_factory=list["SelectionOptionSchema"])


# Actions ---------------------------------------------------------------------


class ActionViewSchema(DefinitionBaseModel):
    type: Literal["action-view"]
    name: str
    model: str | None = None
    title: str | None = None
    views: list[str] = Field(default_factory=list[str])
    domain: str | None = None


class ActionRecordSchema(DefinitionBaseModel):
    type: Literal["action-record"]
    name: str
    model: str
    fields: dict[str, str] = Field(default_factory=dict[str, str])


class ActionMethodSchema(DefinitionBaseModel):
    type: Literal["action-method"]
    name: str
    call: str
    model: str | None = None


class ActionValidateSchema(DefinitionBaseModel):
    type: Literal["action-validate"]
    name: str
    checks: list[str] = Field(default_factory=list[str])


class ActionConditionSchema(DefinitionBaseModel):
    type: Literal["action-condition"]
    name: str
    checks: list[str] = Field(default_factory=list[str])


class ActionGroupSchema(DefinitionBaseModel):
    type: Literal["action-group"]
    name: str
    actions: list[str] = Field(default_factory=list[str])


type ActionSchema = Annotated[
    ActionViewSchema
    | ActionRecordSchema
    | ActionMethodSchema
    | ActionValidateSchema
    | ActionConditionSchema
    | ActionGroupSchema,
    Field(discriminator="type"),
]


# Menus -----------------------------------------------------------------------


class MenuItemSchema(DefinitionBaseModel):
    name: str
    title: str | None = None
    parent: str | None = None
    action: str | None = None
    icon: str | None = None
    priority: int | None = None
    groups: str | None = None
    top: bool | None = None
    left: bool | None = None
    mobile: bool | None = None
    category: str | None = None


# Documents -------------------------------------------------------------------


class DefinitionDocument(DefinitionBaseModel):
    """One definition file."""

    views: list[ViewSchema] = Field(default_factory=list["ViewSchema"])
    selections: list[SelectionSchema] = Field(default_factory=list["SelectionSchema"])
    actions: list[ActionSchema] = Field(default_factory=list["ActionSchema"])
    menus: list[MenuItemSchema] = Field(default_factory=list["MenuItemSchema"])
    action_menus: list[MenuItemSchema] = Field(default_factory=list["MenuItemSchema"])


class ModuleManifest(DefinitionBaseModel):
    name: str | None = None
    title: str | None = None
    depends: list[str] = Field(default_factory=list[str])


class ModelFieldSchema(DefinitionBaseModel):
    name: str
    collection: bool = False
    primary: bool = False
    version: bool = False


class ModelSchema(DefinitionBaseModel):
    name: str
    fields: list[ModelFieldSchema] = Field(default_factory=list["ModelFieldSchema"])


class ModelCatalog(DefinitionBaseModel):
    models: list[ModelSchema] = Field(default_factory=list["ModelSchema"])
