"""SQLAlchemy mapping metadata for the metadata store."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from metaloader.domain.model import (
    Group,
    MetaAction,
    MetaActionMenu,
    MetaChart,
    MetaChartConfig,
    MetaChartSeries,
    MetaMenu,
    MetaSelect,
    MetaSelectItem,
    MetaView,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Views -----------------------------------------------------------------------

meta_view_table = Table(
    "meta_view",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("xml_id", String, nullable=True),
    Column("title", String, nullable=True),
    Column("type", String(32), nullable=True),
    Column("model", String, nullable=True),
    Column("module", String, nullable=True),
    Column("body", Text, nullable=True),
    Column("priority", Integer, nullable=False, default=0),
    UniqueConstraint("xml_id"),
    Index(None, "name"),
    Index(None, "model"),
)

# Selections ------------------------------------------------------------------

meta_select_table = Table(
    "meta_select",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("module", String, nullable=True),
    UniqueConstraint("name"),
)

meta_select_item_table = Table(
    "meta_select_item",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "select_id",
        UUIDColumnType,
        ForeignKey("meta_select.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("value", String, nullable=False),
    Column("title", String, nullable=True),
    Column("sequence", Integer, key="order", nullable=False, default=0),
)

# Actions ---------------------------------------------------------------------

meta_action_table = Table(
    "meta_action",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("type", String(64), nullable=True),
    Column("model", String, nullable=True),
    Column("module", String, nullable=True),
    Column("body", Text, nullable=True),
    UniqueConstraint("name"),
)

# Menus -----------------------------------------------------------------------

auth_group_table = Table(
    "auth_group",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("code", String, nullable=False),
    Column("name", String, nullable=False),
    UniqueConstraint("code"),
)

meta_menu_table = Table(
    "meta_menu",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("title", String, nullable=True),
    Column("icon", String, nullable=True),
    Column("priority", Integer, nullable=True),
    Column("top_menu", Boolean, key="top", nullable=True),
    Column("left_menu", Boolean, key="left", nullable=False, default=True),
    Column("mobile", Boolean, nullable=True),
    Column("module", String, nullable=True),
    Column(
        "parent_id",
        UUIDColumnType,
        ForeignKey("meta_menu.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "action_id",
        UUIDColumnType,
        ForeignKey("meta_action.id", ondelete="SET NULL"),
        nullable=True,
    ),
    UniqueConstraint("name"),
)

meta_menu_group_table = Table(
    "meta_menu_group",
    mapper_registry.metadata,
    Column(
        "menu_id",
        UUIDColumnType,
        ForeignKey("meta_menu.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "group_id",
        UUIDColumnType,
        ForeignKey("auth_group.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

meta_action_menu_table = Table(
    "meta_action_menu",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("title", String, nullable=True),
    Column("category", String, nullable=True),
    Column("module", String, nullable=True),
    Column(
        "parent_id",
        UUIDColumnType,
        ForeignKey("meta_action_menu.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "action_id",
        UUIDColumnType,
        ForeignKey("meta_action.id", ondelete="SET NULL"),
        nullable=True,
    ),
    UniqueConstraint("name"),
)

# Charts ----------------------------------------------------------------------

meta_chart_table = Table(
    "meta_chart",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("title", String, nullable=True),
    Column("module", String, nullable=True),
    Column("stacked", Boolean, nullable=True),
    Column("query", Text, nullable=True),
    Column("query_type", String(32), nullable=True),
    Column("category_key", String, nullable=True),
    Column("category_type", String(32), nullable=True),
    Column("category_title", String, nullable=True),
    UniqueConstraint("name"),
)

meta_chart_series_table = Table(
    "meta_chart_series",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "chart_id",
        UUIDColumnType,
        ForeignKey("meta_chart.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("key", String, nullable=False),
    Column("group_by", String, nullable=True),
    Column("type", String(32), nullable=True),
    Column("side", String(16), nullable=True),
    Column("aggregate", String(16), nullable=True),
    Column("sequence", Integer, key="order", nullable=False, default=0),
)

meta_chart_config_table = Table(
    "meta_chart_config",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "chart_id",
        UUIDColumnType,
        ForeignKey("meta_chart.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String, nullable=False),
    Column("value", String, nullable=True),
    Column("sequence", Integer, key="order", nullable=False, default=0),
)


@cache
def start_mappers() -> orm.registry:
    """Configure imperative mappings between domain entities and tables."""

    mapper_registry.map_imperatively(MetaView, meta_view_table)

    mapper_registry.map_imperatively(MetaSelectItem, meta_select_item_table)
    mapper_registry.map_imperatively(
        MetaSelect,
        meta_select_table,
        properties={
            "_items": relationship(
                MetaSelectItem,
                cascade="all, delete-orphan",
                order_by=meta_select_item_table.c.order,
            ),
        },
    )

    mapper_registry.map_imperatively(MetaAction, meta_action_table)

    mapper_registry.map_imperatively(Group, auth_group_table)

    mapper_registry.map_imperatively(
        MetaMenu,
        meta_menu_table,
        properties={
            "parent": relationship(
                MetaMenu,
                remote_side=[meta_menu_table.c.id],
            ),
            "action": relationship(MetaAction),
            "_groups": relationship(
                Group,
                secondary=meta_menu_group_table,
                collection_class=set,
            ),
        },
    )

    mapper_registry.map_imperatively(
        MetaActionMenu,
        meta_action_menu_table,
        properties={
            "parent": relationship(
                MetaActionMenu,
                remote_side=[meta_action_menu_table.c.id],
            ),
            "action": relationship(MetaAction),
        },
    )

    mapper_registry.map_imperatively(MetaChartSeries, meta_chart_series_table)
    mapper_registry.map_imperatively(MetaChartConfig, meta_chart_config_table)
    mapper_registry.map_imperatively(
        MetaChart,
        meta_chart_table,
        properties={
            "_series": relationship(
                MetaChartSeries,
                cascade="all, delete-orphan",
                order_by=meta_chart_series_table.c.order,
            ),
            "_config": relationship(
                MetaChartConfig,
                cascade="all, delete-orphan",
                order_by=meta_chart_config_table.c.order,
            ),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
