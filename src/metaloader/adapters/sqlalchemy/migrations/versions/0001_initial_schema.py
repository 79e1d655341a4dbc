"""Initial metadata schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "meta_view",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("xml_id", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("type", sa.String(length=32), nullable=True),
        sa.Column("model", sa.String(), nullable=True),
        sa.Column("module", sa.String(), nullable=True),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_view")),
        sa.UniqueConstraint("xml_id", name=op.f("uq_meta_view_xml_id")),
    )
    op.create_index(op.f("ix_meta_view_name"), "meta_view", ["name"])
    op.create_index(op.f("ix_meta_view_model"), "meta_view", ["model"])

    op.create_table(
        "meta_select",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("module", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_select")),
        sa.UniqueConstraint("name", name=op.f("uq_meta_select_name")),
    )
    op.create_table(
        "meta_select_item",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("select_id", sa.Uuid(), nullable=False),
        sa.Column("value", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("sequence", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["select_id"],
            ["meta_select.id"],
            name=op.f("fk_meta_select_item_select_id_meta_select"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_select_item")),
    )

    op.create_table(
        "meta_action",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(length=64), nullable=True),
        sa.Column("model", sa.String(), nullable=True),
        sa.Column("module", sa.String(), nullable=True),
        sa.Column("body", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_action")),
        sa.UniqueConstraint("name", name=op.f("uq_meta_action_name")),
    )

    op.create_table(
        "auth_group",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_auth_group")),
        sa.UniqueConstraint("code", name=op.f("uq_auth_group_code")),
    )

    op.create_table(
        "meta_menu",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("icon", sa.String(), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=True),
        sa.Column("top_menu", sa.Boolean(), nullable=True),
        sa.Column("left_menu", sa.Boolean(), nullable=False),
        sa.Column("mobile", sa.Boolean(), nullable=True),
        sa.Column("module", sa.String(), nullable=True),
        sa.Column("parent_id", sa.Uuid(), nullable=True),
        sa.Column("action_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(
            ["parent_id"],
            ["meta_menu.id"],
            name=op.f("fk_meta_menu_parent_id_meta_menu"),
            ondelete="SET NULL",
        ),
        sa.ForeignKeyConstraint(
            ["action_id"],
            ["meta_action.id"],
            name=op.f("fk_meta_menu_action_id_meta_action"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_menu")),
        sa.UniqueConstraint("name", name=op.f("uq_meta_menu_name")),
    )
    op.create_table(
        "meta_menu_group",
        sa.Column("menu_id", sa.Uuid(), nullable=False),
        sa.Column("group_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["menu_id"],
            ["meta_menu.id"],
            name=op.f("fk_meta_menu_group_menu_id_meta_menu"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["group_id"],
            ["auth_group.id"],
            name=op.f("fk_meta_menu_group_group_id_auth_group"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("menu_id", "group_id", name=op.f("pk_meta_menu_group")),
    )

    op.create_table(
        "meta_action_menu",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("module", sa.String(), nullable=True),
        sa.Column("parent_id", sa.Uuid(), nullable=True),
        sa.Column("action_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(
            ["parent_id"],
            ["meta_action_menu.id"],
            name=op.f("fk_meta_action_menu_parent_id_meta_action_menu"),
            ondelete="SET NULL",
        ),
        sa.ForeignKeyConstraint(
            ["action_id"],
            ["meta_action.id"],
            name=op.f("fk_meta_action_menu_action_id_meta_action"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_action_menu")),
        sa.UniqueConstraint("name", name=op.f("uq_meta_action_menu_name")),
    )

    op.create_table(
        "meta_chart",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("module", sa.String(), nullable=True),
        sa.Column("stacked", sa.Boolean(), nullable=True),
        sa.Column("query", sa.Text(), nullable=True),
        sa.Column("query_type", sa.String(length=32), nullable=True),
        sa.Column("category_key", sa.String(), nullable=True),
        sa.Column("category_type", sa.String(length=32), nullable=True),
        sa.Column("category_title", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_chart")),
        sa.UniqueConstraint("name", name=op.f("uq_meta_chart_name")),
    )
    op.create_table(
        "meta_chart_series",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("chart_id", sa.Uuid(), nullable=False),
        sa.Column("key", sa.String(), nullable=False),
        sa.Column("group_by", sa.String(), nullable=True),
        sa.Column("type", sa.String(length=32), nullable=True),
        sa.Column("side", sa.String(length=16), nullable=True),
        sa.Column("aggregate", sa.String(length=16), nullable=True),
        sa.Column("sequence", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["chart_id"],
            ["meta_chart.id"],
            name=op.f("fk_meta_chart_series_chart_id_meta_chart"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_chart_series")),
    )
    op.create_table(
        "meta_chart_config",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("chart_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("value", sa.String(), nullable=True),
        sa.Column("sequence", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["chart_id"],
            ["meta_chart.id"],
            name=op.f("fk_meta_chart_config_chart_id_meta_chart"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meta_chart_config")),
    )


def downgrade() -> None:
    op.drop_table("meta_chart_config")
    op.drop_table("meta_chart_series")
    op.drop_table("meta_chart")
    op.drop_table("meta_action_menu")
    op.drop_table("meta_menu_group")
    op.drop_table("meta_menu")
    op.drop_table("auth_group")
    op.drop_table("meta_action")
    op.drop_table("meta_select_item")
    op.drop_table("meta_select")
    op.drop_index(op.f("ix_meta_view_model"), table_name="meta_view")
    op.drop_index(op.f("ix_meta_view_name"), table_name="meta_view")
    op.drop_table("meta_view")
