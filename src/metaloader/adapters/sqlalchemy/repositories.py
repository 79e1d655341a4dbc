"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select

from metaloader.adapters.sqlalchemy.mappings import (
    auth_group_table,
    meta_action_menu_table,
    meta_action_table,
    meta_chart_table,
    meta_menu_table,
    meta_select_table,
    meta_view_table,
)
from metaloader.domain.model import (
    Group,
    MetaAction,
    MetaActionMenu,
    MetaChart,
    MetaMenu,
    MetaSelect,
    MetaView,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Table
    from sqlalchemy.orm import Session

    from metaloader.domain.model import ModuleOwned


class SqlAlchemyViewRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: MetaView) -> None:
        self.session.add(entity)

    def find_by_xml_id(self, xml_id: str) -> MetaView | None:
        stmt = select(MetaView).where(meta_view_table.c.xml_id == xml_id).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_module(self, name: str, module: str) -> MetaView | None:
        stmt = (
            select(MetaView)
            .where(meta_view_table.c.name == name)
            .where(meta_view_table.c.module == module)
            .order_by(meta_view_table.c.priority.desc())
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()

    def find_by_name(self, name: str) -> Sequence[MetaView]:
        stmt = (
            select(MetaView)
            .where(meta_view_table.c.name == name)
            .order_by(meta_view_table.c.priority.desc())
        )
        return self.session.execute(stmt).scalars().all()

    def count_by_model(self, model: str) -> int:
        stmt = select(func.count()).select_from(meta_view_table).where(
            meta_view_table.c.model == model
        )
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyNamedRepository[TEntity: ModuleOwned]:
    """Shared lookups for records whose name is unique within their table."""

    def __init__(self, session: Session, entity_cls: type[TEntity], table: Table) -> None:
        self.session = session
        self._entity_cls = entity_cls
        self._table = table

    def add(self, entity: TEntity) -> None:
        self.session.add(entity)

    def find_by_name(self, name: str) -> TEntity | None:
        stmt = select(self._entity_cls).where(self._table.c.name == name).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemySelectRepository(SqlAlchemyNamedRepository[MetaSelect]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, MetaSelect, meta_select_table)


class SqlAlchemyActionRepository(SqlAlchemyNamedRepository[MetaAction]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, MetaAction, meta_action_table)


class SqlAlchemyMenuRepository(SqlAlchemyNamedRepository[MetaMenu]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, MetaMenu, meta_menu_table)


class SqlAlchemyActionMenuRepository(SqlAlchemyNamedRepository[MetaActionMenu]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, MetaActionMenu, meta_action_menu_table)


class SqlAlchemyChartRepository(SqlAlchemyNamedRepository[MetaChart]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, MetaChart, meta_chart_table)


class SqlAlchemyGroupRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Group) -> None:
        self.session.add(entity)

    def find_by_code(self, code: str) -> Group | None:
        stmt = select(Group).where(auth_group_table.c.code == code).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()
