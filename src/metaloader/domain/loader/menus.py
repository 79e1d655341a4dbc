"""Menu and action-menu handlers.

Parents and actions are looked up by name when the menu is loaded. A target
that does not exist yet is recorded in the session's pending registry; the
menu is bound as soon as the target is saved, whether it arrives later in
the same file, in a later file, or in a later module of the session.

A parent link is checked for cycles when it is bound, as far as the chain runs
through menus already written in the session. Links of persisted menus may
still be rewritten later on, so :func:`check_menu_cycles` repeats the check
once the whole session has been processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from metaloader.domain.loader.errors import InvalidDefinitionError
from metaloader.domain.loader.groups import resolve_groups
from metaloader.domain.model import EntityKind, MetaActionMenu, MetaMenu

if TYPE_CHECKING:
    from metaloader.domain.definitions import DefinitionBatch, MenuItemDefinition
    from metaloader.domain.loader.context import LoadSession
    from metaloader.domain.ports import NamedRepository

log = logging.getLogger(__name__)


@dataclass(slots=True)
class MenuPhase:
    name: str = "menus"

    def run(self, batch: DefinitionBatch, *, session: LoadSession) -> None:
        for item in batch.menus:
            import_menu(item, session=session)


@dataclass(slots=True)
class ActionMenuPhase:
    name: str = "action-menus"

    def run(self, batch: DefinitionBatch, *, session: LoadSession) -> None:
        for item in batch.action_menus:
            import_action_menu(item, session=session)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _bind_parent[TMenu: (MetaMenu, MetaActionMenu)](
    menu: TMenu, parent: TMenu, *, session: LoadSession
) -> None:
    try:
        menu.set_parent(parent, settled=session.was_written)
    except ValueError as exc:
        raise InvalidDefinitionError(str(exc)) from exc


def _link[TMenu: (MetaMenu, MetaActionMenu)](
    menu: TMenu,
    item: MenuItemDefinition,
    *,
    repo: NamedRepository[TMenu],
    session: LoadSession,
) -> None:
    menu.set_parent(None)
    if item.parent is not None and not _is_blank(item.parent):
        parent_name = item.parent.strip()
        parent = repo.find_by_name(parent_name)
        if parent is None:
            log.info("Unresolved parent: %s", parent_name)
            session.unresolved.set_unresolved(menu.kind, parent_name, menu)
        else:
            _bind_parent(menu, parent, session=session)

    menu.action = None
    if item.action is not None and not _is_blank(item.action):
        action_name = item.action.strip()
        action = session.repositories.actions.find_by_name(action_name)
        if action is None:
            log.info("Unresolved action: %s", action_name)
            session.unresolved.set_unresolved(EntityKind.ACTION, action_name, menu)
        else:
            menu.action = action


def _resolve_children[TMenu: (MetaMenu, MetaActionMenu)](
    menu: TMenu,
    *,
    repo: NamedRepository[TMenu],
    session: LoadSession,
) -> None:
    for pending in session.unresolved.resolve(menu.kind, menu.name):
        log.info("Resolved %s: %s", menu.kind, pending.name)
        _bind_parent(pending, menu, session=session)
        repo.add(pending)
        session.counters.resolved[menu.kind] += 1


def import_menu(item: MenuItemDefinition, *, session: LoadSession) -> MetaMenu | None:
    if session.visited.is_visited(EntityKind.MENU, item.name):
        log.warning("Skipping duplicate menu: %s", item.name)
        session.mark_skipped(EntityKind.MENU)
        return None

    log.info("Loading menu: %s", item.name)

    repo = session.repositories.menus
    menu = repo.find_by_name(item.name)
    persisted = menu is not None
    if menu is None:
        menu = MetaMenu(name=item.name)

    if session.is_up_to_date(menu, persisted=persisted):
        session.mark_skipped(EntityKind.MENU)
        return None

    menu.priority = item.priority
    menu.title = item.title
    menu.icon = item.icon
    menu.assign_module(session.module_name)
    menu.top = item.top
    menu.left = True if item.left is None else item.left
    menu.mobile = item.mobile
    menu.replace_groups(resolve_groups(item.groups, session=session))

    _link(menu, item, repo=repo, session=session)

    repo.add(menu)
    session.mark_written(menu, created=not persisted)

    _resolve_children(menu, repo=repo, session=session)
    return menu


def import_action_menu(
    item: MenuItemDefinition, *, session: LoadSession
) -> MetaActionMenu | None:
    if session.visited.is_visited(EntityKind.ACTION_MENU, item.name):
        log.warning("Skipping duplicate action menu: %s", item.name)
        session.mark_skipped(EntityKind.ACTION_MENU)
        return None

    log.info("Loading action menu: %s", item.name)

    repo = session.repositories.action_menus
    menu = repo.find_by_name(item.name)
    persisted = menu is not None
    if menu is None:
        menu = MetaActionMenu(name=item.name)

    if session.is_up_to_date(menu, persisted=persisted):
        session.mark_skipped(EntityKind.ACTION_MENU)
        return None

    menu.title = item.title
    menu.assign_module(session.module_name)
    menu.category = item.category

    _link(menu, item, repo=repo, session=session)

    repo.add(menu)
    session.mark_written(menu, created=not persisted)

    _resolve_children(menu, repo=repo, session=session)
    return menu


def _find_cycle(menu: MetaMenu | MetaActionMenu) -> tuple[str, ...] | None:
    chain = [menu.name]
    seen = {menu.id}
    current = menu.parent
    while current is not None:
        if current is menu:
            return (*chain, menu.name)
        if current.id in seen:
            # loop further up, reported from one of its own members
            return None
        seen.add(current.id)
        chain.append(current.name)
        current = current.parent
    return None


def check_menu_cycles(session: LoadSession) -> None:
    """Reject parent chains of menus written in ``session`` that loop back on themselves."""

    for menu_type in (MetaMenu, MetaActionMenu):
        for menu in session.written(menu_type):
            cycle = _find_cycle(menu)
            if cycle is not None:
                raise InvalidDefinitionError(f"Menu parent cycle: {' -> '.join(cycle)}")
