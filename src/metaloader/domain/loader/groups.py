"""Group resolver for menu access restrictions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from metaloader.domain.model import EntityKind, Group

if TYPE_CHECKING:
    from metaloader.domain.loader.context import LoadSession

log = logging.getLogger(__name__)


def parse_group_codes(codes: str | None) -> list[str]:
    """Split ``"admins, sales"`` into codes, dropping blanks and repeats."""

    if codes is None or not codes.strip():
        return []
    result: list[str] = []
    for fragment in codes.split(","):
        code = fragment.strip()
        if code and code not in result:
            result.append(code)
    return result


def resolve_groups(codes: str | None, *, session: LoadSession) -> set[Group]:
    """Return the groups named by ``codes``, creating the ones that do not exist yet.

    Menu authors reference groups freely; a missing group is created with its
    code doubling as its name. A blank list means "no restriction".
    """

    repo = session.repositories.groups
    groups: set[Group] = set()
    for code in parse_group_codes(codes):
        group = repo.find_by_code(code)
        if group is None:
            log.info("Creating a new user group: %s", code)
            group = Group(code=code, name=code)
            repo.add(group)
            session.mark_written(group, created=True)
        groups.add(group)
    return groups
