"""Permission groups referenced by menus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from metaloader.domain.model.entity import Entity
from metaloader.domain.model.enums import EntityKind


@dataclass(eq=False, kw_only=True)
class Group(Entity):
    KIND: ClassVar[EntityKind] = EntityKind.GROUP

    code: str
    name: str
