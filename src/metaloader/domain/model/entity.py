"""
Base building blocks:
identity and the kind discriminator shared by persisted metadata records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from metaloader.domain.model.enums import EntityKind


def new_id() -> UUID:
    return uuid4()


@dataclass(eq=False, kw_only=True)
class Entity:
    """Internal identity exists immediately in the domain."""

    id: UUID = field(default_factory=new_id)

    # class-level discriminator; subclasses must override
    KIND: ClassVar[EntityKind]

    @property
    def kind(self) -> EntityKind:
        return self.KIND


@dataclass(eq=False, kw_only=True)
class ModuleOwned(Entity):
    """Record owned by the module that last wrote it."""

    name: str
    module: str | None = None

    def assign_module(self, module: str) -> None:
        """Reassign ownership; re-import from another module moves the record."""
        self.module = module
