"""Installable modules supplying definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Module:
    """A named unit of installable definitions.

    ``depends`` lists the modules whose definitions must be loaded first when
    several modules share one load session.
    """

    name: str
    depends: tuple[str, ...] = ()
    title: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Module name must not be blank")
