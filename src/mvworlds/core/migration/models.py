"""Migration models: schema states and named per-world rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from mvworlds.core.document import Section
from mvworlds.core.property import PropertyContext


class SchemaState(Enum):
    """Shape of a worlds document."""

    LEGACY = auto()
    """Worlds nested under a ``worlds`` key, or world sections older than the current version."""

    CURRENT = auto()
    """World sections at the root, each stamped with the current version."""


RuleFunction = Callable[[str, Section, PropertyContext], None]
"""Signature: (world_name, world_section, context) -> None. Mutates the section in place."""


@dataclass(frozen=True, slots=True)
class MigrationRule:
    """One named, independently testable step of the legacy world migration."""

    name: str
    apply: RuleFunction

    def __call__(self, world_name: str, section: Section, context: PropertyContext) -> None:
        self.apply(world_name, section, context)
