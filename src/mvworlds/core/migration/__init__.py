"""Migration functionality: legacy layout detection and one-shot upgrade."""

from mvworlds.core.migration.engine import (
    LEGACY_WORLDS_KEY,
    detect_schema,
    migrate,
    migrate_world,
    section_version,
)
from mvworlds.core.migration.models import MigrationRule, SchemaState
from mvworlds.core.migration.rules import LEGACY_RULES

__all__ = [
    "SchemaState",
    "MigrationRule",
    "LEGACY_RULES",
    "LEGACY_WORLDS_KEY",
    "detect_schema",
    "migrate",
    "migrate_world",
    "section_version",
]
