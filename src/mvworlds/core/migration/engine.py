"""Legacy-to-current worlds document migration.

Usage:
    if detect_schema(document) is SchemaState.LEGACY:
        document = migrate(document, PropertyContext(default_currency="DIRT"))

``migrate`` never mutates its input; it works on a deep copy and returns it.
On an already-current document it returns the input unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from mvworlds.core.document import Document, Section
from mvworlds.core.migration.models import MigrationRule, SchemaState
from mvworlds.core.migration.rules import LEGACY_RULES
from mvworlds.core.property import CURRENT_VERSION, PropertyContext
from mvworlds.core.property.nodes import VERSION
from mvworlds.errors import MigrationError

logger = logging.getLogger(__name__)

LEGACY_WORLDS_KEY = "worlds"
"""Legacy documents nested every world under this root key."""


def section_version(section: Section) -> float:
    """Schema version stamped on a world section; 0.0 when absent or unreadable."""
    node = section.get(VERSION.path)
    if isinstance(node, bool) or not isinstance(node, (int, float, str)):
        return 0.0
    try:
        return float(node)
    except ValueError:
        return 0.0


def _has_legacy_wrapper(root: dict[str, Any]) -> bool:
    if LEGACY_WORLDS_KEY not in root:
        return False
    wrapper = root[LEGACY_WORLDS_KEY]
    # A current-layout world that happens to be called "worlds" carries a version.
    return wrapper is None or (isinstance(wrapper, dict) and VERSION.path not in wrapper)


def _check_world_nodes(nodes: dict[str, Any], where: str) -> None:
    for name, node in nodes.items():
        if not isinstance(node, dict):
            raise MigrationError(
                f"World '{name}' {where}must be a mapping, got {type(node).__name__}"
            )


def _check_shape(document: Document) -> dict[str, Any]:
    if not document.is_mapping():
        raise MigrationError(
            f"Worlds document root must be a mapping, got {type(document.root).__name__}"
        )
    root = document.data
    if _has_legacy_wrapper(root):
        wrapper = root[LEGACY_WORLDS_KEY] or {}
        _check_world_nodes(wrapper, f"in '{LEGACY_WORLDS_KEY}' ")
        _check_world_nodes({k: v for k, v in root.items() if k != LEGACY_WORLDS_KEY}, "")
    else:
        _check_world_nodes(root, "")
    return root


def detect_schema(document: Document) -> SchemaState:
    """Classify a document as legacy or current.

    Raises:
        MigrationError: If the document matches neither shape.
    """
    root = _check_shape(document)
    if _has_legacy_wrapper(root):
        return SchemaState.LEGACY
    for _, section in document.sections():
        if section_version(section) < CURRENT_VERSION:
            return SchemaState.LEGACY
    return SchemaState.CURRENT


def migrate_world(
    world_name: str,
    section: Section,
    context: PropertyContext,
    rules: tuple[MigrationRule, ...] = LEGACY_RULES,
) -> None:
    """Apply the legacy rules to one world section in place."""
    for rule in rules:
        logger.debug("World '%s': applying migration rule '%s'", world_name, rule.name)
        rule(world_name, section, context)


def migrate(document: Document, context: PropertyContext | None = None) -> Document:
    """Bring a document to the current schema.

    Args:
        document: Parsed document, left untouched.
        context: Supplies the default currency for worlds that lack one.

    Returns:
        ``document`` itself when it is already current, otherwise a migrated copy.

    Raises:
        MigrationError: If the document matches neither shape, or the legacy
            wrapper and the root both define the same world.
    """
    if detect_schema(document) is SchemaState.CURRENT:
        return document

    context = context or PropertyContext()
    migrated = document.copy()
    root = migrated.data

    if _has_legacy_wrapper(root):
        wrapper = root.pop(LEGACY_WORLDS_KEY) or {}
        for name, node in wrapper.items():
            if name in root:
                raise MigrationError(
                    f"World '{name}' is defined both inside and outside '{LEGACY_WORLDS_KEY}'"
                )
            root[name] = node
        logger.info(
            "Moved %d world(s) out of the legacy '%s' section", len(wrapper), LEGACY_WORLDS_KEY
        )

    migrated_names = []
    for name, section in migrated.sections():
        if section_version(section) < CURRENT_VERSION:
            migrate_world(name, section, context)
            migrated_names.append(name)

    if migrated_names:
        logger.info("Migrated legacy world config(s): %s", ", ".join(migrated_names))
    return migrated
