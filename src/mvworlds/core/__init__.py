"""Core functionalities: stateless document, property and migration building blocks.

Architecture Note:
    core/ holds pure building blocks with no runtime state of their own.
    For the stateful manager and its storage, see world/ and storage/.
"""

from mvworlds.core.document import Document, Node, Section, parse, serialize
from mvworlds.core.migration import MigrationRule, SchemaState, detect_schema, migrate
from mvworlds.core.property import (
    CURRENT_VERSION,
    DESCRIPTORS,
    VAULT_ECONOMY_CURRENCY,
    Difficulty,
    Environment,
    GameMode,
    PortalType,
    PropertyContext,
    PropertyDescriptor,
    SpawnLocation,
    get_descriptor,
)

__all__ = [
    # Document
    "Document",
    "Section",
    "Node",
    "parse",
    "serialize",
    # Property
    "PropertyDescriptor",
    "PropertyContext",
    "DESCRIPTORS",
    "CURRENT_VERSION",
    "VAULT_ECONOMY_CURRENCY",
    "get_descriptor",
    "SpawnLocation",
    "Environment",
    "Difficulty",
    "GameMode",
    "PortalType",
    # Migration
    "SchemaState",
    "MigrationRule",
    "detect_schema",
    "migrate",
]
