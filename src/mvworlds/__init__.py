"""mvworlds: persisted, migrated and typed per-world configuration.

Usage:
    from mvworlds import FileStorage, SpawnLocation, WorldsConfigManager

    manager = WorldsConfigManager(FileStorage("plugins/Multiverse-Core/worlds.yml"))
    manager.load().unwrap()  # legacy layouts are migrated on load

    world = manager.get_world_config("world")
    world.alias = "&aOverworld"
    world.spawn_location = SpawnLocation(-64.0, 64.0, 48.0)
    world.string_property_handle.set_property("entryfee-amount", 5.0)

    manager.save().unwrap()
"""

__version__ = "0.1.0"

# Collaborators
from mvworlds.adapters import Economist, ItemEconomist, VaultEconomist

# Settings
from mvworlds.config import WorldsSettings

# Core primitives
from mvworlds.core import (
    CURRENT_VERSION,
    DESCRIPTORS,
    VAULT_ECONOMY_CURRENCY,
    Difficulty,
    Document,
    Environment,
    GameMode,
    PortalType,
    PropertyContext,
    PropertyDescriptor,
    SchemaState,
    Section,
    SpawnLocation,
    detect_schema,
    migrate,
    parse,
    serialize,
)

# Errors
from mvworlds.errors import (
    InvalidValueError,
    MigrationError,
    ParseError,
    StorageError,
    UnknownPropertyError,
    WorldExistsError,
    WorldNotFoundError,
    WorldsConfigError,
)

# Storage
from mvworlds.storage import FileStorage, MemoryStorage, Storage

# World
from mvworlds.world import (
    LoadResult,
    PropertyHandle,
    Result,
    WorldConfig,
    WorldsConfigManager,
)

__all__ = [
    # Core
    "Document",
    "Section",
    "parse",
    "serialize",
    "PropertyDescriptor",
    "PropertyContext",
    "DESCRIPTORS",
    "CURRENT_VERSION",
    "VAULT_ECONOMY_CURRENCY",
    "SpawnLocation",
    "Environment",
    "Difficulty",
    "GameMode",
    "PortalType",
    "SchemaState",
    "detect_schema",
    "migrate",
    # World
    "WorldsConfigManager",
    "WorldConfig",
    "PropertyHandle",
    "Result",
    "LoadResult",
    # Storage
    "Storage",
    "FileStorage",
    "MemoryStorage",
    # Collaborators
    "Economist",
    "VaultEconomist",
    "ItemEconomist",
    # Settings
    "WorldsSettings",
    # Errors
    "WorldsConfigError",
    "ParseError",
    "MigrationError",
    "UnknownPropertyError",
    "InvalidValueError",
    "WorldNotFoundError",
    "WorldExistsError",
    "StorageError",
]
