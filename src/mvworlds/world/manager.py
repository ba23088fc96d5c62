"""WorldsConfigManager: owner of the worlds document and its WorldConfigs.

Usage:
    manager = WorldsConfigManager(FileStorage(data_folder / "worlds.yml"))
    manager.load().unwrap()

    world = manager.get_world_config("world")
    world.pvp = False

    manager.add_world_config("newworld").unwrap()
    manager.delete_world_config("old_world")
    manager.save().unwrap()

Only ``load`` and ``save`` touch storage. Everything else mutates the
in-memory document until the next save. Not thread-safe: callers serialize
access themselves.
"""

from __future__ import annotations

import logging

from mvworlds.adapters import Economist, VaultEconomist
from mvworlds.config.settings import WorldsSettings
from mvworlds.core.document import DEFAULT_ENCODING, Document, parse, serialize
from mvworlds.core.migration import SchemaState, detect_schema, migrate
from mvworlds.core.property import PropertyContext
from mvworlds.errors import (
    InvalidValueError,
    StorageError,
    WorldExistsError,
    WorldNotFoundError,
    WorldsConfigError,
)
from mvworlds.storage import FileStorage, Storage
from mvworlds.world.config import WorldConfig
from mvworlds.world.result import LoadResult, Result

logger = logging.getLogger(__name__)


class WorldsConfigManager:
    """Loads, migrates, edits and saves the worlds document.

    The set of WorldConfigs always equals the set of world keys in the current
    document. A failed load or save leaves the previous in-memory state as it was.

    Args:
        storage: Where the document bytes live.
        economist: Supplies the default entry-fee currency. Defaults to the vault economy.
        encoding: Text encoding of the stored document.
    """

    def __init__(
        self,
        storage: Storage,
        economist: Economist | None = None,
        encoding: str = DEFAULT_ENCODING,
    ):
        self._storage = storage
        self._economist = economist or VaultEconomist()
        self._encoding = encoding
        self._document = Document()
        self._world_configs: dict[str, WorldConfig] = {}
        self._loaded = False

    @classmethod
    def from_settings(
        cls,
        settings: WorldsSettings | None = None,
        economist: Economist | None = None,
    ) -> WorldsConfigManager:
        """Build a manager on the file named by settings (environment by default)."""
        settings = settings or WorldsSettings()
        return cls(FileStorage(settings.worlds_path), economist, settings.encoding)

    @property
    def is_loaded(self) -> bool:
        """True once a load has succeeded."""
        return self._loaded

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def document(self) -> Document:
        """The current in-memory document (live, not a copy)."""
        return self._document

    def _context(self) -> PropertyContext:
        return PropertyContext(default_currency=self._economist.default_currency())

    def load(self) -> Result[LoadResult]:
        """Read, parse and migrate the stored document, then rebuild all WorldConfigs.

        A missing document loads as empty. WorldConfig objects for worlds that
        survive the reload are kept and rebound, so references held by callers
        stay valid.

        Returns:
            Success with the added and removed world names, or failure with
            StorageError, ParseError or MigrationError.
        """
        context = self._context()
        try:
            data = self._storage.read()
            document = parse(data, self._encoding) if data is not None else Document()
            migrated = detect_schema(document) is SchemaState.LEGACY
            if migrated:
                logger.info("Worlds config is in the legacy format, migrating")
                document = migrate(document, context)
        except WorldsConfigError as e:
            logger.error("Failed to load worlds config: %s", e)
            return Result.failure(e)

        previous = self._world_configs
        configs: dict[str, WorldConfig] = {}
        for name, section in document.sections():
            config = previous.get(name)
            if config is None:
                config = WorldConfig(name, section, context)
            else:
                config._bind(section, context)
            configs[name] = config

        removed = [name for name in previous if name not in configs]
        for name in removed:
            previous[name]._detach()

        self._document = document
        self._world_configs = configs
        self._loaded = True
        logger.info("Loaded %d world config(s)", len(configs))
        return Result.success(
            LoadResult(
                new_worlds=[name for name in configs if name not in previous],
                removed_worlds=removed,
                migrated=migrated,
            )
        )

    def save(self) -> Result[None]:
        """Serialize the current document and write it to storage atomically.

        Returns:
            Success, or failure with StorageError. Saving before any successful
            load is refused so an unread file is never overwritten.
        """
        if not self._loaded:
            return Result.failure(
                StorageError("Worlds config has not been loaded, refusing to save")
            )
        try:
            self._storage.write(serialize(self._document, self._encoding))
        except WorldsConfigError as e:
            logger.error("Failed to save worlds config: %s", e)
            return Result.failure(e)
        logger.debug("Saved %d world config(s)", len(self._world_configs))
        return Result.success()

    def get_world_config(self, world_name: str) -> WorldConfig | None:
        """Get the config of a world, or None if there is no such world."""
        return self._world_configs.get(world_name)

    def get_all_world_configs(self) -> list[WorldConfig]:
        """All world configs in document order."""
        return list(self._world_configs.values())

    def world_names(self) -> list[str]:
        """All world names in document order."""
        return list(self._world_configs)

    def add_world_config(self, world_name: str) -> Result[WorldConfig]:
        """Create a new world section filled with every property default.

        Returns:
            Success with the new WorldConfig, or failure with WorldExistsError,
            or InvalidValueError for a blank name.
        """
        if not isinstance(world_name, str) or not world_name.strip():
            return Result.failure(
                InvalidValueError("world-name", world_name, "must be a non-empty string")
            )
        if world_name in self._world_configs or world_name in self._document:
            return Result.failure(WorldExistsError(world_name))

        section = self._document.create_section(world_name)
        config = WorldConfig(world_name, section, self._context())
        config.apply_defaults()
        self._world_configs[world_name] = config
        logger.debug("Added world config '%s'", world_name)
        return Result.success(config)

    def delete_world_config(self, world_name: str) -> Result[None]:
        """Remove a world section and detach its WorldConfig.

        Returns:
            Success, or failure with WorldNotFoundError.
        """
        config = self._world_configs.pop(world_name, None)
        if config is None:
            return Result.failure(WorldNotFoundError(world_name))
        del self._document.data[world_name]
        config._detach()
        logger.debug("Deleted world config '%s'", world_name)
        return Result.success()

    def __contains__(self, world_name: object) -> bool:
        return world_name in self._world_configs

    def __len__(self) -> int:
        return len(self._world_configs)
