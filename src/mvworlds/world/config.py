"""Per-world configuration bound to the property table.

Usage:
    world = manager.get_world_config("world")

    world.alias = "&aOverworld"
    world.entry_fee_amount  # 5.0
    world.spawn_location = SpawnLocation(-64.0, 64.0, 48.0)

    # The same property through the generic handle:
    world.string_property_handle.set_property("alias", "&aOverworld")
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, overload

from mvworlds.core.document import Section
from mvworlds.core.property import (
    DESCRIPTORS,
    Difficulty,
    Environment,
    GameMode,
    PortalType,
    PropertyContext,
    PropertyDescriptor,
    SpawnLocation,
)
from mvworlds.core.property import nodes
from mvworlds.errors import WorldNotFoundError
from mvworlds.world.handle import PropertyHandle

T = TypeVar("T")


class ConfigProperty(Generic[T]):
    """Typed attribute for one descriptor, routed through the property handle.

    Reading returns the handle's value; writing calls ``set_property`` and
    raises the carried error on failure, so the typed and generic paths share
    one implementation.
    """

    def __init__(self, descriptor: PropertyDescriptor[T]):
        self.descriptor = descriptor
        self.attribute = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.attribute = name

    @overload
    def __get__(self, instance: None, owner: type) -> ConfigProperty[T]: ...

    @overload
    def __get__(self, instance: WorldConfig, owner: type) -> T: ...

    def __get__(self, instance: WorldConfig | None, owner: type) -> ConfigProperty[T] | T:
        if instance is None:
            return self
        return instance.string_property_handle.get_property(self.descriptor.name).unwrap()

    def __set__(self, instance: WorldConfig, value: T) -> None:
        instance.string_property_handle.set_property(self.descriptor.name, value).unwrap()


class WorldConfig:
    """One world's section of the worlds document.

    Holds no property values itself; every read and write goes to the live
    section owned by the manager's document. Once the world is deleted from
    the manager the config is detached and every access fails with
    WorldNotFoundError.

    Args:
        world_name: Name of the world, equal to its key in the document.
        section: Live mapping node for the world.
        context: Inputs for context-dependent defaults.
    """

    adjust_spawn = ConfigProperty[bool](nodes.ADJUST_SPAWN)
    alias = ConfigProperty[str](nodes.ALIAS)
    allow_flight = ConfigProperty[bool](nodes.ALLOW_FLIGHT)
    allow_weather = ConfigProperty[bool](nodes.ALLOW_WEATHER)
    auto_heal = ConfigProperty[bool](nodes.AUTO_HEAL)
    auto_load = ConfigProperty[bool](nodes.AUTO_LOAD)
    bed_respawn = ConfigProperty[bool](nodes.BED_RESPAWN)
    difficulty = ConfigProperty[Difficulty](nodes.DIFFICULTY)
    entry_fee_enabled = ConfigProperty[bool](nodes.ENTRY_FEE_ENABLED)
    entry_fee_amount = ConfigProperty[float](nodes.ENTRY_FEE_AMOUNT)
    entry_fee_currency = ConfigProperty[str](nodes.ENTRY_FEE_CURRENCY)
    environment = ConfigProperty[Environment](nodes.ENVIRONMENT)
    gamemode = ConfigProperty[GameMode](nodes.GAMEMODE)
    generator = ConfigProperty[str](nodes.GENERATOR)
    hidden = ConfigProperty[bool](nodes.HIDDEN)
    hunger = ConfigProperty[bool](nodes.HUNGER)
    keep_spawn_in_memory = ConfigProperty[bool](nodes.KEEP_SPAWN_IN_MEMORY)
    player_limit = ConfigProperty[int](nodes.PLAYER_LIMIT)
    portal_form = ConfigProperty[PortalType](nodes.PORTAL_FORM)
    pvp = ConfigProperty[bool](nodes.PVP)
    respawn_world = ConfigProperty[str](nodes.RESPAWN_WORLD)
    scale = ConfigProperty[float](nodes.SCALE)
    seed = ConfigProperty[int](nodes.SEED)
    spawn_location = ConfigProperty[SpawnLocation](nodes.SPAWN_LOCATION_NODE)
    spawning_animals = ConfigProperty[bool](nodes.SPAWNING_ANIMALS_SPAWN)
    spawning_animals_ticks = ConfigProperty[int](nodes.SPAWNING_ANIMALS_TICKS)
    spawning_animals_exceptions = ConfigProperty[list[str]](nodes.SPAWNING_ANIMALS_EXCEPTIONS)
    spawning_monsters = ConfigProperty[bool](nodes.SPAWNING_MONSTERS_SPAWN)
    spawning_monsters_ticks = ConfigProperty[int](nodes.SPAWNING_MONSTERS_TICKS)
    spawning_monsters_exceptions = ConfigProperty[list[str]](nodes.SPAWNING_MONSTERS_EXCEPTIONS)
    world_blacklist = ConfigProperty[list[str]](nodes.WORLD_BLACKLIST)

    def __init__(self, world_name: str, section: Section, context: PropertyContext):
        self._world_name = world_name
        self._section: Section | None = section
        self._context = context
        self._handle = PropertyHandle(self)

    @classmethod
    def typed_properties(cls) -> dict[str, str]:
        """Map each property name to its typed attribute name."""
        return {
            value.descriptor.name: value.attribute
            for value in vars(cls).values()
            if isinstance(value, ConfigProperty)
        }

    @property
    def world_name(self) -> str:
        return self._world_name

    @property
    def context(self) -> PropertyContext:
        return self._context

    @property
    def string_property_handle(self) -> PropertyHandle:
        """Generic string-keyed access to this world's properties."""
        return self._handle

    @property
    def is_detached(self) -> bool:
        """True once the world has been deleted from its manager."""
        return self._section is None

    @property
    def section(self) -> Section:
        """Live document section for this world.

        Raises:
            WorldNotFoundError: If the world has been deleted.
        """
        if self._section is None:
            raise WorldNotFoundError(self._world_name)
        return self._section

    @property
    def version(self) -> float:
        """Schema version of this world's section."""
        return nodes.VERSION.read(self.section, self._context)

    def apply_defaults(self) -> None:
        """Write the default of every property the section does not have yet."""
        section = self.section
        for descriptor in DESCRIPTORS.values():
            if section.get(descriptor.path) is None:
                descriptor.write_default(section, self._context)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of every visible property value keyed by property name."""
        return {
            name: self._handle.get_property(name).unwrap()
            for name in self._handle.get_property_names()
        }

    def _bind(self, section: Section, context: PropertyContext) -> None:
        self._section = section
        self._context = context

    def _detach(self) -> None:
        self._section = None

    def __repr__(self) -> str:
        state = "detached" if self.is_detached else "attached"
        return f"WorldConfig({self._world_name!r}, {state})"
