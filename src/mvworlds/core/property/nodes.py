"""The world property table.

One descriptor per property. The handle, typed accessors, defaults for new
worlds and the migration filler all read from ``DESCRIPTORS``.
"""

from __future__ import annotations

from types import MappingProxyType

from mvworlds.core.property.models import (
    Difficulty,
    Environment,
    GameMode,
    PortalType,
    PropertyContext,
    PropertyDescriptor,
    SpawnLocation,
)
from mvworlds.core.property.serializers import (
    BOOL,
    FLOAT,
    INT,
    SPAWN_LOCATION,
    STRING,
    STRING_LIST,
    EnumSerializer,
)

CURRENT_VERSION = 1.0
"""Schema version stamped into every migrated or newly added world section."""


def _at_least_minus_one(value: int) -> bool:
    return value >= -1


def _non_negative(value: float) -> bool:
    return value >= 0


def _positive(value: float) -> bool:
    return value > 0


def _not_blank(value: str) -> bool:
    return bool(value.strip())


def _default_currency(context: PropertyContext) -> str:
    return context.default_currency


def _empty_list(_: PropertyContext) -> list[str]:
    return []


def _origin(_: PropertyContext) -> SpawnLocation:
    return SpawnLocation(0.0, 0.0, 0.0)


ADJUST_SPAWN = PropertyDescriptor("adjust-spawn", "adjust-spawn", BOOL, False)
ALIAS = PropertyDescriptor("alias", "alias", STRING, "")
ALLOW_FLIGHT = PropertyDescriptor("allow-flight", "allow-flight", BOOL, False)
ALLOW_WEATHER = PropertyDescriptor("allow-weather", "allow-weather", BOOL, True)
AUTO_HEAL = PropertyDescriptor("auto-heal", "auto-heal", BOOL, True)
AUTO_LOAD = PropertyDescriptor("auto-load", "auto-load", BOOL, True)
BED_RESPAWN = PropertyDescriptor("bed-respawn", "bed-respawn", BOOL, True)
DIFFICULTY = PropertyDescriptor(
    "difficulty", "difficulty", EnumSerializer(Difficulty), Difficulty.NORMAL
)
ENTRY_FEE_ENABLED = PropertyDescriptor("entryfee-enabled", "entry-fee.enabled", BOOL, False)
ENTRY_FEE_AMOUNT = PropertyDescriptor(
    "entryfee-amount", "entry-fee.amount", FLOAT, 0.0, validator=_non_negative
)
ENTRY_FEE_CURRENCY = PropertyDescriptor(
    "entryfee-currency", "entry-fee.currency", STRING, _default_currency, validator=_not_blank
)
ENVIRONMENT = PropertyDescriptor(
    "environment", "environment", EnumSerializer(Environment), Environment.NORMAL
)
GAMEMODE = PropertyDescriptor("gamemode", "gamemode", EnumSerializer(GameMode), GameMode.SURVIVAL)
GENERATOR = PropertyDescriptor("generator", "generator", STRING, "")
HIDDEN = PropertyDescriptor("hidden", "hidden", BOOL, False)
HUNGER = PropertyDescriptor("hunger", "hunger", BOOL, True)
KEEP_SPAWN_IN_MEMORY = PropertyDescriptor(
    "keep-spawn-in-memory", "keep-spawn-in-memory", BOOL, True
)
PLAYER_LIMIT = PropertyDescriptor(
    "player-limit", "player-limit", INT, -1, validator=_at_least_minus_one
)
PORTAL_FORM = PropertyDescriptor(
    "portal-form", "portal-form", EnumSerializer(PortalType), PortalType.ALL
)
PVP = PropertyDescriptor("pvp", "pvp", BOOL, True)
RESPAWN_WORLD = PropertyDescriptor("respawn-world", "respawn-world", STRING, "")
SCALE = PropertyDescriptor("scale", "scale", FLOAT, 1.0, validator=_positive)
SEED = PropertyDescriptor("seed", "seed", INT, INT.MIN)
SPAWN_LOCATION_NODE = PropertyDescriptor(
    "spawn-location", "spawn-location", SPAWN_LOCATION, _origin
)
SPAWNING_ANIMALS_SPAWN = PropertyDescriptor(
    "spawning-animals-spawn", "spawning.animals.spawn", BOOL, True
)
SPAWNING_ANIMALS_TICKS = PropertyDescriptor(
    "spawning-animals-ticks", "spawning.animals.tick-rate", INT, -1, validator=_at_least_minus_one
)
SPAWNING_ANIMALS_EXCEPTIONS = PropertyDescriptor(
    "spawning-animals-exceptions", "spawning.animals.exceptions", STRING_LIST, _empty_list
)
SPAWNING_MONSTERS_SPAWN = PropertyDescriptor(
    "spawning-monsters-spawn", "spawning.monsters.spawn", BOOL, True
)
SPAWNING_MONSTERS_TICKS = PropertyDescriptor(
    "spawning-monsters-ticks",
    "spawning.monsters.tick-rate",
    INT,
    -1,
    validator=_at_least_minus_one,
)
SPAWNING_MONSTERS_EXCEPTIONS = PropertyDescriptor(
    "spawning-monsters-exceptions", "spawning.monsters.exceptions", STRING_LIST, _empty_list
)
WORLD_BLACKLIST = PropertyDescriptor("world-blacklist", "world-blacklist", STRING_LIST, _empty_list)
VERSION = PropertyDescriptor("version", "version", FLOAT, CURRENT_VERSION, hidden=True)

DESCRIPTORS: MappingProxyType[str, PropertyDescriptor] = MappingProxyType(
    {
        descriptor.name: descriptor
        for descriptor in (
            ADJUST_SPAWN,
            ALIAS,
            ALLOW_FLIGHT,
            ALLOW_WEATHER,
            AUTO_HEAL,
            AUTO_LOAD,
            BED_RESPAWN,
            DIFFICULTY,
            ENTRY_FEE_ENABLED,
            ENTRY_FEE_AMOUNT,
            ENTRY_FEE_CURRENCY,
            ENVIRONMENT,
            GAMEMODE,
            GENERATOR,
            HIDDEN,
            HUNGER,
            KEEP_SPAWN_IN_MEMORY,
            PLAYER_LIMIT,
            PORTAL_FORM,
            PVP,
            RESPAWN_WORLD,
            SCALE,
            SEED,
            SPAWN_LOCATION_NODE,
            SPAWNING_ANIMALS_SPAWN,
            SPAWNING_ANIMALS_TICKS,
            SPAWNING_ANIMALS_EXCEPTIONS,
            SPAWNING_MONSTERS_SPAWN,
            SPAWNING_MONSTERS_TICKS,
            SPAWNING_MONSTERS_EXCEPTIONS,
            WORLD_BLACKLIST,
            VERSION,
        )
    }
)
"""All property descriptors keyed by handle name, in document order."""


def get_descriptor(name: str) -> PropertyDescriptor | None:
    """Look up a descriptor by handle name."""
    return DESCRIPTORS.get(name)


def visible_descriptors() -> list[PropertyDescriptor]:
    """Descriptors exposed through the property handle."""
    return [descriptor for descriptor in DESCRIPTORS.values() if not descriptor.hidden]
