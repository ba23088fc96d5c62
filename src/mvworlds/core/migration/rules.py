"""Legacy world section migration rules.

Each rule is a named step applied in ``LEGACY_RULES`` order to one world
section whose version is below the current one. Rules only touch keys they
understand; anything else in the section is left alone.
"""

from __future__ import annotations

import logging
from typing import Any

from mvworlds.core.document import Section
from mvworlds.core.migration.models import MigrationRule
from mvworlds.core.property import (
    CURRENT_VERSION,
    DESCRIPTORS,
    PropertyContext,
    SpawnLocation,
)
from mvworlds.core.property.nodes import (
    ALIAS,
    ENTRY_FEE_AMOUNT,
    ENTRY_FEE_CURRENCY,
    ENTRY_FEE_ENABLED,
    GENERATOR,
    RESPAWN_WORLD,
    SPAWN_LOCATION_NODE,
    VERSION,
)
from mvworlds.errors import InvalidValueError

logger = logging.getLogger(__name__)

LEGACY_TAG = "=="
"""Type tag the legacy serializer wrote into every object mapping (``==: MVWorld``)."""

LEGACY_RENAMES: tuple[tuple[str, str], ...] = (
    ("adjustSpawn", "adjust-spawn"),
    ("allowFlight", "allow-flight"),
    ("allowWeather", "allow-weather"),
    ("autoHeal", "auto-heal"),
    ("autoLoad", "auto-load"),
    ("bedRespawn", "bed-respawn"),
    ("entryfee.amount", "entry-fee.amount"),
    ("entryfee.currency", "entry-fee.currency"),
    ("gameMode", "gamemode"),
    ("keepSpawnInMemory", "keep-spawn-in-memory"),
    ("playerLimit", "player-limit"),
    ("portalForm", "portal-form"),
    ("respawnWorld", "respawn-world"),
    ("spawnLocation", "spawn-location"),
    ("spawning.animals.spawnrate", "spawning.animals.tick-rate"),
    ("spawning.monsters.spawnrate", "spawning.monsters.tick-rate"),
    ("worldBlacklist", "world-blacklist"),
)
"""(legacy path, current path) pairs."""

LEGACY_CONTAINERS = ("entryfee",)
"""Legacy mappings dropped once every key inside them has been renamed away."""

LEGACY_SPAWN_KEY = "spawn"

COLOR_CODES = {
    "BLACK": "0",
    "DARK_BLUE": "1",
    "DARK_GREEN": "2",
    "DARK_AQUA": "3",
    "DARK_RED": "4",
    "DARK_PURPLE": "5",
    "GOLD": "6",
    "GRAY": "7",
    "DARK_GRAY": "8",
    "BLUE": "9",
    "GREEN": "a",
    "AQUA": "b",
    "RED": "c",
    "LIGHT_PURPLE": "d",
    "YELLOW": "e",
    "WHITE": "f",
}

STYLE_CODES = {
    "MAGIC": "k",
    "BOLD": "l",
    "STRIKETHROUGH": "m",
    "UNDERLINE": "n",
    "ITALIC": "o",
    "NORMAL": "r",
}

_PLAIN_COLOR = "WHITE"
_PLAIN_STYLE = "NORMAL"
_NULL_STRINGS = frozenset({"null", "none"})
_LEGACY_NO_CURRENCY = frozenset({"", "-1"})


def strip_serialization_tags(world_name: str, section: Section, context: PropertyContext) -> None:
    """Drop ``==`` type tags at every mapping level."""

    def strip(node: Any) -> None:
        if isinstance(node, dict):
            node.pop(LEGACY_TAG, None)
            for value in node.values():
                strip(value)
        elif isinstance(node, list):
            for item in node:
                strip(item)

    strip(section.data)


def rename_legacy_keys(world_name: str, section: Section, context: PropertyContext) -> None:
    """Move camelCase keys to their kebab-case paths.

    The legacy key is removed once its value has been carried over. When both
    the legacy and the current key exist, the current one wins.
    """
    for old_path, new_path in LEGACY_RENAMES:
        if not section.contains(old_path):
            continue
        value = section.get(old_path)
        section.remove(old_path)
        if section.contains(new_path):
            logger.debug(
                "World '%s': '%s' superseded by existing '%s'", world_name, old_path, new_path
            )
            continue
        section.set(new_path, value)
        logger.debug("World '%s': moved '%s' to '%s'", world_name, old_path, new_path)

    for container in LEGACY_CONTAINERS:
        node = section.get(container)
        if isinstance(node, dict) and not node:
            section.remove(container)


def split_compact_spawn(world_name: str, section: Section, context: PropertyContext) -> None:
    """Turn a combined ``spawn: "x,y,z[,pitch,yaw]"`` string into ``spawn-location``."""
    compact = section.get(LEGACY_SPAWN_KEY)
    if not isinstance(compact, str) or section.contains(SPAWN_LOCATION_NODE.path):
        return
    try:
        location = SpawnLocation.from_compact(compact)
    except ValueError as e:
        logger.warning("World '%s': cannot read legacy spawn %r (%s)", world_name, compact, e)
        return
    section.remove(LEGACY_SPAWN_KEY)
    SPAWN_LOCATION_NODE.write(section, location)


def fold_alias_colours(world_name: str, section: Section, context: PropertyContext) -> None:
    """Prefix the alias with ``&`` colour codes taken from legacy ``color``/``style``.

    ``color: GREEN`` with ``alias: world the end`` becomes ``&aworld the end``.
    White and normal add nothing. Unrecognized values are kept in place.
    """
    color = section.get("color")
    style = section.get("style")
    if color is None and style is None:
        return

    color_name = str(color).strip().upper() if color is not None else _PLAIN_COLOR
    style_name = str(style).strip().upper() if style is not None else _PLAIN_STYLE
    color_code = COLOR_CODES.get(color_name)
    style_code = STYLE_CODES.get(style_name)

    alias = section.get(ALIAS.path)
    alias_text = "" if alias is None else str(alias)
    if alias_text:
        prefix = ""
        if color_code is not None and color_name != _PLAIN_COLOR:
            prefix += f"&{color_code}"
        if style_code is not None and style_name != _PLAIN_STYLE:
            prefix += f"&{style_code}"
        if prefix:
            section.set(ALIAS.path, prefix + alias_text)

    if color_code is not None:
        section.remove("color")
    else:
        logger.warning("World '%s': unknown legacy color %r left in place", world_name, color)
    if style_code is not None:
        section.remove("style")
    else:
        logger.warning("World '%s': unknown legacy style %r left in place", world_name, style)


def clear_null_strings(world_name: str, section: Section, context: PropertyContext) -> None:
    """Legacy files wrote missing generator and respawn world as the text ``null``."""
    for descriptor in (GENERATOR, RESPAWN_WORLD):
        node = section.get(descriptor.path)
        if isinstance(node, str) and node.strip().lower() in _NULL_STRINGS:
            section.set(descriptor.path, "")


def resolve_legacy_currency(world_name: str, section: Section, context: PropertyContext) -> None:
    """Legacy currency ``-1`` meant "use the economy plugin"; map it to the default currency."""
    path = ENTRY_FEE_CURRENCY.path
    if not section.contains(path):
        return
    currency = section.get(path)
    if currency is None or str(currency).strip() in _LEGACY_NO_CURRENCY:
        section.set(path, context.default_currency)
    else:
        section.set(path, str(currency).strip())


def normalize_property_types(world_name: str, section: Section, context: PropertyContext) -> None:
    """Re-serialize every known property so legacy text scalars get real types.

    ``pvp: 'true'`` becomes ``pvp: true`` and ``seed: '-51765...'`` an integer.
    Values that cannot be read are left as they are; reads fall back to defaults.
    """
    for descriptor in DESCRIPTORS.values():
        node = section.get(descriptor.path)
        if node is None:
            continue
        try:
            if isinstance(node, str):
                value = descriptor.parse_string(node)
            else:
                value = descriptor.coerce(descriptor.serializer.deserialize(node))
        except (InvalidValueError, TypeError, ValueError) as e:
            logger.warning(
                "World '%s': legacy value %r for '%s' is unusable (%s)",
                world_name,
                node,
                descriptor.name,
                e,
            )
            continue
        descriptor.write(section, value)


def infer_entry_fee_enabled(world_name: str, section: Section, context: PropertyContext) -> None:
    """A nonzero legacy fee amount means the fee was charged; zero means it was not.

    Only applies when the section has no explicit enabled flag.
    """
    if section.get(ENTRY_FEE_ENABLED.path) is not None:
        return
    amount = section.get(ENTRY_FEE_AMOUNT.path)
    enabled = isinstance(amount, (int, float)) and not isinstance(amount, bool) and amount != 0
    section.set(ENTRY_FEE_ENABLED.path, enabled)


def fill_missing_defaults(world_name: str, section: Section, context: PropertyContext) -> None:
    """Write defaults for properties the legacy schema did not have."""
    for descriptor in DESCRIPTORS.values():
        if descriptor.hidden:
            continue
        if section.get(descriptor.path) is None:
            descriptor.write_default(section, context)


def stamp_version(world_name: str, section: Section, context: PropertyContext) -> None:
    VERSION.write(section, CURRENT_VERSION)


LEGACY_RULES: tuple[MigrationRule, ...] = (
    MigrationRule("strip-serialization-tags", strip_serialization_tags),
    MigrationRule("rename-legacy-keys", rename_legacy_keys),
    MigrationRule("split-compact-spawn", split_compact_spawn),
    MigrationRule("fold-alias-colours", fold_alias_colours),
    MigrationRule("clear-null-strings", clear_null_strings),
    MigrationRule("resolve-legacy-currency", resolve_legacy_currency),
    MigrationRule("normalize-property-types", normalize_property_types),
    MigrationRule("infer-entry-fee-enabled", infer_entry_fee_enabled),
    MigrationRule("fill-missing-defaults", fill_missing_defaults),
    MigrationRule("stamp-version", stamp_version),
)
"""Rules applied, in order, to every world section below the current version."""
