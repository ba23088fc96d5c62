"""Tests for property descriptors and the world property table."""

import logging

import pytest

from mvworlds.core.document import Section
from mvworlds.core.property import (
    CURRENT_VERSION,
    DESCRIPTORS,
    VAULT_ECONOMY_CURRENCY,
    Difficulty,
    PropertyContext,
    SpawnLocation,
    get_descriptor,
    visible_descriptors,
)
from mvworlds.core.property.nodes import (
    ENTRY_FEE_AMOUNT,
    ENTRY_FEE_CURRENCY,
    PLAYER_LIMIT,
    SCALE,
    SEED,
    SPAWN_LOCATION_NODE,
    VERSION,
    WORLD_BLACKLIST,
)
from mvworlds.errors import InvalidValueError


def test_table_covers_every_world_property() -> None:
    assert list(DESCRIPTORS) == [
        "adjust-spawn",
        "alias",
        "allow-flight",
        "allow-weather",
        "auto-heal",
        "auto-load",
        "bed-respawn",
        "difficulty",
        "entryfee-enabled",
        "entryfee-amount",
        "entryfee-currency",
        "environment",
        "gamemode",
        "generator",
        "hidden",
        "hunger",
        "keep-spawn-in-memory",
        "player-limit",
        "portal-form",
        "pvp",
        "respawn-world",
        "scale",
        "seed",
        "spawn-location",
        "spawning-animals-spawn",
        "spawning-animals-ticks",
        "spawning-animals-exceptions",
        "spawning-monsters-spawn",
        "spawning-monsters-ticks",
        "spawning-monsters-exceptions",
        "world-blacklist",
        "version",
    ]


def test_paths_are_unique() -> None:
    paths = [descriptor.path for descriptor in DESCRIPTORS.values()]

    assert len(paths) == len(set(paths))


def test_version_is_the_only_hidden_property() -> None:
    assert [d.name for d in DESCRIPTORS.values() if d.hidden] == ["version"]
    assert VERSION not in visible_descriptors()
    assert VERSION.default_value() == CURRENT_VERSION


def test_get_descriptor_by_name() -> None:
    assert get_descriptor("entryfee-amount") is ENTRY_FEE_AMOUNT
    assert ENTRY_FEE_AMOUNT.path == "entry-fee.amount"
    assert get_descriptor("entryFee") is None


def test_every_default_passes_its_own_validation() -> None:
    context = PropertyContext()
    for descriptor in DESCRIPTORS.values():
        default = descriptor.default_value(context)
        assert descriptor.coerce(default) == default, descriptor.name


def test_currency_default_comes_from_context() -> None:
    assert ENTRY_FEE_CURRENCY.default_value() == VAULT_ECONOMY_CURRENCY
    assert ENTRY_FEE_CURRENCY.default_value(PropertyContext(default_currency="DIRT")) == "DIRT"


def test_mutable_defaults_are_never_shared() -> None:
    first = WORLD_BLACKLIST.default_value()
    first.append("world")

    assert WORLD_BLACKLIST.default_value() == []


def test_seed_and_spawn_defaults() -> None:
    assert SEED.default_value() == -(2**63)
    assert SPAWN_LOCATION_NODE.default_value() == SpawnLocation(0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    ("descriptor", "value"),
    [
        (SCALE, 0.0),
        (SCALE, -2.0),
        (ENTRY_FEE_AMOUNT, -0.01),
        (PLAYER_LIMIT, -2),
        (ENTRY_FEE_CURRENCY, "   "),
    ],
)
def test_validators_reject_out_of_range_values(descriptor, value) -> None:
    with pytest.raises(InvalidValueError) as excinfo:
        descriptor.coerce(value)

    assert excinfo.value.name == descriptor.name


def test_coerce_wraps_type_errors() -> None:
    with pytest.raises(InvalidValueError, match="player-limit"):
        PLAYER_LIMIT.coerce("ten")


def test_parse_string_validates_after_parsing() -> None:
    assert PLAYER_LIMIT.parse_string("20") == 20
    with pytest.raises(InvalidValueError):
        PLAYER_LIMIT.parse_string("-5")
    with pytest.raises(InvalidValueError):
        PLAYER_LIMIT.parse_string("twenty")


def test_read_absent_or_null_gives_default_silently(caplog) -> None:
    section = Section({"scale": None})

    with caplog.at_level(logging.WARNING):
        assert SCALE.read(section) == 1.0
        assert PLAYER_LIMIT.read(section) == -1

    assert caplog.records == []


def test_read_malformed_value_gives_default_with_warning(caplog) -> None:
    section = Section({"scale": "huge", "player-limit": -7})

    with caplog.at_level(logging.WARNING):
        assert SCALE.read(section) == 1.0
        assert PLAYER_LIMIT.read(section) == -1

    assert len(caplog.records) == 2
    assert "scale" in caplog.records[0].getMessage()


def test_write_stores_serialized_node_at_nested_path() -> None:
    section = Section({})

    ENTRY_FEE_AMOUNT.write(section, 5)
    get_descriptor("difficulty").write(section, Difficulty.HARD)

    assert section.data == {"entry-fee": {"amount": 5.0}, "difficulty": "HARD"}


def test_write_default_uses_context() -> None:
    section = Section({})

    ENTRY_FEE_CURRENCY.write_default(section, PropertyContext(default_currency="EMERALD"))

    assert section.get("entry-fee.currency") == "EMERALD"


def test_suggestions_come_from_serializer() -> None:
    assert get_descriptor("pvp").suggestions() == ["true", "false"]
    assert get_descriptor("portal-form").suggestions() == ["NONE", "ALL", "NETHER", "END"]
    assert get_descriptor("alias").suggestions() == []
