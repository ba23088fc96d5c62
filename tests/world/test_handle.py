"""Tests for string-keyed property access."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mvworlds import (
    DESCRIPTORS,
    Difficulty,
    Environment,
    GameMode,
    InvalidValueError,
    MemoryStorage,
    PortalType,
    PropertyContext,
    SpawnLocation,
    UnknownPropertyError,
    WorldConfig,
    WorldsConfigManager,
)
from mvworlds.core.document import Section

coordinate = st.floats(allow_nan=False, allow_infinity=False, min_value=-3.0e7, max_value=3.0e7)
non_blank = st.text(min_size=1).filter(lambda s: s.strip() != "")

# Valid values for every visible property, keyed by property name.
VALID_VALUES = {
    "adjust-spawn": st.booleans(),
    "alias": st.text(),
    "allow-flight": st.booleans(),
    "allow-weather": st.booleans(),
    "auto-heal": st.booleans(),
    "auto-load": st.booleans(),
    "bed-respawn": st.booleans(),
    "difficulty": st.sampled_from(Difficulty),
    "entryfee-enabled": st.booleans(),
    "entryfee-amount": st.floats(min_value=0.0, max_value=1.0e9),
    "entryfee-currency": non_blank,
    "environment": st.sampled_from(Environment),
    "gamemode": st.sampled_from(GameMode),
    "generator": st.text(),
    "hidden": st.booleans(),
    "hunger": st.booleans(),
    "keep-spawn-in-memory": st.booleans(),
    "player-limit": st.integers(min_value=-1, max_value=10_000),
    "portal-form": st.sampled_from(PortalType),
    "pvp": st.booleans(),
    "respawn-world": st.text(),
    "scale": st.floats(min_value=0.001, max_value=1.0e6),
    "seed": st.integers(min_value=-(2**63), max_value=2**63 - 1),
    "spawn-location": st.builds(SpawnLocation, coordinate, coordinate, coordinate),
    "spawning-animals-spawn": st.booleans(),
    "spawning-animals-ticks": st.integers(min_value=-1, max_value=100_000),
    "spawning-animals-exceptions": st.lists(st.text()),
    "spawning-monsters-spawn": st.booleans(),
    "spawning-monsters-ticks": st.integers(min_value=-1, max_value=100_000),
    "spawning-monsters-exceptions": st.lists(st.text()),
    "world-blacklist": st.lists(st.text()),
}


def new_world(name: str = "world") -> WorldConfig:
    """A WorldConfig with every default written, outside any manager."""
    config = WorldConfig(name, Section({}), PropertyContext())
    config.apply_defaults()
    return config


@pytest.fixture
def world() -> WorldConfig:
    return new_world()


def test_valid_values_cover_every_visible_property(world: WorldConfig) -> None:
    assert set(VALID_VALUES) == set(world.string_property_handle.get_property_names())


def test_hidden_version_is_not_reachable(world: WorldConfig) -> None:
    handle = world.string_property_handle

    assert "version" not in handle.get_property_names()
    assert isinstance(handle.get_property("version").error, UnknownPropertyError)
    assert isinstance(handle.set_property("version", 2.0).error, UnknownPropertyError)


@pytest.mark.parametrize("name", sorted(VALID_VALUES))
@given(data=st.data())
def test_handle_and_typed_accessor_agree(name: str, data) -> None:
    """A value set through either path reads back identically through both."""
    world = new_world()
    handle = world.string_property_handle
    attribute = WorldConfig.typed_properties()[name]

    through_handle = data.draw(VALID_VALUES[name], label="through_handle")
    assert handle.set_property(name, through_handle).is_success
    assert getattr(world, attribute) == through_handle
    assert handle.get_property(name).unwrap() == through_handle

    through_attribute = data.draw(VALID_VALUES[name], label="through_attribute")
    setattr(world, attribute, through_attribute)
    assert handle.get_property(name).unwrap() == through_attribute


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("pvp", "yes"),
        ("scale", 0.0),
        ("scale", "big"),
        ("player-limit", -2),
        ("player-limit", 1.5),
        ("seed", 2**63),
        ("entryfee-amount", -1.0),
        ("entryfee-currency", ""),
        ("difficulty", "nightmare"),
        ("spawn-location", (1.0, 2.0)),
        ("spawn-location", (float("nan"), 0.0, 0.0)),
        ("world-blacklist", "world_nether"),
        ("alias", None),
    ],
)
def test_invalid_value_rejected_and_old_value_kept(world: WorldConfig, name, value) -> None:
    handle = world.string_property_handle
    before = handle.get_property(name).unwrap()

    result = handle.set_property(name, value)

    assert isinstance(result.error, InvalidValueError)
    assert handle.get_property(name).unwrap() == before


def test_typed_setter_raises_invalid_value(world: WorldConfig) -> None:
    with pytest.raises(InvalidValueError):
        world.scale = -1.0

    assert world.scale == 1.0


def test_unknown_property(world: WorldConfig) -> None:
    handle = world.string_property_handle

    for result in (
        handle.get_property("nope"),
        handle.set_property("nope", 1),
        handle.set_property_string("nope", "1"),
        handle.reset_property("nope"),
        handle.get_default_property("nope"),
        handle.get_suggested_values("nope"),
        handle.add_property("nope", "x"),
    ):
        assert isinstance(result.error, UnknownPropertyError)


def test_enum_property_accepts_member_names(world: WorldConfig) -> None:
    handle = world.string_property_handle

    assert handle.set_property("gamemode", "creative").is_success
    assert world.gamemode is GameMode.CREATIVE
    assert world.section.get("gamemode") == "CREATIVE"


@pytest.mark.parametrize(
    ("name", "text", "expected"),
    [
        ("pvp", "off", False),
        ("scale", "8", 8.0),
        ("player-limit", "20", 20),
        ("environment", "the_end", Environment.THE_END),
        ("spawn-location", "1,64,-3", SpawnLocation(1.0, 64.0, -3.0)),
        ("world-blacklist", "world_nether, world_the_end", ["world_nether", "world_the_end"]),
        ("alias", "&aOverworld", "&aOverworld"),
    ],
)
def test_set_property_string_parses_text(world: WorldConfig, name, text, expected) -> None:
    handle = world.string_property_handle

    assert handle.set_property_string(name, text).is_success
    assert handle.get_property(name).unwrap() == expected


def test_set_property_string_rejects_bad_text(world: WorldConfig) -> None:
    handle = world.string_property_handle

    result = handle.set_property_string("player-limit", "lots")

    assert isinstance(result.error, InvalidValueError)
    assert world.player_limit == -1


def test_reset_property_restores_default(world: WorldConfig) -> None:
    world.entry_fee_currency = "DIRT"

    assert world.string_property_handle.reset_property("entryfee-currency").is_success
    assert world.entry_fee_currency == "@vault-economy"


def test_get_default_property_uses_world_context() -> None:
    config = WorldConfig("world", Section({}), PropertyContext(default_currency="EMERALD"))
    handle = config.string_property_handle

    assert handle.get_default_property("entryfee-currency").unwrap() == "EMERALD"
    assert handle.get_default_property("difficulty").unwrap() is Difficulty.NORMAL


def test_absent_property_reads_as_default() -> None:
    config = WorldConfig("world", Section({"pvp": False}), PropertyContext())

    assert config.pvp is False
    assert config.hunger is True
    assert config.spawn_location == SpawnLocation(0.0, 0.0, 0.0)


def test_add_and_remove_list_items(world: WorldConfig) -> None:
    handle = world.string_property_handle

    assert handle.add_property("world-blacklist", "world_nether").is_success
    assert handle.add_property("world-blacklist", "world_the_end").is_success
    assert world.world_blacklist == ["world_nether", "world_the_end"]

    assert handle.remove_property("world-blacklist", "world_nether").is_success
    assert world.world_blacklist == ["world_the_end"]


def test_remove_missing_list_item_fails(world: WorldConfig) -> None:
    result = world.string_property_handle.remove_property("world-blacklist", "ghost")

    assert isinstance(result.error, InvalidValueError)
    assert "not in list" in str(result.error)


def test_list_operations_refuse_scalar_properties(world: WorldConfig) -> None:
    handle = world.string_property_handle

    assert isinstance(handle.add_property("alias", "x").error, InvalidValueError)
    assert isinstance(handle.remove_property("pvp", "x").error, InvalidValueError)


def test_returned_lists_do_not_alias_the_document(world: WorldConfig) -> None:
    blacklist = world.world_blacklist
    blacklist.append("sneaky")

    assert world.world_blacklist == []


def test_suggested_values(world: WorldConfig) -> None:
    handle = world.string_property_handle

    assert handle.get_suggested_values("difficulty").unwrap() == [
        "PEACEFUL",
        "EASY",
        "NORMAL",
        "HARD",
    ]
    assert handle.get_suggested_values("hunger").unwrap() == ["true", "false"]
    assert handle.get_suggested_values("seed").unwrap() == []


def test_typed_properties_map_every_visible_descriptor() -> None:
    typed = WorldConfig.typed_properties()

    assert set(typed) == {d.name for d in DESCRIPTORS.values() if not d.hidden}
    assert typed["entryfee-amount"] == "entry_fee_amount"
    assert typed["spawning-animals-spawn"] == "spawning_animals"


def test_handle_writes_reach_the_saved_document() -> None:
    storage = MemoryStorage(b"")
    manager = WorldsConfigManager(storage)
    manager.load().unwrap()
    world = manager.add_world_config("world").unwrap()

    world.string_property_handle.set_property("entryfee-amount", 5)
    manager.save().unwrap()

    assert b"amount: 5.0" in storage.data
