"""Shared test fixtures."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from mvworlds import FileStorage, MemoryStorage, WorldsConfigManager, parse

RESOURCES = Path(__file__).parent / "resources"


def read_resource(name: str) -> str:
    return (RESOURCES / name).read_text(encoding="utf-8")


def assert_same_config(actual: bytes | str, expected: bytes | str) -> None:
    """Compare two worlds documents leaf by leaf, ignoring key order."""
    actual_leaves = parse(actual).flatten()
    expected_leaves = parse(expected).flatten()

    missing = sorted(expected_leaves.keys() - actual_leaves.keys())
    extra = sorted(actual_leaves.keys() - expected_leaves.keys())
    assert not missing, f"Keys missing from actual config: {missing}"
    assert not extra, f"Unexpected keys in actual config: {extra}"

    for path, value in expected_leaves.items():
        assert actual_leaves[path] == value, (
            f"Value for '{path}' differs: {actual_leaves[path]!r} != {value!r}"
        )


@pytest.fixture
def resource() -> Callable[[str], str]:
    """Read a YAML fixture from tests/resources."""
    return read_resource


@pytest.fixture
def same_config() -> Callable[[bytes | str, bytes | str], None]:
    """Assert two worlds documents hold the same paths and values."""
    return assert_same_config


@pytest.fixture
def worlds_file(tmp_path: Path) -> Path:
    """worlds.yml in a temp folder holding the default two-world config."""
    path = tmp_path / "worlds.yml"
    path.write_text(read_resource("default_worlds.yml"), encoding="utf-8")
    return path


@pytest.fixture
def manager(worlds_file: Path) -> WorldsConfigManager:
    """Loaded manager over the default config file."""
    manager = WorldsConfigManager(FileStorage(worlds_file))
    assert manager.load().is_success
    return manager


@pytest.fixture
def memory_manager() -> WorldsConfigManager:
    """Loaded manager over in-memory default config."""
    manager = WorldsConfigManager(MemoryStorage(read_resource("default_worlds.yml")))
    assert manager.load().is_success
    return manager
