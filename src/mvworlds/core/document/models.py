"""Structured document models: a live tree of mappings, sequences and scalars.

Paths are dotted (``entry-fee.amount``). Top-level world names are addressed
literally through ``section()`` because they may contain dots themselves.

Usage:
    document = Document({"world": {"alias": "Overworld"}})
    document.get("world.alias")  # "Overworld"

    section = document.section("world")
    section.set("entry-fee.amount", 5.0)  # creates the entry-fee mapping
    section.keys(deep=True)  # {"alias", "entry-fee", "entry-fee.amount"}
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

Node = dict[str, Any] | list[Any] | str | int | float | bool | None
"""Any value that can live in the document tree."""

PATH_SEPARATOR = "."

_MISSING: Any = object()


def split_path(path: str) -> list[str]:
    """Split a dotted path into its keys.

    Args:
        path: Dotted path such as ``spawning.animals.spawn``.

    Returns:
        List of keys, outermost first.

    Raises:
        ValueError: If the path is empty or has an empty segment.
    """
    parts = path.split(PATH_SEPARATOR)
    if not all(parts):
        raise ValueError(f"Invalid document path: {path!r}")
    return parts


class Section:
    """Live view onto one mapping node of a document.

    Reads and writes go straight to the wrapped dict; a Section never copies.
    Newly set keys are appended, existing keys keep their position.

    Args:
        data: Mapping node to wrap.
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, Any]):
        self._data = data

    @property
    def data(self) -> dict[str, Any]:
        """The wrapped mapping node (not a copy)."""
        return self._mapping()

    def _mapping(self) -> dict[str, Any]:
        if not isinstance(self._data, dict):
            raise TypeError(f"Document root is a {type(self._data).__name__}, not a mapping")
        return self._data

    def _find_parent(self, keys: list[str]) -> dict[str, Any] | None:
        node = self._mapping()
        for key in keys[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                return None
            node = child
        return node

    def _ensure_parent(self, keys: list[str]) -> dict[str, Any]:
        node = self._mapping()
        for key in keys[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        return node

    def get(self, path: str, default: Any = None) -> Any:
        """Get the node at a dotted path.

        Args:
            path: Dotted path relative to this section.
            default: Returned when any key along the path is absent.

        Returns:
            The node (live, not copied) or ``default``.
        """
        keys = split_path(path)
        parent = self._find_parent(keys)
        if parent is None:
            return default
        return parent.get(keys[-1], default)

    def contains(self, path: str) -> bool:
        """Check whether a dotted path is present."""
        return self.get(path, _MISSING) is not _MISSING

    def set(self, path: str, node: Node) -> None:
        """Set the node at a dotted path, creating intermediate mappings.

        A non-mapping value found where an intermediate mapping is needed is
        replaced by a new mapping.
        """
        keys = split_path(path)
        self._ensure_parent(keys)[keys[-1]] = node

    def remove(self, path: str) -> bool:
        """Remove the node at a dotted path.

        Returns:
            True if something was removed.
        """
        keys = split_path(path)
        parent = self._find_parent(keys)
        if parent is None or keys[-1] not in parent:
            return False
        del parent[keys[-1]]
        return True

    def section(self, key: str) -> Section | None:
        """Get the child mapping under a literal key, if it is a mapping."""
        child = self._mapping().get(key)
        if isinstance(child, dict):
            return Section(child)
        return None

    def create_section(self, key: str) -> Section:
        """Get or create the child mapping under a literal key."""
        node = self._mapping()
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        return Section(child)

    def keys(self, deep: bool = False) -> set[str]:
        """Enumerate keys.

        Args:
            deep: Include nested keys as dotted paths, mappings included.

        Returns:
            Set of keys (``deep=False``) or dotted paths (``deep=True``).
        """
        if not deep:
            return set(self._mapping())
        return set(self.flatten(include_sections=True))

    def flatten(self, include_sections: bool = False) -> dict[str, Any]:
        """Map every dotted path to its node.

        Args:
            include_sections: Also emit paths whose node is a mapping.

        Returns:
            Ordered dict of path to node. Leaves only by default.
        """
        flat: dict[str, Any] = {}

        def walk(prefix: str, node: dict[str, Any]) -> None:
            for key, value in node.items():
                path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)
                if isinstance(value, dict):
                    if include_sections:
                        flat[path] = value
                    walk(path, value)
                else:
                    flat[path] = value

        walk("", self._mapping())
        return flat

    def __contains__(self, key: object) -> bool:
        return key in self._mapping()

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping())

    def __len__(self) -> int:
        return len(self._mapping())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Section):
            return self._data == other._data
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class Document(Section):
    """Root of a parsed worlds document.

    The root is usually a mapping. Anything else is kept as parsed so the
    migration step can reject it with a proper error; mapping operations on
    such a document raise TypeError.

    Args:
        root: Root node. ``None`` (an empty file) becomes an empty mapping.
    """

    __slots__ = ()

    def __init__(self, root: Node = None):
        super().__init__({} if root is None else root)  # type: ignore[arg-type]

    @property
    def root(self) -> Node:
        """The root node as parsed."""
        return self._data

    def is_mapping(self) -> bool:
        """Check whether the root node is a mapping."""
        return isinstance(self._data, dict)

    def sections(self) -> Iterator[tuple[str, Section]]:
        """Iterate top-level mapping children as (key, Section) pairs."""
        for key, value in self._mapping().items():
            if isinstance(value, dict):
                yield key, Section(value)

    def copy(self) -> Document:
        """Return a deep copy sharing no nodes with this document."""
        return Document(copy.deepcopy(self._data))
