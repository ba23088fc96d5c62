"""Serializers between Python property values and document nodes.

Each serializer has four directions:
- coerce: caller-supplied Python value -> property value (strict)
- serialize: property value -> document node
- deserialize: document node -> property value (tolerates YAML number widening)
- parse_string: user text -> property value

All of them raise TypeError or ValueError on bad input; PropertyDescriptor
turns those into InvalidValueError or a logged fallback.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from mvworlds.core.document import Node
from mvworlds.core.property.models import SpawnLocation

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


class Serializer(Protocol[T]):
    """Conversion strategy for one property type."""

    def coerce(self, value: Any) -> T:
        """Convert a caller-supplied value, rejecting wrong types."""
        ...

    def serialize(self, value: T) -> Node:
        """Convert a property value to a document node."""
        ...

    def deserialize(self, node: Node) -> T:
        """Convert a document node to a property value."""
        ...

    def parse_string(self, text: str) -> T:
        """Parse user-entered text."""
        ...

    def suggestions(self) -> list[str]:
        """Suggested string inputs, empty when open-ended."""
        ...


class BoolSerializer:
    def coerce(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"expected bool, got {type(value).__name__}")
        return value

    def serialize(self, value: bool) -> Node:
        return value

    def deserialize(self, node: Node) -> bool:
        return self.coerce(node)

    def parse_string(self, text: str) -> bool:
        lowered = text.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"not a boolean: {text!r}")

    def suggestions(self) -> list[str]:
        return ["true", "false"]


class IntSerializer:
    """64-bit signed integers."""

    MIN = -(2**63)
    MAX = 2**63 - 1

    def coerce(self, value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError("expected int, got bool")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"not a whole number: {value}")
            value = int(value)
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if not self.MIN <= value <= self.MAX:
            raise ValueError(f"{value} is outside the 64-bit range")
        return value

    def serialize(self, value: int) -> Node:
        return value

    def deserialize(self, node: Node) -> int:
        return self.coerce(node)

    def parse_string(self, text: str) -> int:
        return self.coerce(int(text.strip()))

    def suggestions(self) -> list[str]:
        return []


class FloatSerializer:
    def coerce(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected number, got {type(value).__name__}")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"not a finite number: {value}")
        return value

    def serialize(self, value: float) -> Node:
        return float(value)

    def deserialize(self, node: Node) -> float:
        return self.coerce(node)

    def parse_string(self, text: str) -> float:
        return self.coerce(float(text.strip()))

    def suggestions(self) -> list[str]:
        return []


class StringSerializer:
    def coerce(self, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        return value

    def serialize(self, value: str) -> Node:
        return value

    def deserialize(self, node: Node) -> str:
        # Scalars like ``alias: 123`` are read back as text.
        if isinstance(node, (dict, list)):
            raise TypeError(f"expected a scalar, got {type(node).__name__}")
        if isinstance(node, bool):
            return "true" if node else "false"
        return str(node)

    def parse_string(self, text: str) -> str:
        return text

    def suggestions(self) -> list[str]:
        return []


class EnumSerializer(Generic[E]):
    """Enum members stored by name, matched case-insensitively."""

    def __init__(self, enum_type: type[E]):
        self.enum_type = enum_type

    def _by_name(self, name: str) -> E:
        try:
            return self.enum_type[name.strip().upper()]
        except KeyError:
            allowed = ", ".join(self.suggestions())
            raise ValueError(f"expected one of {allowed}, got {name!r}") from None

    def coerce(self, value: Any) -> E:
        if isinstance(value, self.enum_type):
            return value
        if isinstance(value, str):
            return self._by_name(value)
        raise TypeError(f"expected {self.enum_type.__name__}, got {type(value).__name__}")

    def serialize(self, value: E) -> Node:
        return value.name

    def deserialize(self, node: Node) -> E:
        if not isinstance(node, str):
            raise TypeError(f"expected {self.enum_type.__name__} name, got {node!r}")
        return self._by_name(node)

    def parse_string(self, text: str) -> E:
        return self._by_name(text)

    def suggestions(self) -> list[str]:
        return [member.name for member in self.enum_type]


class StringListSerializer:
    def coerce(self, value: Any) -> list[str]:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise TypeError(f"expected a list of strings, got {type(value).__name__}")
        if not all(isinstance(item, str) for item in value):
            raise TypeError("every list item must be a string")
        return list(value)

    def serialize(self, value: list[str]) -> Node:
        return list(value)

    def deserialize(self, node: Node) -> list[str]:
        if not isinstance(node, list):
            raise TypeError(f"expected a list, got {type(node).__name__}")
        if any(isinstance(item, (dict, list)) or item is None for item in node):
            raise TypeError("list items must be scalars")
        return [str(item) for item in node]

    def parse_string(self, text: str) -> list[str]:
        return [item.strip() for item in text.split(",") if item.strip()]

    def suggestions(self) -> list[str]:
        return []


class SpawnLocationSerializer:
    """Writes a ``{x, y, z, pitch, yaw}`` mapping; reads that or ``"x,y,z[,pitch,yaw]"``."""

    _AXES = ("x", "y", "z")
    _ROTATION = ("pitch", "yaw")

    def coerce(self, value: Any) -> SpawnLocation:
        if isinstance(value, str):
            value = SpawnLocation.from_compact(value)
        elif isinstance(value, (tuple, list)) and len(value) in (3, 5):
            value = SpawnLocation(*(FLOAT.coerce(v) for v in value))
        if not isinstance(value, SpawnLocation):
            raise TypeError(f"expected SpawnLocation, got {type(value).__name__}")
        if not value.is_finite():
            raise ValueError("coordinates must be finite")
        return value

    def serialize(self, value: SpawnLocation) -> Node:
        return {
            "x": float(value.x),
            "y": float(value.y),
            "z": float(value.z),
            "pitch": float(value.pitch),
            "yaw": float(value.yaw),
        }

    def deserialize(self, node: Node) -> SpawnLocation:
        if isinstance(node, str):
            return self.coerce(SpawnLocation.from_compact(node))
        if not isinstance(node, Mapping):
            raise TypeError(f"expected mapping or 'x,y,z' string, got {type(node).__name__}")
        missing = [axis for axis in self._AXES if axis not in node]
        if missing:
            raise ValueError(f"missing coordinates: {', '.join(missing)}")
        coords = [FLOAT.coerce(node[axis]) for axis in self._AXES]
        rotation = [FLOAT.coerce(node.get(key, 0.0)) for key in self._ROTATION]
        return SpawnLocation(*coords, *rotation)

    def parse_string(self, text: str) -> SpawnLocation:
        return SpawnLocation.from_compact(text)

    def suggestions(self) -> list[str]:
        return []


BOOL = BoolSerializer()
INT = IntSerializer()
FLOAT = FloatSerializer()
STRING = StringSerializer()
STRING_LIST = StringListSerializer()
SPAWN_LOCATION = SpawnLocationSerializer()
