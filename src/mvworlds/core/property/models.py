"""Property models: world enums, spawn location, and property descriptors.

Usage:
    ALIAS = PropertyDescriptor(name="alias", path="alias", serializer=STRING, default="")

    ALIAS.read(section, context)  # "" when absent or malformed
    ALIAS.write(section, "Overworld")
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mvworlds.errors import InvalidValueError

if TYPE_CHECKING:
    from mvworlds.core.document import Section
    from mvworlds.core.property.serializers import Serializer

logger = logging.getLogger(__name__)

T = TypeVar("T")

VAULT_ECONOMY_CURRENCY = "@vault-economy"
"""Currency marker meaning "charge through the server economy plugin"."""


class Environment(Enum):
    """World dimension type."""

    NORMAL = auto()
    NETHER = auto()
    THE_END = auto()
    CUSTOM = auto()


class Difficulty(Enum):
    """World difficulty."""

    PEACEFUL = auto()
    EASY = auto()
    NORMAL = auto()
    HARD = auto()


class GameMode(Enum):
    """Game mode applied to players entering the world."""

    SURVIVAL = auto()
    CREATIVE = auto()
    ADVENTURE = auto()
    SPECTATOR = auto()


class PortalType(Enum):
    """Portal kinds players may create in the world."""

    NONE = auto()
    ALL = auto()
    NETHER = auto()
    END = auto()


@dataclass(frozen=True, slots=True)
class SpawnLocation:
    """Spawn point of a world. Pitch and yaw are optional in compact form."""

    x: float
    y: float
    z: float
    pitch: float = 0.0
    yaw: float = 0.0

    def is_finite(self) -> bool:
        """Check that no coordinate is NaN or infinite."""
        return all(math.isfinite(v) for v in (self.x, self.y, self.z, self.pitch, self.yaw))

    def to_compact(self) -> str:
        """Format as ``x,y,z`` or ``x,y,z,pitch,yaw`` when rotated."""
        coords = [self.x, self.y, self.z]
        if self.pitch or self.yaw:
            coords += [self.pitch, self.yaw]
        return ",".join(repr(float(c)) for c in coords)

    @classmethod
    def from_compact(cls, text: str) -> SpawnLocation:
        """Parse the compact comma-joined form.

        Raises:
            ValueError: If there are not 3 or 5 numeric parts.
        """
        parts = [part.strip() for part in text.split(",")]
        if len(parts) not in (3, 5):
            raise ValueError(f"Expected 'x,y,z' or 'x,y,z,pitch,yaw', got {text!r}")
        return cls(*(float(part) for part in parts))


@dataclass(frozen=True, slots=True)
class PropertyContext:
    """Environment-dependent inputs to property defaults."""

    default_currency: str = VAULT_ECONOMY_CURRENCY
    """Currency used for new worlds and legacy worlds without one."""


Validator = Callable[[Any], bool]
"""Predicate over an already type-checked value."""

Default = Any | Callable[[PropertyContext], Any]


@dataclass(frozen=True)
class PropertyDescriptor(Generic[T]):
    """Schema entry for one world property.

    Descriptors are immutable and shared by every WorldConfig.
    """

    name: str
    """Key used by the property handle (``entryfee-amount``)."""

    path: str
    """Dotted location inside the world section (``entry-fee.amount``)."""

    serializer: Serializer[T]
    """Converts between Python values and document nodes."""

    default: Default
    """Default value, or a factory taking a PropertyContext."""

    validator: Validator | None = None
    """Extra constraint beyond the serializer's type check."""

    hidden: bool = False
    """Hidden properties are bookkeeping: not listed or settable through the handle."""

    def default_value(self, context: PropertyContext | None = None) -> T:
        """Resolve the default for this property.

        Factories get a fresh call each time so mutable defaults are never shared.
        """
        if callable(self.default):
            return self.default(context or PropertyContext())
        return self.default

    def coerce(self, value: Any) -> T:
        """Type-check and validate a value supplied by a caller.

        Args:
            value: Candidate value.

        Returns:
            The value converted to the property's Python type.

        Raises:
            InvalidValueError: If the type is wrong or the validator rejects it.
        """
        try:
            converted = self.serializer.coerce(value)
        except (TypeError, ValueError) as e:
            raise InvalidValueError(self.name, value, str(e)) from e
        if self.validator is not None and not self.validator(converted):
            raise InvalidValueError(self.name, value, "rejected by validator")
        return converted

    def parse_string(self, text: str) -> T:
        """Parse user-entered text into a validated value.

        Raises:
            InvalidValueError: If the text cannot be parsed or fails validation.
        """
        try:
            value = self.serializer.parse_string(text)
        except (TypeError, ValueError) as e:
            raise InvalidValueError(self.name, text, str(e)) from e
        return self.coerce(value)

    def read(self, section: Section, context: PropertyContext | None = None) -> T:
        """Read the property from a world section.

        Absent or null nodes give the default silently. Nodes that fail to
        deserialize or validate give the default and log a warning.
        """
        node = section.get(self.path)
        if node is None:
            return self.default_value(context)
        try:
            value = self.serializer.deserialize(node)
            if self.validator is not None and not self.validator(value):
                raise ValueError("rejected by validator")
        except (TypeError, ValueError) as e:
            logger.warning(
                "Property '%s' has invalid value %r (%s); using default", self.name, node, e
            )
            return self.default_value(context)
        return value

    def write(self, section: Section, value: T) -> None:
        """Serialize an already-coerced value into a world section."""
        section.set(self.path, self.serializer.serialize(value))

    def write_default(self, section: Section, context: PropertyContext | None = None) -> None:
        """Write the default value into a world section."""
        self.write(section, self.default_value(context))

    def suggestions(self) -> list[str]:
        """Suggested string inputs (enum names, booleans)."""
        return self.serializer.suggestions()
