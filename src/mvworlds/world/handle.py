"""String-keyed property access for one world.

Usage:
    handle = world_config.string_property_handle

    handle.get_property("alias").unwrap()
    handle.set_property("entryfee-amount", 5.0)
    handle.set_property_string("difficulty", "hard")   # parsed via the descriptor
    handle.add_property("world-blacklist", "nether")  # list properties only

    result = handle.set_property("scale", -1.0)
    result.is_failure  # True, InvalidValueError; scale keeps its old value
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mvworlds.core.property import PropertyDescriptor, get_descriptor, visible_descriptors
from mvworlds.core.property.serializers import StringListSerializer
from mvworlds.errors import InvalidValueError, UnknownPropertyError, WorldsConfigError
from mvworlds.world.result import Result

if TYPE_CHECKING:
    from mvworlds.world.config import WorldConfig


class PropertyHandle:
    """Generic get/set over a WorldConfig's properties by name.

    Stateless: every call resolves the descriptor and goes straight to the
    world's live document section. Hidden bookkeeping properties (the schema
    version) are not reachable through the handle.

    Args:
        config: WorldConfig this handle is bound to.
    """

    def __init__(self, config: WorldConfig):
        self._config = config

    def _descriptor(self, name: str) -> PropertyDescriptor[Any]:
        descriptor = get_descriptor(name)
        if descriptor is None or descriptor.hidden:
            raise UnknownPropertyError(name)
        return descriptor

    def _list_descriptor(self, name: str, item: Any) -> PropertyDescriptor[Any]:
        descriptor = self._descriptor(name)
        if not isinstance(descriptor.serializer, StringListSerializer):
            raise InvalidValueError(name, item, "property is not a list")
        return descriptor

    def get_property_names(self) -> list[str]:
        """Names of every property reachable through this handle."""
        return [descriptor.name for descriptor in visible_descriptors()]

    def get_property(self, name: str) -> Result[Any]:
        """Read a property, falling back to its default when absent or invalid.

        Returns:
            Success with the value, or failure with UnknownPropertyError or
            WorldNotFoundError (world deleted).
        """
        try:
            descriptor = self._descriptor(name)
            section = self._config.section
        except WorldsConfigError as e:
            return Result.failure(e)
        return Result.success(descriptor.read(section, self._config.context))

    def get_default_property(self, name: str) -> Result[Any]:
        """Default value a property would have in a new world."""
        try:
            descriptor = self._descriptor(name)
        except WorldsConfigError as e:
            return Result.failure(e)
        return Result.success(descriptor.default_value(self._config.context))

    def set_property(self, name: str, value: Any) -> Result[None]:
        """Validate and write a property.

        Args:
            name: Property name.
            value: New value. Enum properties also accept member names.

        Returns:
            Success, or failure with UnknownPropertyError, InvalidValueError or
            WorldNotFoundError. A failed set leaves the previous value in place.
        """
        try:
            descriptor = self._descriptor(name)
            section = self._config.section
            converted = descriptor.coerce(value)
        except WorldsConfigError as e:
            return Result.failure(e)
        descriptor.write(section, converted)
        return Result.success()

    def set_property_string(self, name: str, text: str) -> Result[None]:
        """Parse text with the property's serializer, then set it.

        ``"true"``, ``"5.5"``, ``"the_end"`` and ``"1,64,-3"`` are all accepted
        for the matching property types.
        """
        try:
            descriptor = self._descriptor(name)
            section = self._config.section
            converted = descriptor.parse_string(text)
        except WorldsConfigError as e:
            return Result.failure(e)
        descriptor.write(section, converted)
        return Result.success()

    def reset_property(self, name: str) -> Result[None]:
        """Write the property's default value."""
        try:
            descriptor = self._descriptor(name)
            section = self._config.section
        except WorldsConfigError as e:
            return Result.failure(e)
        descriptor.write_default(section, self._config.context)
        return Result.success()

    def add_property(self, name: str, item: str) -> Result[None]:
        """Append an item to a list property."""
        try:
            descriptor = self._list_descriptor(name, item)
            current = descriptor.read(self._config.section, self._config.context)
        except WorldsConfigError as e:
            return Result.failure(e)
        return self.set_property(name, [*current, item])

    def remove_property(self, name: str, item: str) -> Result[None]:
        """Remove an item from a list property.

        Fails with InvalidValueError when the item is not in the list.
        """
        try:
            descriptor = self._list_descriptor(name, item)
            current = descriptor.read(self._config.section, self._config.context)
        except WorldsConfigError as e:
            return Result.failure(e)
        if item not in current:
            return Result.failure(InvalidValueError(name, item, "not in list"))
        current.remove(item)
        return self.set_property(name, current)

    def get_suggested_values(self, name: str) -> Result[list[str]]:
        """Suggested text inputs for a property (enum names, booleans)."""
        try:
            descriptor = self._descriptor(name)
        except WorldsConfigError as e:
            return Result.failure(e)
        return Result.success(descriptor.suggestions())
