"""Error taxonomy for worlds configuration operations.

Every error is carried inside a ``Result`` by the operation that detects it.
``Result.unwrap()`` raises it for callers that prefer exceptions.
"""

from __future__ import annotations


class WorldsConfigError(Exception):
    """Base class for all worlds configuration errors."""

    pass


class ParseError(WorldsConfigError):
    """Raised when the stored document is not well-formed YAML."""

    pass


class MigrationError(WorldsConfigError):
    """Raised when a document matches neither the legacy nor the current layout."""

    pass


class UnknownPropertyError(WorldsConfigError):
    """Raised when a property name is not in the descriptor table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown world property: '{name}'")
        self.name = name


class InvalidValueError(WorldsConfigError):
    """Raised when a value fails a property's type check or validator."""

    def __init__(self, name: str, value: object, reason: str = ""):
        message = f"Invalid value for property '{name}': {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.name = name
        self.value = value


class WorldNotFoundError(WorldsConfigError):
    """Raised when operating on a world that has no config section."""

    def __init__(self, world_name: str):
        super().__init__(f"World '{world_name}' does not exist in the worlds config")
        self.world_name = world_name


class WorldExistsError(WorldsConfigError):
    """Raised when adding a world whose name is already taken."""

    def __init__(self, world_name: str):
        super().__init__(f"World '{world_name}' already exists in the worlds config")
        self.world_name = world_name


class StorageError(WorldsConfigError):
    """Raised when reading or writing the backing store fails."""

    pass
