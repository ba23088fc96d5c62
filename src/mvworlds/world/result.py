"""Operation results.

Usage:
    result = manager.load()
    if result.is_failure:
        report(result.error)

    # Or let the error propagate:
    world = manager.add_world_config("newworld").unwrap()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from mvworlds.errors import WorldsConfigError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a fallible operation: a value or a WorldsConfigError, never both."""

    value: T | None = None
    error: WorldsConfigError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: WorldsConfigError) -> Result[T]:
        """Build a failed result carrying ``error``."""
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error.

        Raises:
            WorldsConfigError: The error of a failed result.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class LoadResult:
    """What a successful load changed relative to the previous in-memory state."""

    new_worlds: list[str] = field(default_factory=list)
    """Worlds present now that were not loaded before."""

    removed_worlds: list[str] = field(default_factory=list)
    """Worlds loaded before that are no longer in the document."""

    migrated: bool = False
    """Whether the stored document was in the legacy layout."""
