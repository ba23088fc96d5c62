"""Storage protocol for swappable backends.

The storage layer holds the raw bytes of the worlds document:
- File on disk with atomic replace (default)
- In memory (tests, embedding)

Usage:
    storage = FileStorage(Path("plugins/Multiverse-Core/worlds.yml"))
    manager = WorldsConfigManager(storage)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Abstract byte store for one document. Implementations handle actual I/O."""

    def read(self) -> bytes | None:
        """Return the stored bytes, or None if nothing has been stored yet.

        Raises:
            StorageError: If the store exists but cannot be read.
        """
        ...

    def write(self, data: bytes) -> None:
        """Replace the stored bytes. Must never leave a partial document behind.

        Raises:
            StorageError: If the write fails.
        """
        ...
