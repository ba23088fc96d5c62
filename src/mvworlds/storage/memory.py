"""In-memory storage.

Simple byte holder suitable for tests and for embedding the manager where the
document lives somewhere other than a file.

Usage:
    storage = MemoryStorage(b"world:\\n  alias: Overworld\\n")
    manager = WorldsConfigManager(storage)
"""

from __future__ import annotations


class MemoryStorage:
    """Keeps the document bytes in process memory.

    Args:
        data: Initial contents; None means nothing stored yet.
    """

    def __init__(self, data: bytes | str | None = None):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = data
        self.writes = 0
        """Number of successful writes, for callers checking save behaviour."""

    @property
    def data(self) -> bytes | None:
        """Current stored bytes."""
        return self._data

    def read(self) -> bytes | None:
        return self._data

    def write(self, data: bytes) -> None:
        self._data = bytes(data)
        self.writes += 1
