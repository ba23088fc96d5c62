"""Storage backends."""

from mvworlds.storage.file import FileStorage
from mvworlds.storage.memory import MemoryStorage
from mvworlds.storage.protocol import Storage

__all__ = [
    "Storage",
    "FileStorage",
    "MemoryStorage",
]
