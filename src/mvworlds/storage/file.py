"""File storage with atomic replace.

Writes go to a temp file in the target directory, take over the permission
bits of the existing file, are fsynced, then renamed
over the target, so a crash mid-write leaves the previous file intact.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from mvworlds.errors import StorageError

logger = logging.getLogger(__name__)


class FileStorage:
    """Worlds document stored in a single file.

    Args:
        path: Location of the document. Parent directories are created on write.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the stored document."""
        return self._path

    def read(self) -> bytes | None:
        """Read the whole file.

        Returns:
            File contents, or None if the file does not exist.

        Raises:
            StorageError: If the file exists but cannot be read.
        """
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No worlds file at %s yet", self._path)
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {self._path}: {e}") from e

    def write(self, data: bytes) -> None:
        """Atomically replace the file contents.

        Raises:
            StorageError: If any step fails. The temp file is removed and the
                previous file is left as it was.
        """
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self._path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageError(f"Failed to prepare write to {self._path}: {e}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            try:
                shutil.copymode(self._path, temp_path)
            except FileNotFoundError:
                pass  # new file: keep the mkstemp mode
            os.replace(temp_path, self._path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except FileNotFoundError:
                pass
            raise StorageError(f"Failed to write {self._path}: {e}") from e

        logger.debug("Wrote %d bytes to %s", len(data), self._path)

    def __repr__(self) -> str:
        return f"FileStorage({str(self._path)!r})"
