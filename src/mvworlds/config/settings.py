"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for locating
the worlds document.

Usage:
    from mvworlds.config import WorldsSettings

    # Load from environment variables (MVWORLDS_*)
    settings = WorldsSettings()

    # Or override with explicit values
    settings = WorldsSettings(data_folder="plugins/Multiverse-Core")
    settings.worlds_path  # plugins/Multiverse-Core/worlds.yml
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldsSettings(BaseSettings):  # type: ignore[misc]
    """Location and encoding of the worlds document.

    Attributes:
        data_folder: Directory holding the document.
        worlds_filename: File name of the document inside ``data_folder``.
        encoding: Text encoding used to read and write the document.

    Environment Variables:
        MVWORLDS_DATA_FOLDER
        MVWORLDS_WORLDS_FILENAME
        MVWORLDS_ENCODING
    """

    model_config = SettingsConfigDict(
        env_prefix="MVWORLDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_folder: Path = Path(".")
    worlds_filename: str = "worlds.yml"
    encoding: str = "utf-8"

    @field_validator("worlds_filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if not value.strip() or Path(value).name != value:
            raise ValueError(f"worlds_filename must be a bare file name, got {value!r}")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
        return value

    @property
    def worlds_path(self) -> Path:
        """Full path of the worlds document."""
        return self.data_folder / self.worlds_filename
