"""Configuration module using Pydantic Settings.

Provides typed configuration for locating the worlds document.

Usage:
    from mvworlds.config import WorldsSettings

    settings = WorldsSettings(data_folder="plugins/Multiverse-Core")
"""

from mvworlds.config.settings import WorldsSettings

__all__ = [
    "WorldsSettings",
]
