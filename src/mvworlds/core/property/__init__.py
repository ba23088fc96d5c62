"""Property functionality: descriptor table, world enums and serializers."""

from mvworlds.core.property.models import (
    VAULT_ECONOMY_CURRENCY,
    Difficulty,
    Environment,
    GameMode,
    PortalType,
    PropertyContext,
    PropertyDescriptor,
    SpawnLocation,
)
from mvworlds.core.property.nodes import (
    CURRENT_VERSION,
    DESCRIPTORS,
    get_descriptor,
    visible_descriptors,
)
from mvworlds.core.property.serializers import EnumSerializer, Serializer

__all__ = [
    # Models
    "PropertyDescriptor",
    "PropertyContext",
    "SpawnLocation",
    "Environment",
    "Difficulty",
    "GameMode",
    "PortalType",
    "VAULT_ECONOMY_CURRENCY",
    # Table
    "DESCRIPTORS",
    "CURRENT_VERSION",
    "get_descriptor",
    "visible_descriptors",
    # Serializers
    "Serializer",
    "EnumSerializer",
]
