"""External collaborator adapters.

Provides protocols and implementations for:
- Economist: source of the default entry-fee currency

Usage:
    from mvworlds.adapters import Economist, ItemEconomist, VaultEconomist
"""

from mvworlds.adapters.economy import ItemEconomist, VaultEconomist
from mvworlds.adapters.protocol import Economist

__all__ = [
    # Protocols
    "Economist",
    # Implementations
    "VaultEconomist",
    "ItemEconomist",
]
