"""Adapter protocols for external collaborators.

Defines the economy interface consulted for the default entry-fee currency.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Economist(Protocol):
    """Protocol for the server economy subsystem.

    Usage:
        class ItemEconomist:
            def default_currency(self) -> str:
                return "GOLD_INGOT"

        manager = WorldsConfigManager(storage, economist=ItemEconomist())
    """

    def default_currency(self) -> str:
        """Currency symbol given to new worlds and to legacy worlds without one.

        Returns:
            A currency name, or ``VAULT_ECONOMY_CURRENCY`` for the economy plugin.
        """
        ...
