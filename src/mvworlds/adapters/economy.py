"""Built-in economist implementations."""

from __future__ import annotations

from mvworlds.core.property import VAULT_ECONOMY_CURRENCY


class VaultEconomist:
    """Charges entry fees through the economy plugin. Used when none is supplied."""

    def default_currency(self) -> str:
        return VAULT_ECONOMY_CURRENCY


class ItemEconomist:
    """Charges entry fees in a fixed item.

    Args:
        currency: Item name, e.g. ``DIRT``.
    """

    def __init__(self, currency: str):
        if not currency.strip():
            raise ValueError("currency must be a non-empty item name")
        self._currency = currency.strip()

    def default_currency(self) -> str:
        return self._currency
