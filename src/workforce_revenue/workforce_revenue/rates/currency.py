from __future__ import annotations

from typing import Optional

from ..core.constants import USD_CURRENCY
from ..core.settings import EngineSettings


def _code(currency_code: Optional[str]) -> str:
    return str(currency_code or "").strip().upper()


def is_usd(currency_code: Optional[str]) -> bool:
    return _code(currency_code) == USD_CURRENCY


class CurrencyNormalizer:
    """Fixed-rate conversion between USD and the organization's base currency.

    The base currency is always left as is. Only USD is treated as foreign;
    any other code (empty, unknown) is passed through unchanged.
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self._settings = settings or EngineSettings()

    @property
    def usd_rate(self) -> float:
        return self._settings.usd_to_base_rate

    def is_base(self, currency_code: Optional[str]) -> bool:
        return _code(currency_code) == _code(self._settings.base_currency)

    def _is_foreign_usd(self, currency_code: Optional[str]) -> bool:
        return is_usd(currency_code) and not self.is_base(currency_code)

    def to_base_currency(self, amount: float, currency_code: Optional[str]) -> float:
        amount = float(amount or 0)
        if self._is_foreign_usd(currency_code):
            return amount * self.usd_rate
        return amount

    def from_base_currency(self, amount: float, currency_code: Optional[str]) -> float:
        """Display conversion: base-currency totals expressed in ``currency_code``."""
        amount = float(amount or 0)
        if self._is_foreign_usd(currency_code):
            return amount / self.usd_rate
        return amount
