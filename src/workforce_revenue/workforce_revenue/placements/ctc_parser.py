"""Free-form CTC strings ("$5000 Hourly", "₹6,00,000 LPA") -> ``Money``.

Malformed input never raises: the amount resolves to 0 and a diagnostic is
recorded so the caller can surface it as missing data.
"""
from __future__ import annotations

import math
import re
from typing import Optional

from ..common.diagnostics import Diagnostics, warn
from ..core.constants import USD_CURRENCY
from ..core.enums import Periodicity
from ..core.settings import EngineSettings
from ..rates.currency import CurrencyNormalizer
from .model import CompensationValue, Money

_SIGILS = re.compile("[$\u20b9]")
_SEPARATORS = re.compile(r"[,_']")


def parse_ctc(
    value: CompensationValue,
    *,
    settings: Optional[EngineSettings] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> Money:
    settings = settings or EngineSettings()
    base = settings.base_currency

    if isinstance(value, Money):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        return Money(0.0, base, Periodicity.LPA)
    if isinstance(value, bool):
        warn(diagnostics, f"Unparseable CTC {value!r}; treated as 0")
        return Money(0.0, base, Periodicity.LPA)
    if isinstance(value, (int, float)):
        return Money(float(value), base, Periodicity.LPA)

    text = str(value).strip()
    currency = USD_CURRENCY if text.startswith("$") else base
    text = _SEPARATORS.sub("", _SIGILS.sub("", text)).strip()

    parts = text.split()
    try:
        if not parts:
            raise ValueError(text)
        amount = float(parts[0])
        if not math.isfinite(amount):
            raise ValueError(parts[0])
    except ValueError:
        warn(diagnostics, f"Unparseable CTC {value!r}; treated as 0")
        return Money(0.0, currency, Periodicity.LPA)

    periodicity = Periodicity.LPA
    if len(parts) > 1:
        parsed = Periodicity.parse(parts[1])
        if parsed is None:
            warn(diagnostics, f"Unknown CTC periodicity {parts[1]!r} in {value!r}; treated as annual")
        else:
            periodicity = parsed

    return Money(amount, currency, periodicity)


def annualize(
    money: Money,
    *,
    settings: Optional[EngineSettings] = None,
    normalizer: Optional[CurrencyNormalizer] = None,
) -> float:
    """Base-currency annual amount: USD normalised first, then periodicity applied."""
    settings = settings or EngineSettings()
    normalizer = normalizer or CurrencyNormalizer(settings)

    amount = normalizer.to_base_currency(money.amount, money.currency)
    if money.periodicity == Periodicity.MONTHLY:
        return amount * 12
    if money.periodicity == Periodicity.HOURLY:
        return amount * settings.candidate_annual_hours
    return amount
