from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .constants import (
    BASE_CURRENCY,
    DEFAULT_CANDIDATE_ANNUAL_HOURS,
    DEFAULT_DAILY_HOURS,
    DEFAULT_USD_TO_BASE_RATE,
    DEFAULT_WORKING_DAYS_PER_YEAR,
)
from .enums import WorkingDaysConfig
from .exceptions import ConfigurationError


def _default_table() -> Mapping[str, int]:
    return MappingProxyType(dict(DEFAULT_WORKING_DAYS_PER_YEAR))


@dataclass(frozen=True)
class EngineSettings:
    """Injectable constants shared by every calculator.

    Defaults reproduce the observed configuration (1 USD = 84 INR, 8 h days,
    365/260/312 working days, 2016 h/year for candidate CTC strings).
    """

    base_currency: str = BASE_CURRENCY
    usd_to_base_rate: float = DEFAULT_USD_TO_BASE_RATE
    default_daily_hours: float = DEFAULT_DAILY_HOURS
    working_days_table: Mapping[str, int] = field(default_factory=_default_table)
    candidate_annual_hours: float = DEFAULT_CANDIDATE_ANNUAL_HOURS

    def __post_init__(self) -> None:
        if self.usd_to_base_rate <= 0:
            raise ConfigurationError("usd_to_base_rate must be positive")
        if self.default_daily_hours <= 0:
            raise ConfigurationError("default_daily_hours must be positive")
        if self.candidate_annual_hours <= 0:
            raise ConfigurationError("candidate_annual_hours must be positive")

        table = {str(k): int(v) for k, v in dict(self.working_days_table).items()}
        missing = [c.value for c in WorkingDaysConfig if c.value not in table]
        if missing:
            raise ConfigurationError(f"working_days_table missing entries: {', '.join(missing)}")
        if any(days <= 0 for days in table.values()):
            raise ConfigurationError("working_days_table values must be positive")
        object.__setattr__(self, "working_days_table", MappingProxyType(table))

    @classmethod
    def from_settings_module(cls, settings) -> "EngineSettings":
        """Build from a ``config.<env>`` module, falling back to defaults per attribute."""
        defaults = cls()
        return cls(
            base_currency=str(getattr(settings, "BASE_CURRENCY", defaults.base_currency)),
            usd_to_base_rate=float(getattr(settings, "USD_TO_BASE_RATE", defaults.usd_to_base_rate)),
            default_daily_hours=float(getattr(settings, "DEFAULT_DAILY_HOURS", defaults.default_daily_hours)),
            working_days_table=dict(getattr(settings, "WORKING_DAYS_PER_YEAR", defaults.working_days_table)),
            candidate_annual_hours=float(
                getattr(settings, "CANDIDATE_ANNUAL_HOURS", defaults.candidate_annual_hours)
            ),
        )
