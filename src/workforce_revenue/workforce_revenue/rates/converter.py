from __future__ import annotations

import logging
from typing import Optional

from ..common.diagnostics import Diagnostics, warn
from ..core.constants import MONTHS_PER_YEAR
from ..core.enums import Periodicity, WorkingDaysConfig
from ..core.settings import EngineSettings

logger = logging.getLogger(__name__)

# Periods per year for the annualising periodicities; Hourly is passed through.
PERIODS_PER_YEAR = {
    Periodicity.MONTHLY: MONTHS_PER_YEAR,
    Periodicity.LPA: 1,
}


class RateConverter:
    """Periodic amount (already in base currency) -> hourly rate.

    ``rate = amount * periods_per_year / (working_days_per_year * daily_hours)``
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self._settings = settings or EngineSettings()

    def working_days_per_year(self, working_days_config) -> int:
        config = WorkingDaysConfig.parse(working_days_config) or WorkingDaysConfig.ALL_DAYS
        return int(self._settings.working_days_table[config.value])

    def daily_hours(self, daily_hours) -> float:
        try:
            hours = float(daily_hours or 0)
        except (TypeError, ValueError):
            hours = 0.0
        return hours if hours > 0 else float(self._settings.default_daily_hours)

    def hourly_rate(
        self,
        amount: float,
        billing_type,
        working_days_config=None,
        daily_hours=None,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        periodicity = Periodicity.parse(billing_type)
        if periodicity is None:
            warn(diagnostics, f"Unknown periodicity {billing_type!r}; hourly rate resolved to 0")
            return 0.0

        amount = float(amount or 0)
        if periodicity == Periodicity.HOURLY:
            return amount

        days = self.working_days_per_year(working_days_config)
        hours = self.daily_hours(daily_hours)
        rate = amount * PERIODS_PER_YEAR[periodicity] / (days * hours)
        logger.debug("hourly_rate: %s %s over %s days x %s h = %s", amount, periodicity.value, days, hours, rate)
        return rate
