from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from ...assignments.model import EmployeeAssignment
from ...common.diagnostics import Diagnostics, warn
from ...core.enums import Periodicity
from ...rates.converter import RateConverter
from ...rates.currency import CurrencyNormalizer
from ...timelogs.hours import HoursAggregator
from ...timelogs.model import TimeLogEntry


@dataclass(frozen=True)
class MonetaryTerms:
    """A periodic amount plus everything needed to turn it into an hourly rate."""

    amount: float
    currency: Optional[str]
    periodicity: Optional[str]
    working_days_config: Optional[str]
    daily_hours: Optional[float]
    label: str = ""


def monetary_attribution(
    hours: float,
    periodic_amount: float,
    currency: Optional[str],
    periodicity: Optional[str],
    working_days_config: Optional[str],
    daily_hours: Optional[float],
    *,
    converter: RateConverter,
    normalizer: CurrencyNormalizer,
    diagnostics: Optional[Diagnostics] = None,
    label: str = "",
) -> float:
    """hours x hourly rate, currency normalised before the periodicity conversion.

    Shared by revenue and cost so the two can never diverge in formula.
    """
    hours = float(hours or 0)
    if hours <= 0:
        return 0.0

    amount = normalizer.to_base_currency(periodic_amount, currency)
    if amount < 0:
        warn(diagnostics, f"{label or 'amount'} is negative ({periodic_amount}); treated as 0")
        return 0.0

    if Periodicity.parse(periodicity) is None:
        warn(diagnostics, f"{label or 'amount'} has unknown periodicity {periodicity!r}; attributed 0")
        return 0.0

    return hours * converter.hourly_rate(amount, periodicity, working_days_config, daily_hours)


class AttributionCalculator(ABC):
    """Calculator interface (Strategy Pattern over an assignment's money terms)."""

    def __init__(
        self,
        converter: Optional[RateConverter] = None,
        normalizer: Optional[CurrencyNormalizer] = None,
        hours: Optional[HoursAggregator] = None,
    ):
        self._converter = converter or RateConverter()
        self._normalizer = normalizer or CurrencyNormalizer()
        self._hours = hours or HoursAggregator()

    @abstractmethod
    def terms(self, assignment: EmployeeAssignment) -> MonetaryTerms:
        raise NotImplementedError

    def hourly_rate(self, assignment: EmployeeAssignment, *, diagnostics: Optional[Diagnostics] = None) -> float:
        t = self.terms(assignment)
        amount = max(self._normalizer.to_base_currency(t.amount, t.currency), 0.0)
        return self._converter.hourly_rate(amount, t.periodicity, t.working_days_config, t.daily_hours, diagnostics=diagnostics)

    def for_hours(
        self,
        assignment: EmployeeAssignment,
        hours: float,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        t = self.terms(assignment)
        return monetary_attribution(
            hours,
            t.amount,
            t.currency,
            t.periodicity,
            t.working_days_config,
            t.daily_hours,
            converter=self._converter,
            normalizer=self._normalizer,
            diagnostics=diagnostics,
            label=t.label,
        )

    def attribute(
        self,
        assignment: EmployeeAssignment,
        project_id: str,
        time_logs: Iterable[TimeLogEntry],
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        hours = self._hours.hours_for(assignment.employee_id, project_id, time_logs)
        return self.for_hours(assignment, hours, diagnostics=diagnostics)
