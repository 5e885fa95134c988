from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ..assignments.model import EmployeeAssignment
from ..common.diagnostics import Diagnostics
from ..timelogs.hours import HoursAggregator
from ..timelogs.model import TimeLogEntry
from .calculator.cost_calculator import CostCalculator
from .calculator.revenue_calculator import RevenueCalculator


@dataclass(frozen=True)
class LaborAttribution:
    employee_id: str
    project_id: str
    hours: float
    revenue: float
    cost: float

    @property
    def profit(self) -> float:
        return self.revenue - self.cost


class ProfitCalculator:
    """Labor track: revenue minus cost for one employee on one project.

    The placement track lives in ``placements.commission.CommissionEngine``.
    """

    def __init__(
        self,
        revenue: Optional[RevenueCalculator] = None,
        cost: Optional[CostCalculator] = None,
        hours: Optional[HoursAggregator] = None,
    ):
        self._revenue = revenue or RevenueCalculator()
        self._cost = cost or CostCalculator()
        self._hours = hours or HoursAggregator()

    def for_hours(
        self,
        assignment: EmployeeAssignment,
        hours: float,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> LaborAttribution:
        return LaborAttribution(
            employee_id=assignment.employee_id,
            project_id=assignment.project_id,
            hours=float(hours or 0),
            revenue=self._revenue.for_hours(assignment, hours, diagnostics=diagnostics),
            cost=self._cost.for_hours(assignment, hours, diagnostics=diagnostics),
        )

    def attribute(
        self,
        assignment: EmployeeAssignment,
        project_id: str,
        time_logs: Iterable[TimeLogEntry],
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> LaborAttribution:
        hours = self._hours.hours_for(assignment.employee_id, project_id, time_logs)
        return replace(self.for_hours(assignment, hours, diagnostics=diagnostics), project_id=project_id)

    def labor_profit(
        self,
        assignment: EmployeeAssignment,
        project_id: str,
        time_logs: Iterable[TimeLogEntry],
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        return self.attribute(assignment, project_id, time_logs, diagnostics=diagnostics).profit
