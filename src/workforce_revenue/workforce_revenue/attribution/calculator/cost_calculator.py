from __future__ import annotations

from typing import Iterable, Optional

from ...assignments.model import EmployeeAssignment
from ...common.diagnostics import Diagnostics
from ...timelogs.model import TimeLogEntry
from .base import AttributionCalculator, MonetaryTerms


def salary_terms(assignment: EmployeeAssignment) -> MonetaryTerms:
    return MonetaryTerms(
        amount=float(assignment.salary or 0),
        currency=assignment.salary_currency,
        periodicity=assignment.salary_type,
        working_days_config=assignment.working_days_config,
        daily_hours=assignment.working_hours,
        label=f"Salary of {assignment.employee_id} on {assignment.project_id}",
    )


class CostCalculator(AttributionCalculator):
    """Labor cost: the same hours priced at the employee's salary rate."""

    def terms(self, assignment: EmployeeAssignment) -> MonetaryTerms:
        return salary_terms(assignment)

    def cost(
        self,
        assignment: EmployeeAssignment,
        project_id: str,
        time_logs: Iterable[TimeLogEntry],
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        return self.attribute(assignment, project_id, time_logs, diagnostics=diagnostics)
