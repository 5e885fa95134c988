from __future__ import annotations

from typing import Iterable, Optional

from ...assignments.model import EmployeeAssignment
from ...common.diagnostics import Diagnostics
from ...timelogs.model import TimeLogEntry
from .base import AttributionCalculator, MonetaryTerms


def billing_terms(assignment: EmployeeAssignment) -> MonetaryTerms:
    return MonetaryTerms(
        amount=float(assignment.client_billing or 0),
        currency=assignment.client_currency,
        periodicity=assignment.billing_type,
        working_days_config=assignment.working_days_config,
        daily_hours=assignment.working_hours,
        label=f"Client billing of {assignment.employee_id} on {assignment.project_id}",
    )


class RevenueCalculator(AttributionCalculator):
    """Revenue: logged hours priced at the client billing rate."""

    def terms(self, assignment: EmployeeAssignment) -> MonetaryTerms:
        return billing_terms(assignment)

    def revenue(
        self,
        assignment: EmployeeAssignment,
        project_id: str,
        time_logs: Iterable[TimeLogEntry],
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        return self.attribute(assignment, project_id, time_logs, diagnostics=diagnostics)
