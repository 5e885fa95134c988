from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import BASE_CURRENCY, DEFAULT_DAILY_HOURS
from ..core.enums import ServiceType, WorkingDaysConfig


@dataclass(frozen=True)
class EmployeeAssignment:
    """Billing and salary terms of one employee on one project.

    Terms are used as-is for every recomputation (no historical versioning).
    """

    employee_id: str
    project_id: str
    client_id: Optional[str]
    client_billing: float
    billing_type: Optional[str]
    salary: float
    salary_type: Optional[str]
    salary_currency: Optional[str] = BASE_CURRENCY
    client_currency: Optional[str] = BASE_CURRENCY
    working_hours: Optional[float] = DEFAULT_DAILY_HOURS
    working_days_config: Optional[str] = WorkingDaysConfig.ALL_DAYS.value
    employee_name: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.employee_id, self.project_id)


@dataclass(frozen=True)
class Client:
    """Recruiting/staffing client: currency and placement commission terms."""

    id: str
    currency: Optional[str] = BASE_CURRENCY
    commission_type: Optional[str] = None
    commission_value: Optional[float] = None
    name: Optional[str] = None
    service_types: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @property
    def service_type(self) -> Optional[ServiceType]:
        """permanent / contractual / both, from the client's service mix."""
        kinds = {str(s).strip().lower() for s in self.service_types}
        permanent = ServiceType.PERMANENT.value in kinds
        contractual = ServiceType.CONTRACTUAL.value in kinds
        if permanent and contractual:
            return ServiceType.BOTH
        if permanent:
            return ServiceType.PERMANENT
        if contractual:
            return ServiceType.CONTRACTUAL
        return None
