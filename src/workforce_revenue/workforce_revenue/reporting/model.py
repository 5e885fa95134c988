from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .monthly import MonthlyBucket


@dataclass(frozen=True)
class EmployeeProjectRow:
    """Read-model: one (employee, project) line of the labor track."""

    employee_id: str
    employee_name: Optional[str]
    project_id: str
    client_id: Optional[str]
    hours: float
    billing_rate: float
    salary_rate: float
    revenue: float
    cost: float

    @property
    def profit(self) -> float:
        return self.revenue - self.cost

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "project_id": self.project_id,
            "client_id": self.client_id,
            "hours": self.hours,
            "billing_rate": self.billing_rate,
            "salary_rate": self.salary_rate,
            "revenue": self.revenue,
            "cost": self.cost,
            "profit": self.profit,
        }


@dataclass(frozen=True)
class PlacementRow:
    """Read-model: a hired candidate annotated with the profit it produced."""

    candidate_id: str
    name: Optional[str]
    client_id: Optional[str]
    joining_date: date
    salary_amount: float
    accrual_amount: float
    revenue: float
    profit: float

    def to_dict(self) -> dict:
        return {
            "candidate_id": self.candidate_id,
            "name": self.name,
            "client_id": self.client_id,
            "joining_date": self.joining_date.strftime("%Y-%m-%d"),
            "salary_amount": self.salary_amount,
            "accrual_amount": self.accrual_amount,
            "revenue": self.revenue,
            "profit": self.profit,
        }


@dataclass
class GroupTotals:
    """Running totals for one employee / project / client / service type."""

    key: str
    label: str
    revenue: float = 0.0
    cost: float = 0.0
    hours: float = 0.0
    hires: int = 0
    entries: int = 0
    revenue_usd: float = 0.0
    profit_usd: float = 0.0

    @property
    def profit(self) -> float:
        return self.revenue - self.cost

    def add(self, *, revenue: float, cost: float, hours: float = 0.0, hires: int = 0) -> None:
        self.revenue += revenue
        self.cost += cost
        self.hours += hours
        self.hires += hires
        self.entries += 1

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "revenue": self.revenue,
            "cost": self.cost,
            "profit": self.profit,
            "hours": self.hours,
            "hires": self.hires,
            "entries": self.entries,
            "revenue_usd": self.revenue_usd,
            "profit_usd": self.profit_usd,
        }


@dataclass(frozen=True)
class AttributionReport:
    total_revenue: float
    total_cost: float
    monthly_buckets: list[MonthlyBucket]
    employees: list[EmployeeProjectRow] = field(default_factory=list)
    placements: list[PlacementRow] = field(default_factory=list)
    by_employee: dict[str, GroupTotals] = field(default_factory=dict)
    by_project: dict[str, GroupTotals] = field(default_factory=dict)
    by_client: dict[str, GroupTotals] = field(default_factory=dict)
    by_service_type: dict[str, GroupTotals] = field(default_factory=dict)
    total_revenue_usd: float = 0.0
    total_profit_usd: float = 0.0
    warnings: list[str] = field(default_factory=list)

    @property
    def total_profit(self) -> float:
        return self.total_revenue - self.total_cost

    def to_dict(self) -> dict:
        def _groups(groups: dict[str, GroupTotals]) -> list[dict]:
            return [g.to_dict() for g in groups.values()]

        return {
            "total_revenue": self.total_revenue,
            "total_cost": self.total_cost,
            "total_profit": self.total_profit,
            "total_revenue_usd": self.total_revenue_usd,
            "total_profit_usd": self.total_profit_usd,
            "monthly_buckets": [b.to_dict() for b in self.monthly_buckets],
            "employees": [r.to_dict() for r in self.employees],
            "placements": [p.to_dict() for p in self.placements],
            "by_employee": _groups(self.by_employee),
            "by_project": _groups(self.by_project),
            "by_client": _groups(self.by_client),
            "by_service_type": _groups(self.by_service_type),
            "warnings": list(self.warnings),
        }
