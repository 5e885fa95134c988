from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from ..assignments.model import Client, EmployeeAssignment
from ..attribution.calculator.cost_calculator import CostCalculator
from ..attribution.calculator.revenue_calculator import RevenueCalculator
from ..attribution.profit import ProfitCalculator
from ..common.diagnostics import Diagnostics
from ..core.constants import USD_CURRENCY
from ..core.enums import Track
from ..core.settings import EngineSettings
from ..placements.commission import CommissionEngine
from ..placements.model import Candidate
from ..rates.converter import RateConverter
from ..rates.currency import CurrencyNormalizer
from ..timelogs.hours import HoursIndex
from ..timelogs.model import TimeLogEntry
from .model import AttributionReport, EmployeeProjectRow, GroupTotals, PlacementRow
from .monthly import MonthlyAggregator, MonthlyContribution

logger = logging.getLogger(__name__)

UNASSIGNED_CLIENT = "unassigned"


def _group(groups: dict[str, GroupTotals], key: str, label: Optional[str] = None) -> GroupTotals:
    g = groups.get(key)
    if g is None:
        g = GroupTotals(key=key, label=label or key)
        groups[key] = g
    return g


class AttributionEngine:
    """Both tracks over already-fetched rows -> one ``AttributionReport``.

    Stateless: every call builds its own index and diagnostics, so one engine
    can serve concurrent report requests.
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings or EngineSettings()
        self.normalizer = CurrencyNormalizer(self.settings)
        converter = RateConverter(self.settings)
        self.revenue = RevenueCalculator(converter, self.normalizer)
        self.cost = CostCalculator(converter, self.normalizer)
        self.profit = ProfitCalculator(self.revenue, self.cost)
        self.commission = CommissionEngine(self.settings, normalizer=self.normalizer)
        self.monthly = MonthlyAggregator()

    def compute(
        self,
        *,
        time_logs: Iterable[TimeLogEntry],
        assignments: Iterable[EmployeeAssignment],
        clients: Iterable[Client],
        candidates: Iterable[Candidate] = (),
        start: Optional[date] = None,
        end: Optional[date] = None,
        fill_empty_months: bool = False,
    ) -> AttributionReport:
        diagnostics = Diagnostics(logger)
        clients_by_id = {c.id: c for c in clients}
        index = HoursIndex.build(time_logs, diagnostics)

        contributions: list[MonthlyContribution] = []
        by_employee: dict[str, GroupTotals] = {}
        by_project: dict[str, GroupTotals] = {}
        by_client: dict[str, GroupTotals] = {}
        by_service_type: dict[str, GroupTotals] = {}

        employee_rows = []
        for assignment in self._unique_assignments(assignments, diagnostics):
            client = clients_by_id.get(assignment.client_id) if assignment.client_id else None
            if assignment.client_id and client is None:
                diagnostics.warn(f"Client {assignment.client_id} of assignment {assignment.employee_id}/{assignment.project_id} not found")
            if client and not assignment.client_currency:
                assignment = replace(assignment, client_currency=client.currency)

            row = self._labor_row(assignment, index, contributions, diagnostics)
            employee_rows.append(row)

            _group(by_employee, row.employee_id, row.employee_name).add(revenue=row.revenue, cost=row.cost, hours=row.hours)
            _group(by_project, row.project_id).add(revenue=row.revenue, cost=row.cost, hours=row.hours)
            client_key = assignment.client_id or UNASSIGNED_CLIENT
            _group(by_client, client_key, client.display_name if client else None).add(
                revenue=row.revenue, cost=row.cost, hours=row.hours
            )
            if client and client.service_type:
                _group(by_service_type, client.service_type.value).add(revenue=row.revenue, cost=row.cost, hours=row.hours)

        known = {(r.employee_id, r.project_id) for r in employee_rows}
        for employee_id, project_id in index.keys():
            if (employee_id, project_id) not in known:
                hours = index.hours_for(employee_id, project_id)
                diagnostics.warn(f"{hours:g} h logged by {employee_id} on {project_id} have no assignment; excluded")

        placement_rows = []
        for candidate in candidates:
            client = clients_by_id.get(candidate.client_id) if candidate.client_id else None
            if client is None:
                diagnostics.warn(f"Candidate {candidate.candidate_id} skipped: client {candidate.client_id!r} not found")
                continue

            result = self.commission.attribute(candidate, client, diagnostics=diagnostics)
            placement_rows.append(
                PlacementRow(
                    candidate_id=candidate.candidate_id,
                    name=candidate.name,
                    client_id=candidate.client_id,
                    joining_date=candidate.joining_date,
                    salary_amount=result.salary_amount,
                    accrual_amount=result.accrual_amount,
                    revenue=result.revenue,
                    profit=result.profit,
                )
            )
            contributions.append(
                MonthlyContribution(
                    when=candidate.joining_date,
                    revenue=result.revenue,
                    profit=result.profit,
                    hires=1,
                    track=Track.PLACEMENT,
                )
            )

            cost = result.revenue - result.profit
            _group(by_client, client.id, client.display_name).add(revenue=result.revenue, cost=cost, hires=1)
            if client.service_type:
                _group(by_service_type, client.service_type.value).add(revenue=result.revenue, cost=cost, hires=1)

        buckets = self.monthly.aggregate(contributions)
        if fill_empty_months:
            monthly = self.monthly.fill_range(buckets, start, end)
        else:
            monthly = self.monthly.sorted_buckets(buckets)

        for groups in (by_employee, by_project, by_client, by_service_type):
            self._add_usd_figures(groups)

        total_revenue = math.fsum(c.revenue for c in contributions)
        total_profit = math.fsum(c.profit for c in contributions)
        total_cost = total_revenue - total_profit

        logger.info(
            "attribution: %d assignments, %d placements, revenue=%.2f profit=%.2f, %d warnings",
            len(employee_rows),
            len(placement_rows),
            total_revenue,
            total_profit,
            len(diagnostics),
        )

        return AttributionReport(
            total_revenue=total_revenue,
            total_cost=total_cost,
            monthly_buckets=monthly,
            employees=employee_rows,
            placements=placement_rows,
            by_employee=by_employee,
            by_project=by_project,
            by_client=by_client,
            by_service_type=by_service_type,
            total_revenue_usd=self.normalizer.from_base_currency(total_revenue, USD_CURRENCY),
            total_profit_usd=self.normalizer.from_base_currency(total_profit, USD_CURRENCY),
            warnings=diagnostics.warnings,
        )

    def _unique_assignments(self, assignments: Iterable[EmployeeAssignment], diagnostics: Diagnostics):
        unique: dict[tuple[str, str], EmployeeAssignment] = {}
        for a in assignments:
            if a.key in unique:
                diagnostics.warn(f"Duplicate assignment for {a.employee_id}/{a.project_id}; last one wins")
            unique[a.key] = a
        return list(unique.values())

    def _labor_row(
        self,
        assignment: EmployeeAssignment,
        index: HoursIndex,
        contributions: list[MonthlyContribution],
        diagnostics: Diagnostics,
    ) -> EmployeeProjectRow:
        revenue_parts = []
        cost_parts = []
        for month, hours in sorted(index.monthly_hours_for(assignment.employee_id, assignment.project_id).items()):
            labor = self.profit.for_hours(assignment, hours, diagnostics=diagnostics)
            revenue_parts.append(labor.revenue)
            cost_parts.append(labor.cost)
            contributions.append(MonthlyContribution(when=month, revenue=labor.revenue, profit=labor.profit))

        return EmployeeProjectRow(
            employee_id=assignment.employee_id,
            employee_name=assignment.employee_name,
            project_id=assignment.project_id,
            client_id=assignment.client_id,
            hours=index.hours_for(assignment.employee_id, assignment.project_id),
            billing_rate=self.revenue.hourly_rate(assignment),
            salary_rate=self.cost.hourly_rate(assignment),
            revenue=math.fsum(revenue_parts),
            cost=math.fsum(cost_parts),
        )

    def _add_usd_figures(self, groups: dict[str, GroupTotals]) -> None:
        for g in groups.values():
            g.revenue_usd = self.normalizer.from_base_currency(g.revenue, USD_CURRENCY)
            g.profit_usd = self.normalizer.from_base_currency(g.profit, USD_CURRENCY)
