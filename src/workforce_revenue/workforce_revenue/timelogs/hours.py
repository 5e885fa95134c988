from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import month_start
from ..common.diagnostics import Diagnostics, warn
from .model import TimeLogEntry


def eligible_logs(time_logs: Iterable[TimeLogEntry], diagnostics: Optional[Diagnostics] = None):
    """Approved entries only; unapproved ones never contribute hours."""
    for log in time_logs:
        if not log.is_approved:
            warn(diagnostics, f"Time log {log.label} is not approved; skipped")
            continue
        yield log


class HoursAggregator:
    """Linear scan: sum of hours an employee logged against one project."""

    def hours_for(self, employee_id: str, project_id: str, time_logs: Iterable[TimeLogEntry]) -> float:
        total = 0.0
        for log in eligible_logs(time_logs):
            if log.employee_id != employee_id:
                continue
            total += log.hours_for_project(project_id)
        return total


@dataclass
class HoursIndex:
    """Pre-indexed hours keyed by (employee, project) and by (employee, project, month).

    Build once per report instead of re-scanning every log for each assignment.
    """

    totals: dict[tuple[str, str], float] = field(default_factory=lambda: defaultdict(float))
    monthly: dict[tuple[str, str], dict[date, float]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(float))
    )

    @classmethod
    def build(cls, time_logs: Iterable[TimeLogEntry], diagnostics: Optional[Diagnostics] = None) -> "HoursIndex":
        index = cls()
        for log in eligible_logs(time_logs, diagnostics):
            month = month_start(log.date)
            for line in log.projects:
                hours = float(line.hours or 0)
                if hours < 0:
                    warn(diagnostics, f"Negative hours on log {log.label} for project {line.project_id}; treated as 0")
                    continue
                key = (log.employee_id, line.project_id)
                index.totals[key] += hours
                index.monthly[key][month] += hours
        return index

    def hours_for(self, employee_id: str, project_id: str) -> float:
        return self.totals.get((employee_id, project_id), 0.0)

    def monthly_hours_for(self, employee_id: str, project_id: str) -> dict[date, float]:
        return dict(self.monthly.get((employee_id, project_id), {}))

    def keys(self):
        return self.totals.keys()
