from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ProjectHours:
    """One project line of a daily time log."""

    project_id: str
    hours: float
    client_id: Optional[str] = None


@dataclass(frozen=True)
class TimeLogEntry:
    """Read-only time log produced by the time-tracking subsystem."""

    employee_id: str
    date: date
    projects: tuple[ProjectHours, ...] = ()
    is_approved: bool = True
    log_id: Optional[str] = None

    def hours_for_project(self, project_id: str) -> float:
        return sum(max(float(p.hours or 0), 0.0) for p in self.projects if p.project_id == project_id)

    @property
    def label(self) -> str:
        return self.log_id or f"{self.employee_id}@{self.date.isoformat()}"
