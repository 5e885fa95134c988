"""JSON request body -> domain rows.

Accepts the snake_case field names of the stored rows and the aliases used by
the time-tracking export (``assign_employee``, ``project_time_data.projects``,
``projectId`` ...). Structural problems raise ``ValidationError``; business
oddities (unknown periodicity, unparseable CTC) are left to the calculators.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..assignments.model import Client, EmployeeAssignment
from ..common.datetime_utils import parse_iso_date
from ..core.constants import DEFAULT_DAILY_HOURS
from ..core.enums import WorkingDaysConfig
from ..core.exceptions import ValidationError
from ..placements.model import Candidate
from ..timelogs.model import ProjectHours, TimeLogEntry

_MISSING = object()


def _pick(row: dict, *names: str, default: Any = None) -> Any:
    for name in names:
        value = row.get(name, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def _required_id(row: dict, what: str, *names: str) -> str:
    value = _pick(row, *names)
    if value is None or str(value).strip() == "":
        raise ValidationError(f"{what}: missing {names[0]}")
    return str(value).strip()


def _optional_id(row: dict, *names: str) -> Optional[str]:
    value = _pick(row, *names)
    return str(value).strip() if value not in (None, "") else None


def _number(value: Any, what: str, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{what}: expected a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{what}: expected a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ValidationError(f"{what}: expected a finite number, got {value!r}")
    return number


_TRUE = {"true", "1", "yes", "y"}
_FALSE = {"false", "0", "no", "n", ""}


def _flag(value: Any, what: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ValidationError(f"{what}: expected a boolean, got {value!r}")


def _list(data: dict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be a list")
    for item in value:
        if not isinstance(item, dict):
            raise ValidationError(f"{key} items must be objects")
    return value


def parse_time_log(row: dict) -> TimeLogEntry:
    employee_id = _required_id(row, "time log", "employee_id", "employeeId")
    raw_date = _pick(row, "date")
    if raw_date is None:
        raise ValidationError(f"time log of {employee_id}: missing date")

    lines = _pick(row, "projects")
    if lines is None:
        lines = (_pick(row, "project_time_data", default={}) or {}).get("projects") or []
    if not isinstance(lines, list):
        raise ValidationError(f"time log of {employee_id}: projects must be a list")

    projects = []
    for line in lines:
        if not isinstance(line, dict):
            raise ValidationError(f"time log of {employee_id}: project lines must be objects")
        projects.append(
            ProjectHours(
                project_id=_required_id(line, "project line", "project_id", "projectId"),
                hours=_number(_pick(line, "hours"), "project line hours"),
                client_id=_optional_id(line, "client_id", "clientId"),
            )
        )

    return TimeLogEntry(
        employee_id=employee_id,
        date=parse_iso_date(raw_date),
        projects=tuple(projects),
        is_approved=_flag(_pick(row, "is_approved", "isApproved"), f"time log of {employee_id} is_approved", True),
        log_id=_optional_id(row, "id", "log_id"),
    )


def parse_assignment(row: dict) -> EmployeeAssignment:
    employee_id = _required_id(row, "assignment", "employee_id", "assign_employee", "employeeId")
    what = f"assignment {employee_id}"
    return EmployeeAssignment(
        employee_id=employee_id,
        project_id=_required_id(row, what, "project_id", "projectId"),
        client_id=_optional_id(row, "client_id", "clientId"),
        client_billing=_number(_pick(row, "client_billing", "clientBilling"), f"{what} client_billing"),
        billing_type=_pick(row, "billing_type", "billingType"),
        salary=_number(_pick(row, "salary"), f"{what} salary"),
        salary_type=_pick(row, "salary_type", "salaryType"),
        salary_currency=_pick(row, "salary_currency", "salaryCurrency"),
        client_currency=_pick(row, "client_currency", "clientCurrency"),
        working_hours=_number(_pick(row, "working_hours", "workingHours"), f"{what} working_hours", DEFAULT_DAILY_HOURS),
        working_days_config=_pick(
            row, "working_days_config", "workingDaysConfig", default=WorkingDaysConfig.ALL_DAYS.value
        ),
        employee_name=_pick(row, "employee_name", "employeeName"),
    )


def parse_client(row: dict) -> Client:
    client_id = _required_id(row, "client", "id", "client_id")
    service_types = _pick(row, "service_types", "service_type", default=())
    if isinstance(service_types, str):
        service_types = (service_types,)
    commission_value = _pick(row, "commission_value", "commissionValue")
    return Client(
        id=client_id,
        currency=_pick(row, "currency"),
        commission_type=_pick(row, "commission_type", "commissionType"),
        commission_value=None if commission_value is None else _number(commission_value, f"client {client_id} commission_value"),
        name=_pick(row, "name", "client_name", "display_name"),
        service_types=tuple(str(s) for s in service_types),
    )


def parse_candidate(row: dict) -> Candidate:
    candidate_id = _required_id(row, "candidate", "id", "candidate_id")
    raw_joining = _pick(row, "joining_date", "joiningDate")
    if raw_joining is None:
        raise ValidationError(f"candidate {candidate_id}: missing joining_date")
    expected = _pick(row, "expected_salary", "expectedSalary")
    return Candidate(
        candidate_id=candidate_id,
        ctc=_pick(row, "ctc"),
        accrual_ctc=_pick(row, "accrual_ctc", "accrualCtc"),
        job_type_category=_pick(row, "job_type_category", "jobTypeCategory"),
        joining_date=parse_iso_date(raw_joining),
        client_id=_optional_id(row, "client_id", "clientId"),
        name=_pick(row, "name"),
        expected_salary=None if expected is None else _number(expected, f"candidate {candidate_id} expected_salary"),
    )


@dataclass(frozen=True)
class PayloadRowsSource:
    """In-memory rows from one request body; filters by the requested window."""

    time_logs: list[TimeLogEntry] = field(default_factory=list)
    assignments: list[EmployeeAssignment] = field(default_factory=list)
    clients: list[Client] = field(default_factory=list)
    candidates: list[Candidate] = field(default_factory=list)

    @staticmethod
    def _in_window(d: date, start: Optional[date], end: Optional[date]) -> bool:
        return (start is None or d >= start) and (end is None or d <= end)

    def get_time_logs(self, *, start_date: Optional[date], end_date: Optional[date]) -> list[TimeLogEntry]:
        return [t for t in self.time_logs if self._in_window(t.date, start_date, end_date)]

    def get_assignments(self) -> list[EmployeeAssignment]:
        return list(self.assignments)

    def get_clients(self) -> list[Client]:
        return list(self.clients)

    def get_candidates(self, *, start_date: Optional[date], end_date: Optional[date]) -> list[Candidate]:
        return [c for c in self.candidates if self._in_window(c.joining_date, start_date, end_date)]


@dataclass(frozen=True)
class ReportRequest:
    source: PayloadRowsSource
    start: Optional[date] = None
    end: Optional[date] = None
    fill_empty_months: bool = False


def parse_report_request(data: Any) -> ReportRequest:
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    start = parse_iso_date(data["start_date"]) if data.get("start_date") else None
    end = parse_iso_date(data["end_date"]) if data.get("end_date") else None

    source = PayloadRowsSource(
        time_logs=[parse_time_log(r) for r in _list(data, "time_logs")],
        assignments=[parse_assignment(r) for r in _list(data, "assignments")],
        clients=[parse_client(r) for r in _list(data, "clients")],
        candidates=[parse_candidate(r) for r in _list(data, "candidates")],
    )
    return ReportRequest(
        source=source,
        start=start,
        end=end,
        fill_empty_months=_flag(data.get("fill_empty_months"), "fill_empty_months", False),
    )
