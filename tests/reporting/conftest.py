from __future__ import annotations

from datetime import date

import pytest

from src.workforce_revenue.workforce_revenue.assignments.model import Client, EmployeeAssignment
from src.workforce_revenue.workforce_revenue.placements.model import Candidate
from src.workforce_revenue.workforce_revenue.reporting.payload import PayloadRowsSource
from src.workforce_revenue.workforce_revenue.timelogs.model import ProjectHours, TimeLogEntry


@pytest.fixture
def rows_source():
    """Two clients, two assignments, three hires and logs over Dec 2024 - Feb 2025."""
    clients = [
        Client(id="c-inr", currency="INR", commission_type="percentage", commission_value=10, name="Acme", service_types=("permanent",)),
        Client(id="c-usd", currency="USD", commission_type="fixed", commission_value=500, name="Globex", service_types=("permanent", "contractual")),
    ]
    assignments = [
        EmployeeAssignment(
            employee_id="e1",
            project_id="p1",
            client_id="c-inr",
            client_billing=292000,
            billing_type="LPA",
            salary=146000,
            salary_type="LPA",
            salary_currency="INR",
            client_currency=None,
            employee_name="Asha",
        ),
        EmployeeAssignment(
            employee_id="e2",
            project_id="p2",
            client_id="c-usd",
            client_billing=10,
            billing_type="Hourly",
            salary=500,
            salary_type="Hourly",
            salary_currency="INR",
            client_currency=None,
            employee_name="Ravi",
        ),
    ]
    time_logs = [
        TimeLogEntry(employee_id="e1", date=date(2024, 12, 30), projects=(ProjectHours("p1", 8),)),
        TimeLogEntry(employee_id="e1", date=date(2025, 1, 2), projects=(ProjectHours("p1", 6), ProjectHours("p9", 2))),
        TimeLogEntry(employee_id="e2", date=date(2025, 1, 3), projects=(ProjectHours("p2", 4),)),
        TimeLogEntry(employee_id="e2", date=date(2025, 1, 4), projects=(ProjectHours("p2", 4),), is_approved=False),
    ]
    candidates = [
        Candidate("k1", "600000", None, "External", date(2025, 1, 20), "c-inr", name="Meera"),
        Candidate("k2", "$100000", None, "External", date(2025, 2, 1), "c-usd"),
        Candidate("k3", "800000", "1000000", "Internal", date(2025, 2, 11), "c-inr"),
        Candidate("k4", "800000", None, "External", date(2025, 2, 12), "c-missing"),
    ]
    return PayloadRowsSource(time_logs=time_logs, assignments=assignments, clients=clients, candidates=candidates)
