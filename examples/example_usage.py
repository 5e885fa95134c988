"""Example: build an attribution report through the service layer (no Flask).

Controllers are a thin layer; the calculation lives in the engine and services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.workforce_revenue.workforce_revenue.assignments.model import Client, EmployeeAssignment
from src.workforce_revenue.workforce_revenue.container import build_container
from src.workforce_revenue.workforce_revenue.core.settings import EngineSettings
from src.workforce_revenue.workforce_revenue.placements.model import Candidate
from src.workforce_revenue.workforce_revenue.reporting.payload import PayloadRowsSource
from src.workforce_revenue.workforce_revenue.timelogs.model import ProjectHours, TimeLogEntry


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=EngineSettings.from_settings_module(settings))

    source = PayloadRowsSource(
        clients=[Client(id="c1", currency="USD", commission_type="percentage", commission_value=10, name="Globex")],
        assignments=[
            EmployeeAssignment(
                employee_id="e1",
                project_id="p1",
                client_id="c1",
                client_billing=1000,
                billing_type="Monthly",
                salary=600000,
                salary_type="LPA",
                salary_currency="INR",
                client_currency="USD",
                working_days_config="weekdays_only",
            )
        ],
        time_logs=[
            TimeLogEntry(employee_id="e1", date=date(2025, 1, 6), projects=(ProjectHours("p1", 8),)),
            TimeLogEntry(employee_id="e1", date=date(2025, 2, 3), projects=(ProjectHours("p1", 6),)),
        ],
        candidates=[Candidate("k1", "$5000 Monthly", None, "External", date(2025, 2, 17), "c1")],
    )

    report = container.report_service.build_report(source, start=date(2025, 1, 1), end=date(2025, 3, 31), fill_empty_months=True)
    for bucket in report.monthly_buckets:
        print(bucket.month, round(bucket.revenue, 2), round(bucket.profit, 2), bucket.hires)
    print("total", round(report.total_revenue, 2), round(report.total_profit, 2))
    for message in report.warnings:
        print("warning:", message)


if __name__ == "__main__":
    main()
