from __future__ import annotations

from datetime import date

import pytest

from src.workforce_revenue.workforce_revenue.core.exceptions import ValidationError
from src.workforce_revenue.workforce_revenue.reporting.service import AttributionReportService


class FakeRowsSource:
    def __init__(self, inner):
        self._inner = inner
        self.last_args = None

    def get_time_logs(self, *, start_date, end_date):
        self.last_args = {"start_date": start_date, "end_date": end_date}
        return self._inner.get_time_logs(start_date=start_date, end_date=end_date)

    def get_assignments(self):
        return self._inner.get_assignments()

    def get_clients(self):
        return self._inner.get_clients()

    def get_candidates(self, *, start_date, end_date):
        return self._inner.get_candidates(start_date=start_date, end_date=end_date)


def test_report_forwards_window_to_source(rows_source):
    source = FakeRowsSource(rows_source)
    AttributionReportService().build_report(source, start=date(2025, 1, 1), end=date(2025, 1, 31))
    assert source.last_args == {"start_date": date(2025, 1, 1), "end_date": date(2025, 1, 31)}


def test_window_filters_rows_before_attribution(rows_source):
    report = AttributionReportService().build_report(rows_source, start=date(2025, 1, 1), end=date(2025, 1, 31))

    assert [b.month for b in report.monthly_buckets] == ["Jan 2025"]
    assert [p.candidate_id for p in report.placements] == ["k1"]
    assert report.total_revenue == pytest.approx(600 + 3360 + 60000)


def test_inverted_window_is_rejected(rows_source):
    with pytest.raises(ValidationError):
        AttributionReportService().build_report(rows_source, start=date(2025, 2, 1), end=date(2025, 1, 1))
