from __future__ import annotations

import logging
import time
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .engine import AttributionEngine
from .model import AttributionReport
from .repository import AttributionRowsSource

logger = logging.getLogger(__name__)


class AttributionReportService:
    """Use case: revenue/profit report for a date window, recomputed in full on every call."""

    def __init__(self, *, engine: Optional[AttributionEngine] = None):
        self._engine = engine or AttributionEngine()

    def build_report(
        self,
        source: AttributionRowsSource,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        fill_empty_months: bool = False,
    ) -> AttributionReport:
        if start and end and start > end:
            raise ValidationError("start_date must not be after end_date")

        started = time.perf_counter()
        report = self._engine.compute(
            time_logs=source.get_time_logs(start_date=start, end_date=end),
            assignments=source.get_assignments(),
            clients=source.get_clients(),
            candidates=source.get_candidates(start_date=start, end_date=end),
            start=start,
            end=end,
            fill_empty_months=fill_empty_months,
        )
        logger.info(
            "attribution report built",
            extra={
                "report_window": f"{start or '-'}..{end or '-'}",
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return report
