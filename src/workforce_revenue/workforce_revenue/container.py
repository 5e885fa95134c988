from __future__ import annotations

from dataclasses import dataclass

from .core.settings import EngineSettings
from .reporting.engine import AttributionEngine
from .reporting.service import AttributionReportService


@dataclass(frozen=True)
class Container:
    settings: EngineSettings
    engine: AttributionEngine
    report_service: AttributionReportService


def build_container(*, settings: EngineSettings | None = None) -> Container:
    settings = settings or EngineSettings()
    engine = AttributionEngine(settings)
    report_service = AttributionReportService(engine=engine)

    return Container(
        settings=settings,
        engine=engine,
        report_service=report_service,
    )
