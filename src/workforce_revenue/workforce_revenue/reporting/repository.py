from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..assignments.model import Client, EmployeeAssignment
from ..placements.model import Candidate
from ..timelogs.model import TimeLogEntry


class AttributionRowsSource(Protocol):
    """Already-fetched rows for one report request.

    Window filtering is the source's responsibility; the engine assumes
    pre-filtered input.
    """

    def get_time_logs(self, *, start_date: Optional[date], end_date: Optional[date]) -> Sequence[TimeLogEntry]:
        raise NotImplementedError

    def get_assignments(self) -> Sequence[EmployeeAssignment]:
        raise NotImplementedError

    def get_clients(self) -> Sequence[Client]:
        raise NotImplementedError

    def get_candidates(self, *, start_date: Optional[date], end_date: Optional[date]) -> Sequence[Candidate]:
        """Hired candidates whose joining date falls in the window."""

        raise NotImplementedError
