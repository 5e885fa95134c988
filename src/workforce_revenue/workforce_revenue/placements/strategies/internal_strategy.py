from __future__ import annotations

from typing import Optional

from ...assignments.model import Client
from ...common.diagnostics import Diagnostics, warn
from .base import PlacementDecision, PlacementStrategy


class InternalPlacementStrategy(PlacementStrategy):
    """Internal hire billed at cost-plus: accrual CTC minus the candidate's CTC."""

    def decide(
        self,
        *,
        salary_amount: float,
        accrual_amount: float,
        client: Optional[Client],
        diagnostics: Optional[Diagnostics] = None,
        candidate_id: Optional[str] = None,
    ) -> PlacementDecision:
        if accrual_amount == 0:
            who = f"candidate {candidate_id}" if candidate_id else "candidate"
            warn(diagnostics, f"Internal placement of {who} has no accrual CTC; revenue resolved to 0")
        return PlacementDecision(revenue=accrual_amount, profit=accrual_amount - salary_amount)
