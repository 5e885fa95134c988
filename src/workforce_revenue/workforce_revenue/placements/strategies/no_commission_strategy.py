from __future__ import annotations

from typing import Optional

from ...assignments.model import Client
from ...common.diagnostics import Diagnostics, warn
from .base import PlacementDecision, PlacementStrategy


class NoCommissionStrategy(PlacementStrategy):
    """Client has no usable commission terms: nothing is recognised."""

    def decide(
        self,
        *,
        salary_amount: float,
        accrual_amount: float,
        client: Optional[Client],
        diagnostics: Optional[Diagnostics] = None,
        candidate_id: Optional[str] = None,
    ) -> PlacementDecision:
        name = client.display_name if client else "unknown client"
        who = f" (candidate {candidate_id})" if candidate_id else ""
        warn(diagnostics, f"Missing commission configuration for {name}{who}; placement profit resolved to 0")
        return PlacementDecision(revenue=0.0, profit=0.0)
