from __future__ import annotations

from typing import Optional

from ...assignments.model import Client
from ...common.diagnostics import Diagnostics
from .base import PlacementDecision, PlacementStrategy


class PercentageCommissionStrategy(PlacementStrategy):
    """Commission as a percentage of the annualised CTC; the commission is the revenue."""

    def decide(
        self,
        *,
        salary_amount: float,
        accrual_amount: float,
        client: Optional[Client],
        diagnostics: Optional[Diagnostics] = None,
        candidate_id: Optional[str] = None,
    ) -> PlacementDecision:
        value = float(client.commission_value or 0) if client else 0.0
        profit = salary_amount * value / 100
        return PlacementDecision(revenue=profit, profit=profit)
