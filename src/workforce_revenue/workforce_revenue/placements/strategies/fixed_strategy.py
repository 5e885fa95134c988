from __future__ import annotations

from typing import Optional

from ...assignments.model import Client
from ...common.diagnostics import Diagnostics
from ...rates.currency import CurrencyNormalizer
from .base import PlacementDecision, PlacementStrategy


class FixedCommissionStrategy(PlacementStrategy):
    """Flat fee per placement, quoted in the client's currency."""

    def __init__(self, normalizer: Optional[CurrencyNormalizer] = None):
        self._normalizer = normalizer or CurrencyNormalizer()

    def decide(
        self,
        *,
        salary_amount: float,
        accrual_amount: float,
        client: Optional[Client],
        diagnostics: Optional[Diagnostics] = None,
        candidate_id: Optional[str] = None,
    ) -> PlacementDecision:
        if not client:
            return PlacementDecision(revenue=0.0, profit=0.0)
        profit = self._normalizer.to_base_currency(client.commission_value or 0, client.currency)
        return PlacementDecision(revenue=profit, profit=profit)
