from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...assignments.model import Client
from ...common.diagnostics import Diagnostics


@dataclass(frozen=True)
class PlacementDecision:
    revenue: float
    profit: float


class PlacementStrategy(ABC):
    """Strategy Pattern: how a hire turns into recognised revenue and profit."""

    @abstractmethod
    def decide(
        self,
        *,
        salary_amount: float,
        accrual_amount: float,
        client: Optional[Client],
        diagnostics: Optional[Diagnostics] = None,
        candidate_id: Optional[str] = None,
    ) -> PlacementDecision:
        raise NotImplementedError
