from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..assignments.model import Client
from ..core.enums import CommissionType, JobTypeCategory
from ..rates.currency import CurrencyNormalizer
from .strategies.base import PlacementStrategy
from .strategies.fixed_strategy import FixedCommissionStrategy
from .strategies.internal_strategy import InternalPlacementStrategy
from .strategies.no_commission_strategy import NoCommissionStrategy
from .strategies.percentage_strategy import PercentageCommissionStrategy


@dataclass
class CommissionStrategyFactory:
    """Factory Pattern: choose the placement strategy from job category and client terms."""

    normalizer: CurrencyNormalizer = field(default_factory=CurrencyNormalizer)

    def for_placement(self, *, job_type_category: Optional[str], client: Optional[Client]) -> PlacementStrategy:
        if JobTypeCategory.parse(job_type_category) == JobTypeCategory.INTERNAL:
            return InternalPlacementStrategy()

        if not client or not client.commission_value:
            return NoCommissionStrategy()

        commission_type = CommissionType.parse(client.commission_type)
        if commission_type == CommissionType.PERCENTAGE:
            return PercentageCommissionStrategy()
        if commission_type == CommissionType.FIXED:
            return FixedCommissionStrategy(self.normalizer)
        return NoCommissionStrategy()
