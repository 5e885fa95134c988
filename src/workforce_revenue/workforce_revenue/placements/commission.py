from __future__ import annotations

import logging
from typing import Optional

from ..assignments.model import Client
from ..common.diagnostics import Diagnostics, warn
from ..core.settings import EngineSettings
from ..rates.currency import CurrencyNormalizer
from .ctc_parser import annualize, parse_ctc
from .factory import CommissionStrategyFactory
from .model import Candidate, CompensationValue, PlacementAttribution

logger = logging.getLogger(__name__)


class CommissionEngine:
    """Placement track: revenue and profit recognised for one hired candidate."""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        *,
        normalizer: Optional[CurrencyNormalizer] = None,
        strategy_factory: Optional[CommissionStrategyFactory] = None,
    ):
        self._settings = settings or EngineSettings()
        self._normalizer = normalizer or CurrencyNormalizer(self._settings)
        self._factory = strategy_factory or CommissionStrategyFactory(self._normalizer)

    def annual_amount(
        self,
        value: CompensationValue,
        *,
        label: str = "CTC",
        diagnostics: Optional[Diagnostics] = None,
    ) -> float:
        money = parse_ctc(value, settings=self._settings, diagnostics=diagnostics)
        amount = annualize(money, settings=self._settings, normalizer=self._normalizer)
        if amount < 0:
            warn(diagnostics, f"{label} {value!r} is negative; treated as 0")
            return 0.0
        return amount

    def salary_amount(self, candidate: Candidate, *, diagnostics: Optional[Diagnostics] = None) -> float:
        if candidate.ctc not in (None, ""):
            return self.annual_amount(candidate.ctc, label=f"CTC of candidate {candidate.candidate_id}", diagnostics=diagnostics)
        if candidate.expected_salary:
            return self.annual_amount(
                float(candidate.expected_salary),
                label=f"Expected salary of candidate {candidate.candidate_id}",
                diagnostics=diagnostics,
            )
        warn(diagnostics, f"Candidate {candidate.candidate_id} has no CTC; salary treated as 0")
        return 0.0

    def attribute(
        self,
        candidate: Candidate,
        client: Optional[Client],
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> PlacementAttribution:
        salary = self.salary_amount(candidate, diagnostics=diagnostics)
        accrual = self.annual_amount(
            candidate.accrual_ctc,
            label=f"Accrual CTC of candidate {candidate.candidate_id}",
            diagnostics=diagnostics,
        )

        strategy = self._factory.for_placement(job_type_category=candidate.job_type_category, client=client)
        decision = strategy.decide(
            salary_amount=salary,
            accrual_amount=accrual,
            client=client,
            diagnostics=diagnostics,
            candidate_id=candidate.candidate_id,
        )
        logger.debug(
            "candidate %s: %s salary=%s accrual=%s revenue=%s profit=%s",
            candidate.candidate_id,
            type(strategy).__name__,
            salary,
            accrual,
            decision.revenue,
            decision.profit,
        )

        return PlacementAttribution(
            candidate_id=candidate.candidate_id,
            client_id=candidate.client_id,
            joining_date=candidate.joining_date,
            salary_amount=salary,
            accrual_amount=accrual,
            revenue=decision.revenue,
            profit=decision.profit,
        )

    def candidate_profit(self, candidate: Candidate, client: Optional[Client], *, diagnostics: Optional[Diagnostics] = None) -> float:
        return self.attribute(candidate, client, diagnostics=diagnostics).profit

    def candidate_revenue(self, candidate: Candidate, client: Optional[Client], *, diagnostics: Optional[Diagnostics] = None) -> float:
        return self.attribute(candidate, client, diagnostics=diagnostics).revenue
