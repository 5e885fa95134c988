from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.constants import BASE_CURRENCY
from ..core.enums import Periodicity


@dataclass(frozen=True)
class Money:
    """Typed compensation value: amount in ``currency`` per ``periodicity``."""

    amount: float
    currency: str = BASE_CURRENCY
    periodicity: Periodicity = Periodicity.LPA


CompensationValue = Union[Money, str, int, float, None]


@dataclass(frozen=True)
class Candidate:
    """A hired (joined/offered) candidate as consumed by the placement track."""

    candidate_id: str
    ctc: CompensationValue
    accrual_ctc: CompensationValue
    job_type_category: Optional[str]
    joining_date: date
    client_id: Optional[str]
    name: Optional[str] = None
    expected_salary: Optional[float] = None


@dataclass(frozen=True)
class PlacementAttribution:
    candidate_id: str
    client_id: Optional[str]
    joining_date: date
    salary_amount: float
    accrual_amount: float
    revenue: float
    profit: float
