from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import iter_months, month_label, month_start
from ..core.enums import Track


@dataclass(frozen=True)
class MonthlyContribution:
    """One figure to be bucketed: a priced log month or a hire."""

    when: date
    revenue: float = 0.0
    profit: float = 0.0
    hires: int = 0
    track: Track = Track.LABOR


@dataclass
class MonthlyBucket:
    month: str
    start: date
    revenue: float = 0.0
    profit: float = 0.0
    hires: int = 0

    def add(self, c: MonthlyContribution) -> None:
        self.revenue += c.revenue
        self.profit += c.profit
        self.hires += c.hires

    def to_dict(self) -> dict:
        return {"month": self.month, "revenue": self.revenue, "profit": self.profit, "hires": self.hires}


class MonthlyAggregator:
    """Bucket contributions into calendar months.

    Buckets are created on first contribution and summed; ordering is by the
    month's first day, never by label (``"Apr 2025"`` sorts before ``"Jan 2024"``).
    """

    def aggregate(
        self,
        entries: Iterable[MonthlyContribution],
        bucket_key_fn: Callable[[date], str] = month_label,
    ) -> dict[str, MonthlyBucket]:
        buckets: dict[str, MonthlyBucket] = {}
        for entry in entries:
            key = bucket_key_fn(entry.when)
            bucket = buckets.get(key)
            if bucket is None:
                bucket = MonthlyBucket(month=key, start=month_start(entry.when))
                buckets[key] = bucket
            bucket.add(entry)
        return buckets

    def sorted_buckets(self, buckets: dict[str, MonthlyBucket]) -> list[MonthlyBucket]:
        return sorted(buckets.values(), key=lambda b: b.start)

    def fill_range(
        self,
        buckets: dict[str, MonthlyBucket],
        start: Optional[date],
        end: Optional[date],
    ) -> list[MonthlyBucket]:
        """Sorted buckets with a zero bucket for every month of [start, end] that has none."""
        filled = dict(buckets)
        if start and end and start <= end:
            for first_day in iter_months(start, end):
                key = month_label(first_day)
                if key not in filled:
                    filled[key] = MonthlyBucket(month=key, start=first_day)
@dataclass
class MonthlyBucket:
    month: str
    start: date
    revenue: float = 0.0
    profit: float = 0.0
    hires: int = 0
    labor_revenue: float = 0.0
    placement_revenue: float = 0.0

    def add(self, c: MonthlyContribution) -> None:
        self.revenue += c.revenue
        self.profit += c.profit
        self.hires += c.hires
        if c.track == Track.PLACEMENT:
            self.placement_revenue += c.revenue
        else:
            self.labor_revenue += c.revenue

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "revenue": self.revenue,
            "profit": self.profit,
            "hires": self.hires,
            "labor_revenue": self.labor_revenue,
            "placement_revenue": self.placement_revenue,
        }


class MonthlyAggregator:
    """Bucket contributions into calendar months.

    Buckets are created on first contribution and summed; ordering is by the
    month's first day, never by label (``"Apr 2025"`` sorts before ``"Jan 2024"``).
    """

    def aggregate(
        self,
        entries: Iterable[MonthlyContribution],
        bucket_key_fn: Callable[[date], str] = month_label,
    ) -> dict[str, MonthlyBucket]:
        buckets: dict[str, MonthlyBucket] = {}
        for entry in entries:
            key = bucket_key_fn(entry.when)
            bucket = buckets.get(key)
            if bucket is None:
                bucket = MonthlyBucket(month=key, start=month_start(entry.when))
                buckets[key] = bucket
            bucket.add(entry)
        return buckets

    def sorted_buckets(self, buckets: dict[str, MonthlyBucket]) -> list[MonthlyBucket]:
        return sorted(buckets.values(), key=lambda b: b.start)

    def fill_range(
        self,
        buckets: dict[str, MonthlyBucket],
        start: Optional[date],
        end: Optional[date],
    ) -> list[MonthlyBucket]:
        """Sorted buckets with a zero bucket for every month of [start, end] that has none."""
        filled = dict(buckets)
        if start and end and start <= end:
            for first_day in iter_months(start, end):
                key = month_label(first_day)
                if key not in filled:
                    filled[key] = MonthlyBucket(month=key, start=first_day)
        return self.sorted_buckets(filled)
