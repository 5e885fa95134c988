from __future__ import annotations

from enum import Enum
from typing import Optional


class _LenientEnum(str, Enum):
    @classmethod
    def parse(cls, value) -> Optional["_LenientEnum"]:
        """Case-insensitive lookup by value; unknown/empty values give None."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return None


class Periodicity(_LenientEnum):
    """Billing/salary periodicity used to derive an hourly rate."""

    MONTHLY = "Monthly"
    LPA = "LPA"
    HOURLY = "Hourly"


class WorkingDaysConfig(_LenientEnum):
    """Which calendar days count as billable in a year."""

    ALL_DAYS = "all_days"
    WEEKDAYS_ONLY = "weekdays_only"
    SATURDAY_WORKING = "saturday_working"


class CommissionType(_LenientEnum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class JobTypeCategory(_LenientEnum):
    INTERNAL = "Internal"
    EXTERNAL = "External"


class ServiceType(_LenientEnum):
    """Client service mix used for the permanent/contractual breakdown."""

    PERMANENT = "permanent"
    CONTRACTUAL = "contractual"
    BOTH = "both"


class Track(str, Enum):
    LABOR = "labor"
    PLACEMENT = "placement"
