"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Runtime values are injected through ``EngineSettings``; these are only the defaults.
"""

BASE_CURRENCY = "INR"
USD_CURRENCY = "USD"

DEFAULT_USD_TO_BASE_RATE = 84.0
DEFAULT_DAILY_HOURS = 8

# Fixed lookup, not derived from the calendar.
DEFAULT_WORKING_DAYS_PER_YEAR = {
    "all_days": 365,
    "weekdays_only": 260,
    "saturday_working": 312,
}

# Flat 8 h x 252 days convention used for candidate CTC strings.
DEFAULT_CANDIDATE_ANNUAL_HOURS = 2016

MONTHS_PER_YEAR = 12

MONTH_LABEL_FORMAT = "%b %Y"
