"""Settings shared by every environment; each value can be overridden by env var."""
import json
import os

BASE_CURRENCY = os.getenv("BASE_CURRENCY", "INR")

# Base-currency units per 1 USD
USD_TO_BASE_RATE = float(os.getenv("USD_TO_BASE_RATE", "84"))

DEFAULT_DAILY_HOURS = float(os.getenv("DEFAULT_DAILY_HOURS", "8"))

WORKING_DAYS_PER_YEAR = {
    "all_days": 365,
    "weekdays_only": 260,
    "saturday_working": 312,
}
WORKING_DAYS_PER_YEAR.update(json.loads(os.getenv("WORKING_DAYS_PER_YEAR", "{}")))

CANDIDATE_ANNUAL_HOURS = float(os.getenv("CANDIDATE_ANNUAL_HOURS", "2016"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))
