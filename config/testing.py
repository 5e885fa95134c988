from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

# Tests pin the observed configuration regardless of the environment.
BASE_CURRENCY = "INR"
USD_TO_BASE_RATE = 84.0
DEFAULT_DAILY_HOURS = 8
WORKING_DAYS_PER_YEAR = {"all_days": 365, "weekdays_only": 260, "saturday_working": 312}
CANDIDATE_ANNUAL_HOURS = 2016
LOG_LEVEL = "WARNING"
