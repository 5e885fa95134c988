import pytest

from src.workforce_revenue.workforce_revenue.common.diagnostics import Diagnostics
from src.workforce_revenue.workforce_revenue.core.settings import EngineSettings
from src.workforce_revenue.workforce_revenue.rates.converter import RateConverter


def test_lpa_rate_over_all_days():
    rate = RateConverter().hourly_rate(100000, "LPA", "all_days", 8)
    assert rate == pytest.approx(100000 / (365 * 8))
    assert round(rate, 2) == 34.25


def test_monthly_rate_is_annualised_before_dividing():
    rate = RateConverter().hourly_rate(84000, "Monthly", "all_days", 8)
    assert rate == pytest.approx(84000 * 12 / (365 * 8))
    assert round(rate, 1) == 345.2


def test_hourly_rate_passes_through():
    assert RateConverter().hourly_rate(750, "Hourly", "weekdays_only", 6) == 750


def test_fewer_working_days_give_higher_rate():
    converter = RateConverter()
    all_days = converter.hourly_rate(1200000, "LPA", "all_days", 8)
    weekdays = converter.hourly_rate(1200000, "LPA", "weekdays_only", 8)
    saturdays = converter.hourly_rate(1200000, "LPA", "saturday_working", 8)
    assert weekdays > saturdays > all_days


@pytest.mark.parametrize("daily_hours", [None, 0, ""])
def test_falsy_daily_hours_default_to_eight(daily_hours):
    converter = RateConverter()
    assert converter.hourly_rate(292000, "LPA", "all_days", daily_hours) == pytest.approx(100)


def test_unknown_billing_type_resolves_to_zero_with_warning():
    diagnostics = Diagnostics()
    assert RateConverter().hourly_rate(50000, "Weekly", "all_days", 8, diagnostics=diagnostics) == 0
    assert RateConverter().hourly_rate(50000, None, "all_days", 8) == 0
    assert len(diagnostics) == 1
    assert "Weekly" in diagnostics.warnings[0]


def test_billing_type_is_case_insensitive():
    converter = RateConverter()
    assert converter.hourly_rate(100000, "lpa", "all_days", 8) == converter.hourly_rate(100000, "LPA", "all_days", 8)


def test_unknown_working_days_config_falls_back_to_all_days():
    assert RateConverter().working_days_per_year("four_day_week") == 365
    assert RateConverter().working_days_per_year(None) == 365


def test_working_days_table_is_injectable():
    settings = EngineSettings(working_days_table={"all_days": 300, "weekdays_only": 250, "saturday_working": 280})
    converter = RateConverter(settings)
    assert converter.working_days_per_year("weekdays_only") == 250
    assert converter.hourly_rate(250 * 8 * 10, "LPA", "weekdays_only", 8) == pytest.approx(10)
