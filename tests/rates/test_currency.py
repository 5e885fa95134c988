import pytest

from src.workforce_revenue.workforce_revenue.core.settings import EngineSettings
from src.workforce_revenue.workforce_revenue.rates.currency import CurrencyNormalizer


def test_usd_is_converted_at_fixed_rate():
    assert CurrencyNormalizer().to_base_currency(1000, "USD") == 84000


@pytest.mark.parametrize("amount", [0, 1, 123.45, 1e9])
def test_base_currency_is_left_untouched(amount):
    assert CurrencyNormalizer().to_base_currency(amount, "INR") == amount


@pytest.mark.parametrize("code", ["EUR", "", None, "inr"])
def test_other_codes_are_treated_as_base(code):
    assert CurrencyNormalizer().to_base_currency(500, code) == 500


def test_rate_is_injectable():
    normalizer = CurrencyNormalizer(EngineSettings(usd_to_base_rate=80))
    assert normalizer.to_base_currency(10, "usd") == 800
    assert normalizer.from_base_currency(800, "USD") == 10


@pytest.mark.parametrize("base", ["INR", "USD", "usd", "EUR"])
@pytest.mark.parametrize("amount", [0, 1, 250.5])
def test_base_currency_round_trips_unchanged(base, amount):
    normalizer = CurrencyNormalizer(EngineSettings(base_currency=base))
    assert normalizer.to_base_currency(amount, base) == amount
    assert normalizer.from_base_currency(amount, base) == amount


def test_usd_base_is_not_rated():
    normalizer = CurrencyNormalizer(EngineSettings(base_currency="USD"))
    assert normalizer.is_base("usd")
    assert normalizer.to_base_currency(100, "USD") == 100
    assert normalizer.to_base_currency(100, "INR") == 100
