from datetime import date

import pytest

from src.workforce_revenue.workforce_revenue.assignments.model import EmployeeAssignment
from src.workforce_revenue.workforce_revenue.attribution.calculator.base import monetary_attribution
from src.workforce_revenue.workforce_revenue.attribution.calculator.cost_calculator import CostCalculator
from src.workforce_revenue.workforce_revenue.attribution.calculator.revenue_calculator import RevenueCalculator
from src.workforce_revenue.workforce_revenue.attribution.profit import ProfitCalculator
from src.workforce_revenue.workforce_revenue.common.diagnostics import Diagnostics
from src.workforce_revenue.workforce_revenue.rates.converter import RateConverter
from src.workforce_revenue.workforce_revenue.rates.currency import CurrencyNormalizer
from src.workforce_revenue.workforce_revenue.timelogs.model import ProjectHours, TimeLogEntry


def _assignment(**overrides):
    values = dict(
        employee_id="e1",
        project_id="p1",
        client_id="c1",
        client_billing=100000,
        billing_type="LPA",
        salary=60000,
        salary_type="LPA",
        salary_currency="INR",
        client_currency="INR",
        working_hours=8,
        working_days_config="all_days",
    )
    values.update(overrides)
    return EmployeeAssignment(**values)


def _logs(*hours, employee_id="e1", project_id="p1"):
    return [
        TimeLogEntry(employee_id=employee_id, date=date(2025, 3, i + 1), projects=(ProjectHours(project_id, h),))
        for i, h in enumerate(hours)
    ]


def test_lpa_revenue_for_160_hours():
    revenue = RevenueCalculator().revenue(_assignment(), "p1", _logs(80, 80))
    assert revenue == pytest.approx(160 * 100000 / (365 * 8))
    assert round(revenue, 2) == 5479.45


def test_usd_monthly_billing_is_normalised_first():
    calc = RevenueCalculator()
    a = _assignment(client_billing=1000, billing_type="Monthly", client_currency="USD")
    assert calc.hourly_rate(a) == pytest.approx(84000 * 12 / (365 * 8))
    assert calc.revenue(a, "p1", _logs(10)) == pytest.approx(10 * 84000 * 12 / (365 * 8))


def test_revenue_is_additive_over_entries():
    calc = RevenueCalculator()
    a = _assignment()
    split = calc.revenue(a, "p1", _logs(3.5, 4.25))
    whole = calc.revenue(a, "p1", _logs(7.75))
    assert split == pytest.approx(whole)


def test_cost_uses_salary_terms():
    a = _assignment(salary=5000, salary_type="Monthly", salary_currency="USD", working_days_config="weekdays_only")
    cost = CostCalculator().cost(a, "p1", _logs(8))
    assert cost == pytest.approx(8 * 5000 * 84 * 12 / (260 * 8))


def test_revenue_and_cost_share_one_formula():
    a = _assignment(salary=100000, salary_type="LPA")
    logs = _logs(8, 8)
    assert RevenueCalculator().revenue(a, "p1", logs) == CostCalculator().cost(a, "p1", logs)


def test_profit_negative_when_salary_exceeds_billing():
    a = _assignment(client_billing=50000, salary=90000)
    assert ProfitCalculator().labor_profit(a, "p1", _logs(40)) < 0


def test_profit_attribution_breakdown():
    result = ProfitCalculator().attribute(_assignment(), "p1", _logs(100))
    assert result.hours == 100
    assert result.revenue == pytest.approx(100 * 100000 / 2920)
    assert result.cost == pytest.approx(100 * 60000 / 2920)
    assert result.profit == pytest.approx(result.revenue - result.cost)


def test_hours_on_other_projects_are_not_attributed():
    logs = _logs(8, project_id="p2") + _logs(8, employee_id="e2")
    assert RevenueCalculator().revenue(_assignment(), "p1", logs) == 0


def test_unknown_periodicity_gives_zero_and_a_warning():
    diagnostics = Diagnostics()
    a = _assignment(billing_type="Fortnightly")
    assert RevenueCalculator().revenue(a, "p1", _logs(8), diagnostics=diagnostics) == 0
    assert any("Fortnightly" in w for w in diagnostics.warnings)


def test_negative_amount_never_yields_negative_revenue():
    diagnostics = Diagnostics()
    a = _assignment(client_billing=-1000)
    assert RevenueCalculator().revenue(a, "p1", _logs(8), diagnostics=diagnostics) == 0
    assert diagnostics


def test_monetary_attribution_direct_call():
    value = monetary_attribution(
        10,
        1000,
        "USD",
        "Hourly",
        "all_days",
        8,
        converter=RateConverter(),
        normalizer=CurrencyNormalizer(),
    )
    assert value == 10 * 1000 * 84
