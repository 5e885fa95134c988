from src.workforce_revenue.workforce_revenue.assignments.model import Client
from src.workforce_revenue.workforce_revenue.placements.factory import CommissionStrategyFactory
from src.workforce_revenue.workforce_revenue.placements.strategies.fixed_strategy import FixedCommissionStrategy
from src.workforce_revenue.workforce_revenue.placements.strategies.internal_strategy import InternalPlacementStrategy
from src.workforce_revenue.workforce_revenue.placements.strategies.no_commission_strategy import NoCommissionStrategy
from src.workforce_revenue.workforce_revenue.placements.strategies.percentage_strategy import PercentageCommissionStrategy


def test_internal_wins_over_commission_terms():
    client = Client(id="c1", commission_type="percentage", commission_value=8)
    strategy = CommissionStrategyFactory().for_placement(job_type_category="Internal", client=client)
    assert isinstance(strategy, InternalPlacementStrategy)


def test_percentage_and_fixed_are_selected_case_insensitively():
    factory = CommissionStrategyFactory()
    pct = factory.for_placement(job_type_category="External", client=Client(id="c1", commission_type="Percentage", commission_value=8))
    fixed = factory.for_placement(job_type_category=None, client=Client(id="c2", commission_type="FIXED", commission_value=500))
    assert isinstance(pct, PercentageCommissionStrategy)
    assert isinstance(fixed, FixedCommissionStrategy)


def test_zero_value_or_unknown_type_means_no_commission():
    factory = CommissionStrategyFactory()
    zero = factory.for_placement(job_type_category="External", client=Client(id="c1", commission_type="fixed", commission_value=0))
    other = factory.for_placement(job_type_category="External", client=Client(id="c1", commission_type="retainer", commission_value=5))
    missing = factory.for_placement(job_type_category="External", client=None)
    assert all(isinstance(s, NoCommissionStrategy) for s in (zero, other, missing))
