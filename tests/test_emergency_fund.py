"""Tests for the emergency reserve simulator."""

import pytest

from finance_simulator.calculators import InvalidParameterError, emergency_fund
from finance_simulator.calculators.models import EmergencyFundParameters


def _params(**overrides):
    base = dict(
        monthly_income=10000.0,
        monthly_expenses=7000.0,
        target_months=6,
        current_amount=15000.0,
        monthly_contribution=1000.0,
        monthly_return_rate=0.0,
    )
    base.update(overrides)
    return EmergencyFundParameters(**base)


def test_target_progress_and_shortfall():
    res = emergency_fund.compute(_params())
    assert res.target_amount == 42000.0
    assert res.progress_percent == pytest.approx(15000.0 / 42000.0 * 100)
    assert res.shortfall == 27000.0
    assert res.months_to_target == 27
    assert res.exceeds_horizon is False
    assert res.monthly_surplus == 3000.0
    assert res.coverage_months == pytest.approx(15000.0 / 7000.0)


@pytest.mark.parametrize("contribution,rate", [(0.0, 0.0), (500.0, 1.0), (10000.0, 5.0)])
@pytest.mark.parametrize("current", [42000.0, 50000.0, 1e7])
def test_full_reserve_is_complete_regardless_of_other_inputs(current, contribution, rate):
    res = emergency_fund.compute(
        _params(current_amount=current, monthly_contribution=contribution, monthly_return_rate=rate)
    )
    assert res.progress_percent == 100.0
    assert res.months_to_target == 0
    assert res.shortfall == 0.0
    assert res.exceeds_horizon is False


def test_capped_when_target_never_reached():
    res = emergency_fund.compute(_params(monthly_contribution=0.0, monthly_return_rate=0.0))
    assert res.months_to_target == emergency_fund.MAX_MONTHS == 120
    assert res.exceeds_horizon is True


def test_capped_when_contribution_too_small():
    res = emergency_fund.compute(_params(current_amount=0.0, monthly_contribution=100.0))
    # 42000 / 100 would take 420 months
    assert res.months_to_target == 120
    assert res.exceeds_horizon is True


def test_interest_alone_can_reach_target():
    res = emergency_fund.compute(
        _params(current_amount=40000.0, monthly_contribution=0.0, monthly_return_rate=1.0)
    )
    assert res.months_to_target == 5


def test_contribution_added_after_compounding():
    # 1st month: 0 * 1.1 + 1000 = 1000 (< 1050); 2nd month: 1100 + 1000
    res = emergency_fund.compute(
        _params(
            monthly_expenses=1050.0, target_months=1, current_amount=0.0,
            monthly_contribution=1000.0, monthly_return_rate=10.0,
        )
    )
    assert res.months_to_target == 2


def test_months_to_reach_helper():
    assert emergency_fund.months_to_reach(0.0, 3000.0, 1000.0, 0.0) == (3, True)
    assert emergency_fund.months_to_reach(0.0, 3000.0, 0.0, 0.0, cap=10) == (10, False)


@pytest.mark.parametrize(
    "overrides",
    [
        {"monthly_expenses": 0.0},
        {"monthly_income": 0.0},
        {"monthly_income": -1.0},
        {"target_months": 0},
        {"current_amount": -1.0},
        {"monthly_contribution": -1.0},
        {"monthly_return_rate": -0.5},
    ],
)
def test_invalid_inputs_are_rejected(overrides):
    with pytest.raises(InvalidParameterError):
        emergency_fund.compute(_params(**overrides))
