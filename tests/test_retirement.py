"""Tests for the retirement accumulation projection."""

import pytest

from finance_simulator.calculators import InvalidParameterError, retirement
from finance_simulator.calculators.models import RetirementParameters


def _params(**overrides):
    base = dict(
        current_age=30,
        retirement_age=65,
        desired_monthly_income=10000.0,
        current_savings=50000.0,
        monthly_contribution=1000.0,
        annual_return_rate=0.06,
    )
    base.update(overrides)
    return RetirementParameters(**base)


def test_reference_scenario():
    res = retirement.compute(_params())
    assert res.months_to_retirement == 420
    assert res.total_contributed == 470000.0
    assert res.projected_final_value > res.total_contributed
    assert res.total_return > 0
    assert res.total_return == pytest.approx(res.projected_final_value - 470000.0)
    assert res.estimated_monthly_income == pytest.approx(res.projected_final_value * 0.004)


def test_projection_matches_closed_form():
    res = retirement.compute(_params())
    m = 1.06 ** (1 / 12) - 1
    n = 420
    savings = 50000.0 * (1 + m) ** n
    # each deposit compounds for its remaining months, the first for all n
    deposits = 1000.0 * (1 + m) * ((1 + m) ** n - 1) / m
    assert res.projected_final_value == pytest.approx(savings + deposits, rel=1e-9)


@pytest.mark.parametrize("rate", [0.01, 0.04, 0.10])
def test_positive_rate_always_beats_contributions(rate):
    res = retirement.compute(_params(annual_return_rate=rate))
    assert res.projected_final_value > res.total_contributed


def test_zero_rate_returns_contributions():
    res = retirement.compute(_params(annual_return_rate=0.0))
    assert res.projected_final_value == pytest.approx(470000.0)
    assert res.total_return == pytest.approx(0.0)


def test_withdrawal_rate_is_fixed():
    low = retirement.compute(_params(annual_return_rate=0.02))
    high = retirement.compute(_params(annual_return_rate=0.12))
    assert low.estimated_monthly_income / low.projected_final_value == pytest.approx(0.004)
    assert high.estimated_monthly_income / high.projected_final_value == pytest.approx(0.004)


def test_income_gap_and_required_capital():
    res = retirement.compute(_params(annual_return_rate=0.0))
    assert res.estimated_monthly_income == pytest.approx(1880.0)
    assert res.income_gap == pytest.approx(10000.0 - 1880.0)
    assert res.required_capital == pytest.approx(2500000.0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"retirement_age": 30},
        {"retirement_age": 25},
        {"current_age": 17, "retirement_age": 65},
        {"current_savings": -1.0},
        {"monthly_contribution": -1.0},
        {"annual_return_rate": -0.05},
    ],
)
def test_invalid_inputs_fail_fast(overrides):
    with pytest.raises(InvalidParameterError):
        retirement.compute(_params(**overrides))


def test_accumulation_series_ends_at_projection():
    params = _params()
    series = retirement.accumulation_series(params)
    assert len(series) == 36
    assert series[0] == {"age": 30, "balance": 50000.0, "contributed": 50000.0}
    assert series[-1]["age"] == 65
    assert series[-1]["balance"] == pytest.approx(retirement.compute(params).projected_final_value)
    assert series[-1]["contributed"] == 470000.0


def test_rate_too_large_to_compound_is_rejected():
    with pytest.raises(InvalidParameterError) as exc:
        retirement.compute(_params(current_age=18, retirement_age=100, annual_return_rate=1e4))
    assert exc.value.field == "annual_return_rate"
