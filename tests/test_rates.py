import math

import pytest

from finance_simulator.calculators import rates


def test_annual_to_monthly_round_trip():
    m = rates.annual_to_monthly(0.125)
    assert (1 + m) ** 12 == pytest.approx(1.125)
    assert rates.monthly_to_annual(m) == pytest.approx(0.125)
    assert rates.annual_to_monthly(0.0) == 0.0


def test_future_value():
    assert rates.future_value(1000.0, 0.01, 12) == pytest.approx(1000.0 * 1.01 ** 12)


@pytest.mark.parametrize("due,expected", [(False, 100.0 * (1.01 ** 3 - 1) / 0.01), (True, 100.0 * 1.01 * (1.01 ** 3 - 1) / 0.01)])
def test_annuity_timing(due, expected):
    assert math.isclose(rates.annuity_future_value(100.0, 0.01, 3, due=due), expected, rel_tol=1e-12)


def test_annuity_without_periods_is_zero():
    assert rates.annuity_future_value(100.0, 0.01, 0) == 0.0
