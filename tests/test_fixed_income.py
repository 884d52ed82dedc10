"""Tests for fixed-income yield and the regressive income-tax table."""

import pytest

from finance_simulator.calculators import InvalidParameterError, fixed_income
from finance_simulator.calculators.models import FixedIncomeParameters, Instrument


@pytest.mark.parametrize(
    "months,rate",
    [(1, 0.225), (6, 0.225), (7, 0.20), (12, 0.20), (13, 0.175), (24, 0.175), (25, 0.15), (120, 0.15)],
)
@pytest.mark.parametrize("instrument", [Instrument.CDB, Instrument.TREASURY])
def test_tax_brackets(instrument, months, rate):
    assert fixed_income.income_tax_rate(instrument, months) == rate


@pytest.mark.parametrize("instrument", [Instrument.LCI, Instrument.LCA])
@pytest.mark.parametrize("months", [1, 6, 12, 24, 60])
def test_lci_lca_are_exempt(instrument, months):
    res = fixed_income.compute(FixedIncomeParameters(instrument, 10000.0, months, 11.0))
    assert res.tax_rate == 0.0
    assert res.tax_amount == 0.0
    assert res.net_return == res.gross_return


def test_twelve_months_compound_to_the_annual_rate():
    res = fixed_income.compute(FixedIncomeParameters(Instrument.CDB, 10000.0, 12, 12.5))
    assert res.final_value == pytest.approx(11250.0)
    assert res.gross_return == pytest.approx(1250.0)
    assert res.tax_rate == 0.20
    assert res.tax_amount == pytest.approx(250.0)
    assert res.net_return == pytest.approx(1000.0)
    assert res.net_final_value == pytest.approx(11000.0)


def test_monthly_rate_is_calendar_equivalent_not_flat():
    res = fixed_income.compute(FixedIncomeParameters(Instrument.CDB, 10000.0, 24, 12.5))
    assert res.final_value == pytest.approx(12656.25)
    assert res.tax_amount == pytest.approx(2656.25 * 0.175)
    flat = 10000.0 * (1 + 0.125 / 12) ** 24
    assert res.final_value < flat


def test_instrument_as_string():
    res = fixed_income.compute(FixedIncomeParameters("treasury", 5000.0, 6, 10.8))
    assert res.tax_rate == 0.225


def test_custom_tables_override_brackets():
    tables = {
        "income_tax": {
            "taxable_instruments": ["cdb"],
            "brackets": [{"max_months": None, "rate": 0.1}],
        }
    }
    res = fixed_income.compute(FixedIncomeParameters(Instrument.CDB, 10000.0, 12, 12.5), tables=tables)
    assert res.tax_rate == 0.1
    assert res.tax_amount == pytest.approx(125.0)


@pytest.mark.parametrize(
    "params",
    [
        FixedIncomeParameters(Instrument.CDB, 0.0, 12, 10.0),
        FixedIncomeParameters(Instrument.CDB, 1000.0, 0, 10.0),
        FixedIncomeParameters(Instrument.CDB, 1000.0, 12, -1.0),
        FixedIncomeParameters("poupanca", 1000.0, 12, 10.0),
    ],
)
def test_invalid_inputs_are_rejected(params):
    with pytest.raises(InvalidParameterError):
        fixed_income.compute(params)


def test_rate_too_large_for_term_is_rejected():
    with pytest.raises(InvalidParameterError) as exc:
        fixed_income.compute(FixedIncomeParameters(Instrument.CDB, 1000.0, 1200, 1e6))
    assert exc.value.field == "annual_rate"
