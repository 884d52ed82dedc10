from finance_simulator.calculators import amortization, emergency_fund, fixed_income, retirement
from finance_simulator.calculators.models import (
    AmortizationSystem,
    EmergencyFundParameters,
    FixedIncomeParameters,
    Instrument,
    LoanParameters,
    RetirementParameters,
)
from finance_simulator.components import insights


def test_loan_insights_flag_expensive_loans():
    res = amortization.compute(LoanParameters(50000.0, 120, 0.025, AmortizationSystem.PRICE))
    text = " ".join(insights.loan_insights(res, 50000.0)).lower()
    assert "shorter term" in text


def test_fixed_income_insights():
    exempt = fixed_income.compute(FixedIncomeParameters(Instrument.LCI, 1000.0, 6, 11.0))
    assert "exempt" in insights.fixed_income_insights(exempt)[0]
    taxed = fixed_income.compute(FixedIncomeParameters(Instrument.CDB, 1000.0, 6, 12.5))
    assert any("24 months" in t for t in insights.fixed_income_insights(taxed))


def test_emergency_fund_insights():
    done = emergency_fund.compute(EmergencyFundParameters(10000.0, 5000.0, 6, 30000.0, 0.0, 0.0))
    assert "complete" in insights.emergency_fund_insights(done)[0]
    slow = emergency_fund.compute(EmergencyFundParameters(5000.0, 5000.0, 6, 0.0, 0.0, 0.0))
    tips = " ".join(insights.emergency_fund_insights(slow))
    assert "more than 10 years" in tips
    assert "nothing left" in tips


def test_retirement_insights():
    res = retirement.compute(RetirementParameters(30, 65, 10000.0, 50000.0, 1000.0, 0.0))
    assert "falls short" in insights.retirement_insights(res)[0]
    rich = retirement.compute(RetirementParameters(30, 65, 100.0, 50000.0, 1000.0, 0.06))
    assert "supports" in insights.retirement_insights(rich)[0]
