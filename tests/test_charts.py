from finance_simulator.calculators import amortization, fixed_income
from finance_simulator.calculators.models import (
    AmortizationSystem,
    AssetClass,
    FixedIncomeParameters,
    Instrument,
    LoanParameters,
)
from finance_simulator.components import charts


def test_schedule_chart_has_bars_and_balance():
    res = amortization.compute(LoanParameters(1200.0, 12, 0.01, AmortizationSystem.SAC))
    fig = charts.schedule_chart(res)
    assert len(fig.data) == 3
    assert all(len(trace.x) == 12 for trace in fig.data)


def test_fixed_income_chart_values():
    res = fixed_income.compute(FixedIncomeParameters(Instrument.CDB, 10000.0, 12, 12.5))
    fig = charts.fixed_income_chart(res)
    assert list(fig.data[0].x) == ["Invested", "Gross return", "Income tax", "Net return"]


def test_progress_gauge_clamps():
    assert charts.progress_gauge(150.0).data[0].value == 100.0
    assert charts.progress_gauge(-5.0).data[0].value == 0.0


def test_allocation_donut_labels():
    values = {AssetClass.FIXED_INCOME: 60.0, AssetClass.EQUITIES: 40.0}
    fig = charts.allocation_donut(values)
    assert list(fig.data[0].labels) == ["Fixed Income", "Equities"]


def test_accumulation_chart_handles_short_sequences():
    fig = charts.accumulation_chart([30, 31, 32], [1, 2], [1])
    assert len(fig.data) == 2
    for trace in fig.data:
        assert len(trace.y) == 3
