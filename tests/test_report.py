from finance_simulator import report
from finance_simulator.calculators import amortization, portfolio
from finance_simulator.calculators.models import (
    AmortizationSystem,
    AssetClass,
    LoanParameters,
    PortfolioParameters,
)


def test_flatten_skips_schedule_and_formats_values():
    params = LoanParameters(1200.0, 12, 0.01, AmortizationSystem.SAC)
    res = amortization.compute(params)
    rows = dict(report.flatten(res))
    assert "schedule" not in rows
    assert rows["total_paid"] == "1,278.00"
    assert dict(report.flatten(params))["system"] == "sac"


def test_flatten_nested_mapping():
    params = PortfolioParameters(
        1000.0, 0.0, 1,
        {c: 25.0 for c in AssetClass},
        {c: 10.0 for c in AssetClass},
    )
    rows = dict(report.flatten(portfolio.compute(params)))
    assert rows["weights.equities"] == "25.00"


def test_build_pdf_returns_pdf_bytes():
    params = LoanParameters(1200.0, 12, 0.01, AmortizationSystem.PRICE)
    res = amortization.compute(params)
    pdf = report.build_pdf("Loan", params, res, amortization.schedule_frame(res))
    assert pdf.startswith(b"%PDF")
