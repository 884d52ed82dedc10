"""Loan amortization schedules.

Two systems are supported:

* **Price** – fixed installment.  The payment comes from the annuity formula
  ``P * r(1+r)^n / ((1+r)^n - 1)`` and each month splits into interest on the
  outstanding balance plus whatever is left over as amortization.
* **SAC** – constant amortization.  Each month repays ``P / n`` of principal
  plus interest on the outstanding balance, so payments decline over time.

A zero rate collapses both systems to ``P / n`` per month with no interest.

Example
-------

>>> res = compute(LoanParameters(principal=1200, term_months=12, monthly_rate=0.0))
>>> res.installment_value, res.total_interest
(100.0, 0.0)
"""

from __future__ import annotations

import logging
from typing import List

import pandas as pd

from .exceptions import InvalidParameterError, require
from .models import AmortizationResult, AmortizationSystem, InstallmentRow, LoanParameters
from .rates import monthly_to_annual

logger = logging.getLogger(__name__)


def _validate(params: LoanParameters) -> None:
    require(params.principal > 0, "principal", "must be greater than zero")
    require(
        isinstance(params.term_months, int) and params.term_months >= 1,
        "term_months",
        "must be a whole number of at least one month",
    )
    require(params.monthly_rate >= 0, "monthly_rate", "cannot be negative")
    require(
        params.system in [s.value for s in AmortizationSystem],
        "system",
        f"unknown amortization system {params.system!r}",
    )


def price_installment(principal: float, monthly_rate: float, term_months: int) -> float:
    """Fixed payment for the Price system."""
    if monthly_rate == 0:
        return principal / term_months
    factor = (1.0 + monthly_rate) ** term_months
    return principal * (monthly_rate * factor) / (factor - 1.0)


def _price_schedule(principal: float, rate: float, n: int) -> List[InstallmentRow]:
    payment = price_installment(principal, rate, n)
    balance = principal
    rows: List[InstallmentRow] = []
    for i in range(1, n + 1):
        interest = balance * rate
        amortization = payment - interest
        balance -= amortization
        if i == n:
            # absorb float drift on the last row
            balance = 0.0
        rows.append(InstallmentRow(i, amortization, interest, payment, max(0.0, balance)))
    return rows


def _sac_schedule(principal: float, rate: float, n: int) -> List[InstallmentRow]:
    amortization = principal / n
    balance = principal
    rows: List[InstallmentRow] = []
    for i in range(1, n + 1):
        interest = balance * rate
        balance -= amortization
        if i == n:
            balance = 0.0
        rows.append(InstallmentRow(i, amortization, interest, amortization + interest, max(0.0, balance)))
    return rows


def compute(params: LoanParameters) -> AmortizationResult:
    """Build the full schedule and totals for ``params``."""
    _validate(params)
    system = AmortizationSystem(params.system)
    try:
        if system == AmortizationSystem.PRICE:
            rows = _price_schedule(params.principal, params.monthly_rate, params.term_months)
        else:
            rows = _sac_schedule(params.principal, params.monthly_rate, params.term_months)
    except OverflowError as exc:
        raise InvalidParameterError("monthly_rate", "too large to compound over this term") from exc

    total_interest = sum(r.interest for r in rows)
    total_paid = sum(r.payment for r in rows)
    logger.debug(
        "amortization system=%s principal=%.2f n=%d rate=%.4f -> installment=%.2f total=%.2f",
        system.value, params.principal, params.term_months, params.monthly_rate,
        rows[0].payment, total_paid,
    )
    return AmortizationResult(
        installment_value=rows[0].payment,
        total_interest=total_interest,
        total_paid=total_paid,
        schedule=tuple(rows),
    )


def effective_annual_rate(monthly_rate: float) -> float:
    """Annual cost equivalent to a monthly rate, ``(1+r)^12 - 1``."""
    return monthly_to_annual(monthly_rate)


def schedule_frame(result: AmortizationResult) -> pd.DataFrame:
    """Return the schedule as a DataFrame indexed by installment number."""
    df = pd.DataFrame(
        [
            {
                "installment": r.index,
                "amortization": r.amortization,
                "interest": r.interest,
                "payment": r.payment,
                "balance": r.remaining_balance,
            }
            for r in result.schedule
        ]
    )
    return df.set_index("installment")


__all__ = ["compute", "price_installment", "effective_annual_rate", "schedule_frame"]
