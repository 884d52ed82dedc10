"""Emergency reserve sizing and time-to-target.

The target is a plain multiple of monthly expenses.  Time to reach it is found
by stepping month by month: the balance earns the monthly return first and
the contribution is added afterwards.

The simulation stops after ``MAX_MONTHS``.  A reserve that is still short at
that point is reported with ``months_to_target == MAX_MONTHS`` and
``exceeds_horizon`` set, i.e. "more than 10 years".
"""

from __future__ import annotations

import logging

from .exceptions import require
from .models import EmergencyFundParameters, EmergencyFundResult

logger = logging.getLogger(__name__)

MAX_MONTHS = 120


def _validate(params: EmergencyFundParameters) -> None:
    require(params.monthly_expenses > 0, "monthly_expenses", "must be greater than zero")
    require(params.monthly_income > 0, "monthly_income", "must be greater than zero")
    require(
        isinstance(params.target_months, int) and params.target_months >= 1,
        "target_months",
        "must be a whole number of at least one month",
    )
    require(params.current_amount >= 0, "current_amount", "cannot be negative")
    require(params.monthly_contribution >= 0, "monthly_contribution", "cannot be negative")
    require(params.monthly_return_rate >= 0, "monthly_return_rate", "cannot be negative")


def months_to_reach(
    start: float,
    target: float,
    contribution: float,
    monthly_rate_pct: float,
    cap: int = MAX_MONTHS,
):
    """Return ``(months, reached)`` for the month-by-month accumulation."""
    balance = start
    months = 0
    rate = monthly_rate_pct / 100.0
    while balance < target:
        if months >= cap:
            return cap, False
        balance = balance * (1.0 + rate) + contribution
        months += 1
    return months, True


def compute(params: EmergencyFundParameters) -> EmergencyFundResult:
    _validate(params)
    target = params.monthly_expenses * params.target_months
    progress = max(0.0, min(100.0, params.current_amount / target * 100.0))
    shortfall = max(0.0, target - params.current_amount)

    if shortfall == 0:
        months, reached = 0, True
        progress = 100.0
    else:
        months, reached = months_to_reach(
            params.current_amount, target, params.monthly_contribution, params.monthly_return_rate
        )
        if not reached:
            logger.info("emergency fund target %.2f not reached within %d months", target, MAX_MONTHS)

    logger.debug("emergency fund target=%.2f progress=%.1f%% months=%d", target, progress, months)
    return EmergencyFundResult(
        target_amount=target,
        progress_percent=progress,
        shortfall=shortfall,
        months_to_target=months,
        exceeds_horizon=not reached,
        coverage_months=params.current_amount / params.monthly_expenses,
        monthly_surplus=params.monthly_income - params.monthly_expenses,
    )


__all__ = ["compute", "months_to_reach", "MAX_MONTHS"]
