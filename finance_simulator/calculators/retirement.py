"""Retirement accumulation projection.

Current savings compound monthly at the rate equivalent to
``annual_return_rate`` until retirement, and every monthly contribution is
compounded for its own remaining number of months (the first one for the whole
horizon).  Contributions are therefore an annuity-due, made at the start of
each month (``annuity_future_value(..., due=True)``); the portfolio projection
deposits at the end of the month instead and the two are kept apart.

The sustainable income is a flat 0.4 % of the final capital per
month.  That withdrawal rate is a fixed planning assumption and is not tied
to the return rate.

Example
-------

>>> res = compute(RetirementParameters(30, 65, 10000, 50000, 1000, 0.0))
>>> res.months_to_retirement, res.projected_final_value
(420, 470000.0)
"""

from __future__ import annotations

import logging
from typing import List

from .exceptions import InvalidParameterError, require
from .models import RetirementParameters, RetirementResult
from .rates import annual_to_monthly, annuity_future_value, future_value

logger = logging.getLogger(__name__)

SAFE_WITHDRAWAL_RATE = 0.004  # per month


def _validate(params: RetirementParameters) -> None:
    require(params.current_age >= 18, "current_age", "must be at least 18")
    require(
        params.retirement_age > params.current_age,
        "retirement_age",
        "must be greater than the current age",
    )
    require(params.desired_monthly_income >= 0, "desired_monthly_income", "cannot be negative")
    require(params.current_savings >= 0, "current_savings", "cannot be negative")
    require(params.monthly_contribution >= 0, "monthly_contribution", "cannot be negative")
    require(params.annual_return_rate >= 0, "annual_return_rate", "cannot be negative")


def compute(params: RetirementParameters) -> RetirementResult:
    _validate(params)
    months = (params.retirement_age - params.current_age) * 12
    monthly = annual_to_monthly(params.annual_return_rate)

    try:
        projected = future_value(params.current_savings, monthly, months)
        projected += annuity_future_value(params.monthly_contribution, monthly, months, due=True)
    except OverflowError as exc:
        raise InvalidParameterError("annual_return_rate", "too large to compound until retirement") from exc

    contributed = params.current_savings + params.monthly_contribution * months
    income = projected * SAFE_WITHDRAWAL_RATE
    logger.debug("retirement months=%d monthly=%.5f -> projected=%.2f", months, monthly, projected)
    return RetirementResult(
        months_to_retirement=months,
        projected_final_value=projected,
        estimated_monthly_income=income,
        total_contributed=contributed,
        total_return=projected - contributed,
        income_gap=params.desired_monthly_income - income,
        required_capital=params.desired_monthly_income / SAFE_WITHDRAWAL_RATE,
    )


def accumulation_series(params: RetirementParameters) -> List[dict]:
    """Year-by-year balance and amount contributed, for charting.

    Uses the same per-deposit compounding as :func:`compute`, so the last
    point equals ``projected_final_value``.
    """
    _validate(params)
    monthly = annual_to_monthly(params.annual_return_rate)
    rows = [{"age": params.current_age, "balance": params.current_savings, "contributed": params.current_savings}]
    for years in range(1, params.retirement_age - params.current_age + 1):
        m = years * 12
        balance = future_value(params.current_savings, monthly, m)
        balance += annuity_future_value(params.monthly_contribution, monthly, m, due=True)
        rows.append({
            "age": params.current_age + years,
            "balance": balance,
            "contributed": params.current_savings + params.monthly_contribution * m,
        })
    return rows


__all__ = ["compute", "accumulation_series", "SAFE_WITHDRAWAL_RATE"]
