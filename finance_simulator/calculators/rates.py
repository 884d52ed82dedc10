# calculators/rates.py
"""Rate conversion and compounding helpers.

Two contribution-timing conventions are in use across the simulators and are
kept deliberately separate:

* the portfolio projection deposits at the *end* of each month, so the first
  deposit compounds ``periods - 1`` times (``due=False``);
* the retirement projection counts the first deposit as compounding for the
  full ``periods`` (``due=True``).

The emergency-fund simulator does its own month-by-month loop instead.

>>> round(annual_to_monthly(0.12), 6)
0.009489
>>> annuity_future_value(100.0, 0.0, 12)
1200.0
"""

from __future__ import annotations

import math


def annual_to_monthly(annual_rate: float) -> float:
    """Return the effective monthly rate equivalent to ``annual_rate``.

    Both rates are decimal fractions.  This is calendar compounding,
    ``(1 + annual) ** (1/12) - 1``, not ``annual / 12``.
    """
    return math.pow(1.0 + annual_rate, 1.0 / 12.0) - 1.0


def monthly_to_annual(monthly_rate: float) -> float:
    return math.pow(1.0 + monthly_rate, 12) - 1.0


def future_value(present: float, rate: float, periods: int) -> float:
    return present * math.pow(1.0 + rate, periods)


def annuity_future_value(payment: float, rate: float, periods: int, due: bool = False) -> float:
    """Accumulate one deposit of ``payment`` per period.

    Each deposit is compounded for its own remaining number of periods rather
    than through the closed-form annuity factor, so results match a
    month-by-month statement.
    """
    offset = 0 if due else 1
    total = 0.0
    for i in range(periods):
        total += payment * math.pow(1.0 + rate, periods - i - offset)
    return total


__all__ = ["annual_to_monthly", "monthly_to_annual", "future_value", "annuity_future_value"]
