"""Multi-asset portfolio projection.

Allocation weights are percentages over four asset classes.  When they do not
add up to 100 they are rescaled proportionally, rounded half-up to whole
percentages, and any rounding residual is added to the largest class (first
in ``AssetClass`` order on ties) so the total is exactly 100.

The blended annual return is the weight-weighted average of the expected
returns; it is converted to its equivalent monthly rate and the portfolio is
projected with one contribution at the end of every month.

Example
-------

>>> w = normalize_weights({"fixed_income": 1, "equities": 1, "real_estate_funds": 1, "international": 0})
>>> w[AssetClass.FIXED_INCOME], w[AssetClass.EQUITIES], sum(w.values())
(34.0, 33.0, 100.0)
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional

from .exceptions import InvalidParameterError, require
from .models import AssetClass, PortfolioParameters, PortfolioResult
from .rates import annual_to_monthly, annuity_future_value, future_value
from .tables import load_tables

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _coerce(mapping: Mapping, field: str) -> Dict[AssetClass, float]:
    try:
        out = {AssetClass(k): float(v) for k, v in mapping.items()}
    except ValueError as exc:
        raise InvalidParameterError(field, str(exc)) from exc
    require(set(out) == set(AssetClass), field, "must give a value for every asset class")
    return {cls: out[cls] for cls in AssetClass}


def normalize_weights(weights: Mapping) -> Dict[AssetClass, float]:
    """Return weights that add up to exactly 100."""
    w = _coerce(weights, "allocation_weights")
    require(all(v >= 0 for v in w.values()), "allocation_weights", "cannot be negative")
    total = sum(w.values())
    require(total > 0, "allocation_weights", "must add up to more than zero")
    if total == 100:
        return w

    factor = 100.0 / total
    scaled = {cls: float(_round_half_up(v * factor)) for cls, v in w.items()}
    residual = 100 - sum(scaled.values())
    if residual:
        largest = max(AssetClass, key=lambda cls: scaled[cls])
        scaled[largest] += residual
    return scaled


def rebalance(weights: Mapping, changed: AssetClass, value: float) -> Dict[AssetClass, float]:
    """Apply a slider edit to one class and rescale the set back to 100."""
    updated = dict(_coerce(weights, "allocation_weights"))
    updated[AssetClass(changed)] = float(value)
    return normalize_weights(updated)


def default_allocation(tables: Optional[Dict[str, Dict]] = None):
    """Starting ``(weights, returns)`` for the simulator form."""
    cfg = (tables or load_tables())["portfolio"]
    return _coerce(cfg["weights"], "weights"), _coerce(cfg["returns"], "returns")


def weighted_return(weights: Mapping, returns: Mapping) -> float:
    w = _coerce(weights, "allocation_weights")
    r = _coerce(returns, "expected_annual_returns")
    return sum(w[cls] * r[cls] for cls in AssetClass) / 100.0


def _validate(params: PortfolioParameters) -> None:
    require(params.initial_value >= 0, "initial_value", "cannot be negative")
    require(params.monthly_contribution >= 0, "monthly_contribution", "cannot be negative")
    require(
        isinstance(params.horizon_years, int) and params.horizon_years >= 1,
        "horizon_years",
        "must be a whole number of at least one year",
    )
    returns = _coerce(params.expected_annual_returns, "expected_annual_returns")
    require(all(v >= 0 for v in returns.values()), "expected_annual_returns", "cannot be negative")


def compute(params: PortfolioParameters) -> PortfolioResult:
    _validate(params)
    weights = normalize_weights(params.allocation_weights)
    annual = weighted_return(weights, params.expected_annual_returns)
    monthly = annual_to_monthly(annual / 100.0)
    months = params.horizon_years * 12

    try:
        final_value = future_value(params.initial_value, monthly, months)
        final_value += annuity_future_value(params.monthly_contribution, monthly, months)
    except OverflowError as exc:
        raise InvalidParameterError("expected_annual_returns", "too large to compound over this horizon") from exc
    total_return = final_value - params.initial_value - params.monthly_contribution * months

    by_class = {cls: final_value * weights[cls] / 100.0 for cls in AssetClass}
    logger.debug("portfolio annual=%.2f%% months=%d -> final=%.2f", annual, months, final_value)
    return PortfolioResult(
        weighted_annual_return=annual,
        final_value=final_value,
        total_return=total_return,
        value_by_asset_class=by_class,
        weights=weights,
    )


__all__ = ["compute", "normalize_weights", "rebalance", "weighted_return", "default_allocation"]
