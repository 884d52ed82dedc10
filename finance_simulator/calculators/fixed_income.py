"""Fixed-income yield with regressive income-tax withholding.

The annual rate (percent) is turned into its calendar-equivalent monthly rate
and compounded over the holding term.  CDBs and Treasury bonds are taxed on
the gross return at a rate that falls with the holding period; LCIs and LCAs
are exempt for individuals.

Example
-------

>>> income_tax_rate(Instrument.CDB, 6)
0.225
>>> income_tax_rate(Instrument.LCI, 3)
0.0
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .exceptions import InvalidParameterError, require
from .models import FixedIncomeParameters, FixedIncomeResult, Instrument
from .rates import annual_to_monthly, future_value
from .tables import load_tables

logger = logging.getLogger(__name__)


def income_tax_rate(
    instrument: Instrument,
    term_months: int,
    tables: Optional[Dict[str, Dict]] = None,
) -> float:
    """Withholding rate for ``instrument`` held for ``term_months``."""
    table = (tables or load_tables())["income_tax"]
    if Instrument(instrument).value not in table["taxable_instruments"]:
        return 0.0
    for bracket in table["brackets"]:
        limit = bracket["max_months"]
        if limit is None or term_months <= limit:
            return float(bracket["rate"])
    return 0.0


def _validate(params: FixedIncomeParameters) -> None:
    require(params.principal > 0, "principal", "must be greater than zero")
    require(
        isinstance(params.term_months, int) and params.term_months >= 1,
        "term_months",
        "must be a whole number of at least one month",
    )
    require(params.annual_rate >= 0, "annual_rate", "cannot be negative")
    require(
        params.instrument in [i.value for i in Instrument],
        "instrument",
        f"unknown instrument {params.instrument!r}",
    )


def compute(
    params: FixedIncomeParameters,
    tables: Optional[Dict[str, Dict]] = None,
) -> FixedIncomeResult:
    _validate(params)
    monthly = annual_to_monthly(params.annual_rate / 100.0)
    try:
        final_value = future_value(params.principal, monthly, params.term_months)
    except OverflowError as exc:
        raise InvalidParameterError("annual_rate", "too large to compound over this term") from exc
    gross = final_value - params.principal
    tax_rate = income_tax_rate(params.instrument, params.term_months, tables)
    tax = gross * tax_rate
    logger.debug(
        "fixed income %s principal=%.2f n=%d annual=%.2f%% -> gross=%.2f tax=%.3f",
        Instrument(params.instrument).value, params.principal, params.term_months,
        params.annual_rate, gross, tax_rate,
    )
    return FixedIncomeResult(
        principal=params.principal,
        final_value=final_value,
        gross_return=gross,
        tax_rate=tax_rate,
        tax_amount=tax,
        net_return=gross - tax,
    )


__all__ = ["compute", "income_tax_rate"]
