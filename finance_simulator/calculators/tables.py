"""Reference tables used by the simulators.

The defaults live in ``data/tax_tables.json``: the regressive income-tax
schedule for fixed income, the suggested rate for each loan type and
instrument, and the starting portfolio allocation.  Any function that reads a
table also accepts an already-parsed ``tables`` dict so tests and callers can
substitute their own figures.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

_DEFAULT_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "tax_tables.json"


@lru_cache(maxsize=None)
def _load_default() -> Dict[str, Dict]:
    with open(_DEFAULT_TABLE_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def load_tables(path: Optional[Path] = None) -> Dict[str, Dict]:
    """Load the reference tables from JSON.

    Parameters
    ----------
    path : Path, optional
        Alternative JSON file with the same schema.  The packaged file is used
        (and cached) when omitted.
    """
    if path is None:
        return _load_default()
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def loan_rate(loan_type: str, tables: Optional[Dict[str, Dict]] = None) -> float:
    """Suggested monthly rate (percent) for a loan type; personal is the fallback."""
    rates = (tables or load_tables())["loan_rates"]
    return float(rates.get(loan_type, rates["personal"]))


def instrument_rate(instrument: str, tables: Optional[Dict[str, Dict]] = None) -> float:
    """Suggested annual rate (percent) for a fixed-income instrument; CDB is the fallback."""
    rates = (tables or load_tables())["fixed_income_rates"]
    return float(rates.get(instrument, rates["cdb"]))


__all__ = ["load_tables", "loan_rate", "instrument_rate"]
