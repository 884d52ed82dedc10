"""Helper package that exposes the financial simulators.

The `calculators` package contains small, focused modules that each implement
one simulator as a pure function of a parameter object:

* ``amortization`` – Price and SAC loan schedules.
* ``fixed_income`` – CDB/LCI/LCA/Treasury yield with regressive income tax.
* ``emergency_fund`` – reserve target, progress and months to reach it.
* ``portfolio`` – blended return and projection of a four-class allocation.
* ``retirement`` – accumulation until retirement and sustainable income.

Shared pieces live in ``models`` (parameter/result dataclasses), ``rates``
(compounding helpers), ``tables`` (reference data) and ``exceptions``.
"""

from . import amortization, fixed_income, emergency_fund, portfolio, retirement  # noqa: F401
from .exceptions import InvalidParameterError

__all__ = [
    "amortization",
    "fixed_income",
    "emergency_fund",
    "portfolio",
    "retirement",
    "InvalidParameterError",
]
