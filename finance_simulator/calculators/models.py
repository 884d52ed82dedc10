"""Parameter and result structures shared by the calculators.

Every simulator takes one frozen parameter object and returns one frozen
result object.  Nothing here carries identity or state beyond a single call:
the UI keeps a parameter "draft" and the last result side by side and only
calls ``compute`` when the user presses the button.

Units
-----
* Currency values are raw floats in whatever unit the caller uses.
* ``LoanParameters.monthly_rate`` and ``RetirementParameters.annual_return_rate``
  are decimal fractions (``0.025`` = 2.5 %).
* ``FixedIncomeParameters.annual_rate``, ``EmergencyFundParameters.monthly_return_rate``
  and the portfolio weights/returns are percentages (``12.5`` = 12.5 %).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class AmortizationSystem(str, Enum):
    PRICE = "price"  # fixed installment
    SAC = "sac"  # constant amortization


class Instrument(str, Enum):
    CDB = "cdb"
    LCI = "lci"
    LCA = "lca"
    TREASURY = "treasury"


class AssetClass(str, Enum):
    FIXED_INCOME = "fixed_income"
    EQUITIES = "equities"
    REAL_ESTATE_FUNDS = "real_estate_funds"
    INTERNATIONAL = "international"


# ---------- Loans ----------
@dataclass(frozen=True)
class LoanParameters:
    principal: float
    term_months: int
    monthly_rate: float
    system: AmortizationSystem = AmortizationSystem.PRICE


@dataclass(frozen=True)
class InstallmentRow:
    index: int
    amortization: float
    interest: float
    payment: float
    remaining_balance: float


@dataclass(frozen=True)
class AmortizationResult:
    installment_value: float
    total_interest: float
    total_paid: float
    schedule: Tuple[InstallmentRow, ...]

    @property
    def interest_share(self) -> float:
        """Fraction of everything paid that went to interest."""
        return self.total_interest / self.total_paid if self.total_paid > 0 else 0.0

    @property
    def principal_share(self) -> float:
        return 1.0 - self.interest_share if self.total_paid > 0 else 0.0


# ---------- Fixed income ----------
@dataclass(frozen=True)
class FixedIncomeParameters:
    instrument: Instrument
    principal: float
    term_months: int
    annual_rate: float


@dataclass(frozen=True)
class FixedIncomeResult:
    principal: float
    final_value: float
    gross_return: float
    tax_rate: float
    tax_amount: float
    net_return: float

    @property
    def net_final_value(self) -> float:
        return self.principal + self.net_return


# ---------- Emergency fund ----------
@dataclass(frozen=True)
class EmergencyFundParameters:
    monthly_income: float
    monthly_expenses: float
    target_months: int = 6
    current_amount: float = 0.0
    monthly_contribution: float = 0.0
    monthly_return_rate: float = 0.0


@dataclass(frozen=True)
class EmergencyFundResult:
    target_amount: float
    progress_percent: float
    shortfall: float
    months_to_target: int
    exceeds_horizon: bool = False
    coverage_months: float = 0.0
    monthly_surplus: float = 0.0


# ---------- Portfolio ----------
@dataclass(frozen=True)
class PortfolioParameters:
    initial_value: float
    monthly_contribution: float
    horizon_years: int
    allocation_weights: Dict[AssetClass, float]
    expected_annual_returns: Dict[AssetClass, float]


@dataclass(frozen=True)
class PortfolioResult:
    weighted_annual_return: float
    final_value: float
    total_return: float
    value_by_asset_class: Dict[AssetClass, float]
    weights: Dict[AssetClass, float] = field(default_factory=dict)


# ---------- Retirement ----------
@dataclass(frozen=True)
class RetirementParameters:
    current_age: int
    retirement_age: int
    desired_monthly_income: float
    current_savings: float
    monthly_contribution: float
    annual_return_rate: float


@dataclass(frozen=True)
class RetirementResult:
    months_to_retirement: int
    projected_final_value: float
    estimated_monthly_income: float
    total_contributed: float
    total_return: float
    income_gap: float = 0.0
    required_capital: float = 0.0


__all__ = [
    "AmortizationSystem",
    "Instrument",
    "AssetClass",
    "LoanParameters",
    "InstallmentRow",
    "AmortizationResult",
    "FixedIncomeParameters",
    "FixedIncomeResult",
    "EmergencyFundParameters",
    "EmergencyFundResult",
    "PortfolioParameters",
    "PortfolioResult",
    "RetirementParameters",
    "RetirementResult",
]
