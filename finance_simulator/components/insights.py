"""Rule-based tips shown under each simulator's results."""

from typing import List

from finance_simulator.calculators.emergency_fund import MAX_MONTHS
from finance_simulator.calculators.models import (
    AmortizationResult,
    EmergencyFundResult,
    FixedIncomeResult,
    PortfolioResult,
    RetirementResult,
)


def loan_insights(result: AmortizationResult, principal: float) -> List[str]:
    tips = []
    share = result.total_interest / principal if principal > 0 else 0.0
    if share >= 1.0:
        tips.append(
            f"Interest adds up to {share * 100:.0f}% of the amount borrowed. "
            "A shorter term or a lower rate would cut the total cost sharply."
        )
    elif share >= 0.3:
        tips.append(f"Interest adds {share * 100:.0f}% on top of the amount borrowed; compare offers from other lenders.")
    else:
        tips.append(f"Interest adds {share * 100:.0f}% on top of the amount borrowed.")
    tips.append("Prepaying principal early reduces the interest charged on every remaining installment.")
    return tips


def fixed_income_insights(result: FixedIncomeResult) -> List[str]:
    if result.tax_rate == 0:
        return ["This instrument is exempt from income tax for individuals, so the gross return is what you keep."]
    tips = [f"Income tax withholds {result.tax_rate * 100:.1f}% of the gross return."]
    if result.tax_rate > 0.15:
        tips.append("Holding for more than 24 months lowers the withholding rate to 15%.")
    return tips


def emergency_fund_insights(result: EmergencyFundResult) -> List[str]:
    if result.shortfall == 0:
        return [f"Your reserve is complete and covers {result.coverage_months:.1f} months of expenses."]
    tips = []
    if result.exceeds_horizon:
        tips.append(
            f"At this pace the reserve takes more than {MAX_MONTHS // 12} years to complete. "
            "Raise the monthly contribution or cut expenses."
        )
    else:
        tips.append(f"You reach the target in {result.months_to_target} months.")
    if result.monthly_surplus <= 0:
        tips.append("Expenses already consume all of your income, so there is nothing left to save each month.")
    tips.append("Keep the reserve in liquid, low-risk investments with daily redemption.")
    return tips


def portfolio_insights(result: PortfolioResult) -> List[str]:
    tips = [f"The blended expected return is {result.weighted_annual_return:.2f}% per year."]
    top_weight = max(result.weights.values()) if result.weights else 0.0
    if top_weight >= 70:
        tips.append("More than 70% sits in a single asset class; spreading it out lowers the risk.")
    tips.append("Rebalance periodically so the allocation stays close to the target weights.")
    return tips


def retirement_insights(result: RetirementResult) -> List[str]:
    if result.income_gap > 0:
        return [
            f"The projected income falls short of your goal by {result.income_gap:,.2f} per month.",
            f"You would need about {result.required_capital:,.0f} saved to draw the desired income at 0.4% per month.",
        ]
    return ["The projected capital supports your desired monthly income."]
