import streamlit as st

from finance_simulator.calculators import InvalidParameterError, portfolio
from finance_simulator.calculators.models import (
    AmortizationSystem,
    AssetClass,
    EmergencyFundParameters,
    FixedIncomeParameters,
    Instrument,
    LoanParameters,
    PortfolioParameters,
    RetirementParameters,
)
from finance_simulator.calculators.tables import instrument_rate, loan_rate

# Stable widget keys so callbacks can set values before the next render
WIDGET_KEYS = {
    # Loan
    "loan_type": "in_loan_type",
    "loan_principal": "in_loan_principal",
    "loan_term": "in_loan_term",
    "loan_rate": "in_loan_rate",
    "loan_system": "in_loan_system",

    # Fixed income
    "fi_instrument": "in_fi_instrument",
    "fi_principal": "in_fi_principal",
    "fi_term": "in_fi_term",
    "fi_rate": "in_fi_rate",

    # Emergency fund
    "ef_income": "in_ef_income",
    "ef_expenses": "in_ef_expenses",
    "ef_months": "in_ef_months",
    "ef_current": "in_ef_current",
    "ef_contrib": "in_ef_contrib",
    "ef_rate": "in_ef_rate",

    # Portfolio
    "pf_initial": "in_pf_initial",
    "pf_contrib": "in_pf_contrib",
    "pf_years": "in_pf_years",
    "pf_weight": "in_pf_weight_{}",
    "pf_return": "in_pf_return_{}",

    # Retirement
    "rt_current_age": "in_rt_current_age",
    "rt_retire_age": "in_rt_retire_age",
    "rt_income": "in_rt_income",
    "rt_savings": "in_rt_savings",
    "rt_contrib": "in_rt_contrib",
    "rt_rate": "in_rt_rate_pct",
}

LOAN_TYPE_LABELS = {
    "personal": "Personal loan",
    "vehicle": "Vehicle financing",
    "real_estate": "Real-estate financing",
}

INSTRUMENT_LABELS = {
    Instrument.CDB: "CDB",
    Instrument.LCI: "LCI",
    Instrument.LCA: "LCA",
    Instrument.TREASURY: "Treasury (Tesouro Direto)",
}

ASSET_CLASS_LABELS = {
    AssetClass.FIXED_INCOME: "Fixed income",
    AssetClass.EQUITIES: "Equities",
    AssetClass.REAL_ESTATE_FUNDS: "Real-estate funds",
    AssetClass.INTERNATIONAL: "International",
}


def _on_loan_type_change():
    # suggested rate follows the product, like the bank's own table
    kind = st.session_state[WIDGET_KEYS["loan_type"]]
    st.session_state[WIDGET_KEYS["loan_rate"]] = loan_rate(kind)


def _on_instrument_change():
    inst = st.session_state[WIDGET_KEYS["fi_instrument"]]
    st.session_state[WIDGET_KEYS["fi_rate"]] = instrument_rate(Instrument(inst).value)


def loan_form() -> LoanParameters:
    kind = st.selectbox(
        "Loan type", list(LOAN_TYPE_LABELS), format_func=LOAN_TYPE_LABELS.get,
        key=WIDGET_KEYS["loan_type"], on_change=_on_loan_type_change,
    )
    principal = st.number_input(
        "Amount borrowed", min_value=1000.0, max_value=10_000_000.0, step=1000.0,
        value=50000.0, key=WIDGET_KEYS["loan_principal"],
    )
    term = st.slider(
        "Term (months)", min_value=1, max_value=420,
        value=36, key=WIDGET_KEYS["loan_term"],
    )
    st.session_state.setdefault(WIDGET_KEYS["loan_rate"], loan_rate(kind))
    rate_pct = st.number_input(
        "Interest rate (% per month)", min_value=0.0, max_value=20.0, step=0.1,
        key=WIDGET_KEYS["loan_rate"],
    )
    system = st.radio(
        "Amortization system", [s.value for s in AmortizationSystem],
        format_func=lambda s: {"price": "Price (fixed installments)", "sac": "SAC (constant amortization)"}[s],
        horizontal=True, key=WIDGET_KEYS["loan_system"],
        help="Price keeps the installment fixed; SAC repays the same principal every month so installments fall.",
    )
    return LoanParameters(
        principal=float(principal),
        term_months=int(term),
        monthly_rate=float(rate_pct) / 100.0,
        system=AmortizationSystem(system),
    )


def fixed_income_form() -> FixedIncomeParameters:
    instrument = st.selectbox(
        "Instrument", [i.value for i in Instrument],
        format_func=lambda v: INSTRUMENT_LABELS[Instrument(v)],
        key=WIDGET_KEYS["fi_instrument"], on_change=_on_instrument_change,
    )
    principal = st.number_input(
        "Amount invested", min_value=100.0, max_value=10_000_000.0, step=500.0,
        value=5000.0, key=WIDGET_KEYS["fi_principal"],
    )
    term = st.slider(
        "Term (months)", min_value=1, max_value=120,
        value=24, key=WIDGET_KEYS["fi_term"],
    )
    st.session_state.setdefault(WIDGET_KEYS["fi_rate"], instrument_rate(instrument))
    rate = st.number_input(
        "Annual rate (%)", min_value=0.0, max_value=50.0, step=0.1,
        key=WIDGET_KEYS["fi_rate"],
    )
    return FixedIncomeParameters(
        instrument=Instrument(instrument),
        principal=float(principal),
        term_months=int(term),
        annual_rate=float(rate),
    )


def emergency_fund_form() -> EmergencyFundParameters:
    c1, c2 = st.columns(2)
    income = c1.number_input(
        "Monthly income", min_value=1.0, step=500.0,
        value=10000.0, key=WIDGET_KEYS["ef_income"],
    )
    expenses = c2.number_input(
        "Monthly expenses", min_value=1.0, step=500.0,
        value=7000.0, key=WIDGET_KEYS["ef_expenses"],
    )
    months = st.slider(
        "Months of expenses to cover", min_value=3, max_value=12,
        value=6, key=WIDGET_KEYS["ef_months"],
        help="Between 3 and 12 months is the usual recommendation.",
    )
    current = st.number_input(
        "Current reserve", min_value=0.0, step=500.0,
        value=15000.0, key=WIDGET_KEYS["ef_current"],
    )
    c3, c4 = st.columns(2)
    contrib = c3.number_input(
        "Monthly contribution", min_value=0.0, step=100.0,
        value=1000.0, key=WIDGET_KEYS["ef_contrib"],
    )
    rate = c4.number_input(
        "Return (% per month)", min_value=0.0, max_value=5.0, step=0.1,
        value=0.8, key=WIDGET_KEYS["ef_rate"],
    )
    return EmergencyFundParameters(
        monthly_income=float(income),
        monthly_expenses=float(expenses),
        target_months=int(months),
        current_amount=float(current),
        monthly_contribution=float(contrib),
        monthly_return_rate=float(rate),
    )


def _weight_key(cls: AssetClass) -> str:
    return WIDGET_KEYS["pf_weight"].format(cls.value)


def _on_weight_change(changed: AssetClass):
    current = {cls: st.session_state["pf_weights"][cls.value] for cls in AssetClass}
    try:
        rebalanced = portfolio.rebalance(current, changed, st.session_state[_weight_key(changed)])
    except InvalidParameterError:
        # every class at zero; put the slider back
        st.session_state[_weight_key(changed)] = int(current[changed])
        return
    st.session_state["pf_weights"] = {cls.value: v for cls, v in rebalanced.items()}
    for cls, v in rebalanced.items():
        st.session_state[_weight_key(cls)] = int(v)


def portfolio_form() -> PortfolioParameters:
    default_weights, default_returns = portfolio.default_allocation()
    weights = st.session_state.setdefault(
        "pf_weights", {cls.value: v for cls, v in default_weights.items()}
    )
    for cls in AssetClass:
        st.session_state.setdefault(_weight_key(cls), int(weights[cls.value]))

    c1, c2, c3 = st.columns(3)
    initial = c1.number_input(
        "Initial value", min_value=0.0, step=1000.0,
        value=100000.0, key=WIDGET_KEYS["pf_initial"],
    )
    contrib = c2.number_input(
        "Monthly contribution", min_value=0.0, step=100.0,
        value=1000.0, key=WIDGET_KEYS["pf_contrib"],
    )
    years = c3.number_input(
        "Horizon (years)", min_value=1, max_value=50,
        value=10, key=WIDGET_KEYS["pf_years"],
    )

    st.markdown("**Allocation (%)**")
    for cls in AssetClass:
        st.slider(
            ASSET_CLASS_LABELS[cls], min_value=0, max_value=100,
            key=_weight_key(cls), on_change=_on_weight_change, args=(cls,),
        )
    st.caption("Moving one class rescales all four so the allocation stays at 100%.")
    weights = st.session_state["pf_weights"]

    st.markdown("**Expected return (% per year)**")
    returns = {}
    cols = st.columns(len(AssetClass))
    for col, cls in zip(cols, AssetClass):
        returns[cls] = col.number_input(
            ASSET_CLASS_LABELS[cls], min_value=0.0, max_value=50.0, step=0.5,
            value=default_returns[cls],
            key=WIDGET_KEYS["pf_return"].format(cls.value),
        )

    return PortfolioParameters(
        initial_value=float(initial),
        monthly_contribution=float(contrib),
        horizon_years=int(years),
        allocation_weights={AssetClass(k): float(v) for k, v in weights.items()},
        expected_annual_returns={cls: float(v) for cls, v in returns.items()},
    )


def retirement_form() -> RetirementParameters:
    c1, c2 = st.columns(2)
    current_age = c1.number_input(
        "Current age", min_value=18, max_value=80,
        value=30, key=WIDGET_KEYS["rt_current_age"],
    )
    retire_age = c2.number_input(
        "Retirement age", min_value=19, max_value=90,
        value=65, key=WIDGET_KEYS["rt_retire_age"],
    )
    income = st.number_input(
        "Desired monthly income", min_value=0.0, step=500.0,
        value=10000.0, key=WIDGET_KEYS["rt_income"],
    )
    c3, c4 = st.columns(2)
    savings = c3.number_input(
        "Current savings", min_value=0.0, step=1000.0,
        value=50000.0, key=WIDGET_KEYS["rt_savings"],
    )
    contrib = c4.number_input(
        "Monthly contribution", min_value=0.0, step=100.0,
        value=1000.0, key=WIDGET_KEYS["rt_contrib"],
    )
    rate_pct = st.slider(
        "Annual return (%)", min_value=0.0, max_value=20.0, step=0.5,
        value=6.0, key=WIDGET_KEYS["rt_rate"],
        help="Real return after inflation gives a more conservative picture.",
    )
    return RetirementParameters(
        current_age=int(current_age),
        retirement_age=int(retire_age),
        desired_monthly_income=float(income),
        current_savings=float(savings),
        monthly_contribution=float(contrib),
        annual_return_rate=float(rate_pct) / 100.0,
    )
