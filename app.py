# app.py
import logging

import pandas as pd
import streamlit as st

from finance_simulator.calculators import (
    InvalidParameterError,
    amortization,
    emergency_fund,
    fixed_income,
    portfolio,
    retirement,
)
from finance_simulator.components import forms, insights
from finance_simulator.components.charts import (
    accumulation_chart,
    allocation_donut,
    composition_donut,
    fixed_income_chart,
    progress_gauge,
    schedule_chart,
)
from finance_simulator.report import build_pdf

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


# ---------- Page config ----------
st.set_page_config(
    page_title="Financial Simulators",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)

st.markdown(
    """
<style>
.block-container {
    padding: 1.5rem 2rem;
    max-width: 1400px;
    margin: auto;
}
div[data-testid="stMetric"] {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 1rem;
    box-shadow: 0 2px 8px rgba(0,0,0,0.05);
    border: 1px solid #E6ECE9;
}
div.stPlotlyChart {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 0.75rem;
    border: 1px solid #E6ECE9;
}
button[kind="primary"] {
    background-color: #1A2A3A;
    color: #FFFFFF;
    border-radius: 8px;
    border: none;
}
h1, h2, h3, h4 {
    color: #1A2A3A;
    font-weight: 600;
}
@media (max-width: 600px) {
    .block-container {
        padding: 1rem;
    }
}
</style>
""",
    unsafe_allow_html=True,
)

# ---------- Session boot ----------
# one slot per simulator; a result only changes when its button is pressed
st.session_state.setdefault("results", {})


def money(value: float) -> str:
    return f"R$ {value:,.2f}"


def run_button(name: str, params) -> None:
    """Compute on explicit request and keep ``(params, result)`` for display."""
    if st.button("Calculate", type="primary", key=f"run_{name}"):
        calculator = {
            "loan": amortization.compute,
            "fixed_income": fixed_income.compute,
            "emergency_fund": emergency_fund.compute,
            "portfolio": portfolio.compute,
            "retirement": retirement.compute,
        }[name]
        try:
            st.session_state["results"][name] = (params, calculator(params))
        except InvalidParameterError as exc:
            logger.warning("rejected %s inputs: %s", name, exc)
            st.session_state["results"].pop(name, None)
            st.error(str(exc))


def show_tips(tips) -> None:
    for tip in tips:
        st.markdown(f"• {tip}")


def pdf_button(name: str, title: str, params, result, table=None) -> None:
    st.download_button(
        "⬇️ PDF report",
        data=build_pdf(title, params, result, table),
        file_name=f"{name}.pdf",
        mime="application/pdf",
        key=f"pdf_{name}",
    )


# ---------- Header ----------
st.title("Financial Simulators")
st.caption("Plan ahead: loans, fixed income, emergency reserve, portfolio and retirement.")

tab_loan, tab_fi, tab_ef, tab_pf, tab_rt = st.tabs(
    ["Loan", "Fixed income", "Emergency fund", "Portfolio", "Retirement"]
)

# ====== LOAN ======
with tab_loan:
    left, right = st.columns([1, 2])
    with left:
        loan_params = forms.loan_form()
        st.caption(
            f"Equivalent annual rate: {amortization.effective_annual_rate(loan_params.monthly_rate) * 100:.2f}% "
            "(excludes fees and insurance)."
        )
        run_button("loan", loan_params)
    with right:
        stored = st.session_state["results"].get("loan")
        if stored is None:
            st.info("Fill in the loan details and press Calculate.")
        else:
            params, res = stored
            label = "Installment" if params.system == "price" else "First installment"
            c1, c2, c3 = st.columns(3)
            c1.metric(label, money(res.installment_value))
            c2.metric("Total interest", money(res.total_interest), f"{res.total_interest / params.principal * 100:.1f}%", delta_color="inverse")
            c3.metric("Total paid", money(res.total_paid))

            st.plotly_chart(schedule_chart(res), use_container_width=True)
            st.plotly_chart(composition_donut(params.principal, res.total_interest), use_container_width=True)

            df = amortization.schedule_frame(res)
            st.markdown("### Schedule")
            st.dataframe(df.style.format("{:,.2f}"), use_container_width=True, height=350)
            d1, d2 = st.columns(2)
            with d1:
                st.download_button(
                    "⬇️ CSV (schedule)",
                    data=df.to_csv().encode("utf-8"),
                    file_name="loan_schedule.csv",
                    mime="text/csv",
                )
            with d2:
                pdf_button("loan", "Loan simulation", params, res, df)
            show_tips(insights.loan_insights(res, params.principal))

# ====== FIXED INCOME ======
with tab_fi:
    left, right = st.columns([1, 2])
    with left:
        fi_params = forms.fixed_income_form()
        run_button("fixed_income", fi_params)
    with right:
        stored = st.session_state["results"].get("fixed_income")
        if stored is None:
            st.info("Choose an instrument and press Calculate.")
        else:
            params, res = stored
            c1, c2, c3 = st.columns(3)
            c1.metric("Final value (gross)", money(res.final_value))
            c2.metric("Income tax", money(res.tax_amount), f"{res.tax_rate * 100:.1f}%", delta_color="off")
            c3.metric("Net return", money(res.net_return))
            st.plotly_chart(fixed_income_chart(res), use_container_width=True)
            pdf_button("fixed_income", "Fixed-income simulation", params, res)
            show_tips(insights.fixed_income_insights(res))

# ====== EMERGENCY FUND ======
with tab_ef:
    left, right = st.columns([1, 2])
    with left:
        ef_params = forms.emergency_fund_form()
        run_button("emergency_fund", ef_params)
    with right:
        stored = st.session_state["results"].get("emergency_fund")
        if stored is None:
            st.info("Enter your income and expenses and press Calculate.")
        else:
            params, res = stored
            c1, c2, c3 = st.columns(3)
            c1.metric("Target reserve", money(res.target_amount))
            c2.metric("Still missing", money(res.shortfall))
            if res.exceeds_horizon:
                c3.metric("Time to target", f"> {emergency_fund.MAX_MONTHS // 12} years")
            else:
                c3.metric("Time to target", f"{res.months_to_target} months")
            st.plotly_chart(progress_gauge(res.progress_percent), use_container_width=True)
            pdf_button("emergency_fund", "Emergency fund simulation", params, res)
            show_tips(insights.emergency_fund_insights(res))

# ====== PORTFOLIO ======
with tab_pf:
    pf_params = forms.portfolio_form()
    run_button("portfolio", pf_params)
    stored = st.session_state["results"].get("portfolio")
    if stored is None:
        st.info("Set the allocation and expected returns and press Calculate.")
    else:
        params, res = stored
        c1, c2, c3 = st.columns(3)
        c1.metric("Final value", money(res.final_value))
        c2.metric("Total return", money(res.total_return))
        c3.metric("Blended return", f"{res.weighted_annual_return:.2f}% a.a.")
        st.plotly_chart(
            allocation_donut(res.value_by_asset_class, forms.ASSET_CLASS_LABELS),
            use_container_width=True,
        )
        breakdown = pd.DataFrame(
            {
                "weight (%)": [res.weights[c] for c in res.value_by_asset_class],
                "value": list(res.value_by_asset_class.values()),
            },
            index=[forms.ASSET_CLASS_LABELS[c] for c in res.value_by_asset_class],
        )
        st.dataframe(breakdown, use_container_width=True)
        st.caption("Assumes a constant allocation over the whole horizon.")
        pdf_button("portfolio", "Portfolio simulation", params, res, breakdown)
        show_tips(insights.portfolio_insights(res))

# ====== RETIREMENT ======
with tab_rt:
    left, right = st.columns([1, 2])
    with left:
        rt_params = forms.retirement_form()
        run_button("retirement", rt_params)
    with right:
        stored = st.session_state["results"].get("retirement")
        if stored is None:
            st.info("Enter your ages and savings and press Calculate.")
        else:
            params, res = stored
            years = params.retirement_age - params.current_age
            st.caption(f"Horizon: {years} years ({res.months_to_retirement} months)")
            c1, c2 = st.columns(2)
            c1.metric("Projected capital", money(res.projected_final_value))
            c2.metric("Estimated monthly income", money(res.estimated_monthly_income))
            c3, c4 = st.columns(2)
            c3.metric("Total contributed", money(res.total_contributed))
            c4.metric("Total return", money(res.total_return))

            series = retirement.accumulation_series(params)
            st.plotly_chart(
                accumulation_chart(
                    [r["age"] for r in series],
                    [r["balance"] for r in series],
                    [r["contributed"] for r in series],
                ),
                use_container_width=True,
            )
            pdf_button("retirement", "Retirement simulation", params, res, pd.DataFrame(series).set_index("age"))
            show_tips(insights.retirement_insights(res))
