# components/charts.py
# Plotly chart helpers used by the simulator tabs.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Dict, Mapping, Sequence
import plotly.graph_objects as go

import plotly.io as pio
pio.templates.default = "plotly_white"

from finance_simulator.calculators.models import AmortizationResult, FixedIncomeResult

_MARGIN = dict(l=10, r=10, t=40, b=10)
_LEGEND = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)


# ---------- Loan schedule ----------
def schedule_chart(result: AmortizationResult, title: str = "Installments") -> go.Figure:
    """Stacked amortization/interest bars with the outstanding balance on a second axis."""
    idx = [r.index for r in result.schedule]
    fig = go.Figure()
    fig.add_bar(x=idx, y=[r.amortization for r in result.schedule], name="Amortization")
    fig.add_bar(x=idx, y=[r.interest for r in result.schedule], name="Interest")
    fig.add_trace(go.Scatter(
        x=idx, y=[r.remaining_balance for r in result.schedule], mode="lines",
        name="Balance", yaxis="y2",
        hovertemplate="Month %{x}<br>%{y:,.2f}<extra></extra>"
    ))
    fig.update_layout(
        barmode="stack",
        title=title,
        template="plotly_white",
        height=380,
        margin=_MARGIN,
        legend=_LEGEND,
        xaxis_title="Installment",
        yaxis_title="Payment",
        yaxis2=dict(title="Balance", overlaying="y", side="right", showgrid=False),
    )
    return fig


def composition_donut(principal: float, interest: float, title: str = "Where the money goes") -> go.Figure:
    fig = go.Figure(go.Pie(
        labels=["Principal", "Interest"],
        values=[max(0.0, principal), max(0.0, interest)],
        hole=0.55,
        sort=False,
    ))
    fig.update_layout(title=title, template="plotly_white", height=300, margin=_MARGIN)
    return fig


# ---------- Fixed income ----------
def fixed_income_chart(result: FixedIncomeResult, title: str = "Return breakdown") -> go.Figure:
    labels = ["Invested", "Gross return", "Income tax", "Net return"]
    values = [result.principal, result.gross_return, result.tax_amount, result.net_return]
    fig = go.Figure(go.Bar(
        x=labels, y=values,
        marker_color=["#94a3b8", "#3b82f6", "#ef4444", "#22c55e"],
        hovertemplate="%{x}<br>%{y:,.2f}<extra></extra>",
    ))
    fig.update_layout(title=title, template="plotly_white", height=320, margin=_MARGIN)
    return fig


# ---------- Emergency fund progress ----------
def progress_gauge(progress_percent: float) -> go.Figure:
    pct = max(0.0, min(100.0, float(progress_percent)))  # clamp 0–100
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=round(pct, 1),
        number={"suffix": "%"},
        gauge={
            "axis": {"range": [0, 100]},
            "bar": {"thickness": 0.35},
            "steps": [
                {"range": [0, 50],  "color": "#ef4444"},  # red-500
                {"range": [50, 90], "color": "#f59e0b"},  # amber-500
                {"range": [90, 100],"color": "#22c55e"},  # green-500
            ],
        }
    ))
    fig.update_layout(template="plotly_white", height=220, margin=dict(l=10, r=10, t=10, b=10))
    return fig


# ---------- Portfolio ----------
def allocation_donut(values: Mapping, labels: Dict = None, title: str = "Value by asset class") -> go.Figure:
    """Donut of the projected value per asset class.  ``labels`` maps keys to display names."""
    labels = labels or {}
    keys = list(values)
    fig = go.Figure(go.Pie(
        labels=[labels.get(k, str(getattr(k, "value", k)).replace("_", " ").title()) for k in keys],
        values=[values[k] for k in keys],
        hole=0.5,
        sort=False,
        hovertemplate="%{label}<br>%{value:,.2f}<extra></extra>",
    ))
    fig.update_layout(title=title, template="plotly_white", height=340, margin=_MARGIN, legend=_LEGEND)
    return fig


# ---------- Retirement ----------
def accumulation_chart(ages: Sequence[int],
                       balance: Sequence[float],
                       contributed: Sequence[float],
                       title: str = "Accumulation until retirement") -> go.Figure:
    """Projected balance against the amount actually deposited."""
    n = len(ages)
    balance = _fit(balance, n)
    contributed = _fit(contributed, n)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=ages, y=contributed, mode="lines", name="Contributed",
        fill="tozeroy",
        hovertemplate="Age %{x}<br>%{y:,.0f}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=ages, y=balance, mode="lines", name="Projected balance",
        fill="tonexty",
        hovertemplate="Age %{x}<br>%{y:,.0f}<extra></extra>"
    ))
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=380,
        margin=_MARGIN,
        legend=_LEGEND,
        xaxis_title="Age",
        yaxis_title="Value (nominal)"
    )
    return fig


def _fit(series, n):
    arr = list(series)
    if len(arr) < n: arr += [0.0] * (n - len(arr))
    return arr[:n]
