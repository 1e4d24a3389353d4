# src/ui/charts.py
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.core.probability import ProfitabilityBreakdown
from src.ui import style


def _base_layout(fig: go.Figure, title: str) -> None:
    fig.update_layout(
        title=title,
        height=style.CHART_HEIGHT_PX,
        hovermode="x unified",
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=-0.3,
            xanchor="center",
            x=0.5,
        ),
        margin=dict(l=40, r=20, t=50, b=50),
    )


def build_performance_figure(df: pd.DataFrame) -> go.Figure:
    """
    Hashrate (left axis) and power draw (right axis) over simulated time.

    Expected df columns: time_s, hashrate_th, power_w.
    """
    if not {"time_s", "hashrate_th", "power_w"}.issubset(df.columns):
        raise ValueError(
            "DataFrame must contain 'time_s', 'hashrate_th' and 'power_w' columns"
        )

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["time_s"],
            y=df["hashrate_th"],
            mode="lines",
            name="Hashrate (TH/s)",
            line=dict(color=style.COLOR_HASHRATE, width=style.LINE_WIDTH_PRIMARY),
            yaxis="y",
            hovertemplate="t=%{x}s<br>Hashrate: %{y:.2f} TH/s<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["time_s"],
            y=df["power_w"],
            mode="lines",
            name="Power (W)",
            line=dict(color=style.COLOR_POWER, width=style.LINE_WIDTH_PRIMARY),
            yaxis="y2",
            hovertemplate="t=%{x}s<br>Power: %{y:,.0f} W<extra></extra>",
        )
    )
    _base_layout(fig, "Performance")
    fig.update_layout(
        xaxis=dict(title="Time (s)"),
        yaxis=dict(title="TH/s", side="left"),
        yaxis2=dict(title="W", overlaying="y", side="right"),
    )
    return fig


def build_profitability_figure(df: pd.DataFrame) -> go.Figure:
    """Hourly revenue and hourly profit over simulated time."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["time_s"],
            y=df["hourly_revenue_usd"],
            mode="lines",
            name="Revenue ($/h)",
            line=dict(color=style.COLOR_REVENUE, width=style.LINE_WIDTH_PRIMARY),
            hovertemplate="Revenue: $%{y:,.2f}/h<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["time_s"],
            y=df["hourly_profit_usd"],
            mode="lines",
            name="Profit ($/h)",
            line=dict(color=style.COLOR_PROFIT, width=style.LINE_WIDTH_PRIMARY),
            hovertemplate="Profit: $%{y:,.2f}/h<extra></extra>",
        )
    )
    _base_layout(fig, "Hourly profitability")
    fig.update_layout(xaxis=dict(title="Time (s)"), yaxis=dict(title="USD / hour"))
    return fig


def build_breakdown_figure(breakdown: ProfitabilityBreakdown) -> go.Figure:
    rows = breakdown.as_rows()
    labels = [name for name, _ in rows]
    # A loss has no pie slice.
    values = [
        max(0.0, value) if name == "Net Profit" else value for name, value in rows
    ]
    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=values,
            marker=dict(colors=[style.BREAKDOWN_COLORS[name] for name in labels]),
            texttemplate="%{label}: %{value:,.2f}",
            hovertemplate="%{label}: $%{value:,.2f}/day<extra></extra>",
            sort=False,
        )
    )
    fig.update_layout(
        title="Daily profitability breakdown",
        height=style.CHART_HEIGHT_PX,
        margin=dict(l=20, r=20, t=50, b=20),
        showlegend=False,
    )
    return fig


def build_hardware_figure(df: pd.DataFrame) -> go.Figure:
    """Efficiency (TH/kW) per hardware option."""
    fig = go.Figure(
        go.Bar(
            x=df["name"],
            y=df["efficiency_th_per_kw"],
            marker_color=style.COLOR_HARDWARE_BAR,
            hovertemplate="%{x}<br>%{y:.2f} TH/kW<extra></extra>",
        )
    )
    fig.update_layout(
        title="Hardware efficiency",
        height=style.CHART_HEIGHT_PX,
        yaxis=dict(title="TH/kW"),
        margin=dict(l=40, r=20, t=50, b=40),
    )
    return fig


def render_live_charts(df: pd.DataFrame) -> None:
    if df.empty:
        st.info("Start mining to stream performance data.")
        return
    col_perf, col_profit = st.columns(2)
    with col_perf:
        st.plotly_chart(build_performance_figure(df), width="stretch")
    with col_profit:
        st.plotly_chart(build_profitability_figure(df), width="stretch")


def render_breakdown_chart(breakdown: ProfitabilityBreakdown) -> None:
    st.plotly_chart(build_breakdown_figure(breakdown), width="stretch")


def render_hardware_chart(df: pd.DataFrame) -> None:
    st.plotly_chart(build_hardware_figure(df), width="stretch")
