# src/ui/layout.py
from __future__ import annotations

import streamlit as st

from src.config import settings
from src.core.hardware_analytics import compute_hardware_comparison_table
from src.core.simulator import MiningSimulator
from src.core.tick_engine import format_runtime
from src.data.coins import get_coin
from src.data.hardware import HARDWARE
from src.ui import style
from src.ui.charts import (
    render_breakdown_chart,
    render_hardware_chart,
    render_live_charts,
)
from src.ui.controls import render_controls

SIMULATOR_KEY = "mining_simulator"


def get_simulator() -> MiningSimulator:
    """One simulator per browser session; sessions never share state."""
    if SIMULATOR_KEY not in st.session_state:
        st.session_state[SIMULATOR_KEY] = MiningSimulator()
    return st.session_state[SIMULATOR_KEY]


def _apply_preset(sim: MiningSimulator, preset: str) -> None:
    # Runs as a callback, before the sliders are instantiated on the rerun.
    params = sim.apply_hardware(HARDWARE[preset])
    st.session_state["control_hashrate"] = float(params.hashrate_th)
    st.session_state["control_power"] = float(params.power_w)


def _apply_controls(sim: MiningSimulator) -> None:
    session = sim.session
    with st.sidebar:
        st.header("Configuration")
        inputs = render_controls(session.params, session.coin_symbol)

        st.subheader("Hardware presets")
        preset = st.selectbox(
            "Apply hardware", options=["-"] + list(HARDWARE), key="control_hardware"
        )
        st.button(
            "Apply preset",
            on_click=_apply_preset,
            args=(sim, preset),
            disabled=preset not in HARDWARE,
        )

    # Changes land between ticks: the fragment below only ticks on its own reruns.
    if inputs.coin_symbol != session.coin_symbol:
        sim.select_coin(inputs.coin_symbol)
    if inputs.params != session.params:
        sim.update_parameters(
            hashrate_th=inputs.params.hashrate_th,
            power_w=inputs.params.power_w,
            electricity_usd_per_kwh=inputs.params.electricity_usd_per_kwh,
            pool_fee_pct=inputs.params.pool_fee_pct,
        )


def _render_commands(sim: MiningSimulator) -> None:
    col_toggle, col_reset, _ = st.columns([1, 1, 4])
    with col_toggle:
        label = "Stop Mining" if sim.is_running else "Start Mining"
        st.button(label, type="primary", on_click=sim.toggle)
    with col_reset:
        st.button("Reset", on_click=sim.reset)


def _render_status(sim: MiningSimulator) -> None:
    session = sim.session
    econ = sim.economics
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Runtime", format_runtime(session.elapsed_s))
    c2.metric("Total earnings", f"${session.total_earnings_usd:,.2f}")
    c3.metric("Blocks found", f"{session.blocks_found}")
    c4.metric("Daily profit", f"${econ.daily_profit_usd:,.2f}")

    coin = get_coin(session.coin_symbol)
    latest = session.history.latest()
    colour = style.COLOR_POSITIVE if sim.is_running else style.COLOR_NEGATIVE
    st.markdown(
        f"<span style='color:{colour};font-weight:700'>{sim.status_label}</span>"
        f" &middot; {coin.label} &middot; price ${session.market.coin_price_usd:,.4f}"
        f" &middot; efficiency {econ.efficiency_th_per_kw:.1f} TH/kW"
        + (f" &middot; {latest.temperature_c:.1f}°C" if latest else ""),
        unsafe_allow_html=True,
    )


def _render_export(sim: MiningSimulator) -> None:
    st.download_button(
        "Export CSV",
        data=sim.export_csv().encode(settings.EXPORT_ENCODING),
        file_name=settings.EXPORT_FILENAME,
        mime="text/csv",
    )


def _render_market_panels(sim: MiningSimulator) -> None:
    col_breakdown, col_hardware = st.columns(2)
    with col_breakdown:
        render_breakdown_chart(sim.breakdown)
    with col_hardware:
        hardware_df = compute_hardware_comparison_table(
            HARDWARE.values(), sim.session.params, sim.session.market
        )
        render_hardware_chart(hardware_df)
        st.dataframe(
            hardware_df[
                [
                    "name",
                    "hashrate_th",
                    "power_w",
                    "price_usd",
                    "efficiency_j_per_th",
                    "daily_profit_usd",
                    "payback_days",
                ]
            ],
            hide_index=True,
        )


def _render_live(sim: MiningSimulator) -> None:
    # Everything fed by the session or the drifting market lives in here, so
    # it refreshes on each fragment rerun while mining.
    sim.poll()
    _render_export(sim)
    _render_status(sim)
    render_live_charts(sim.history.to_dataframe())
    _render_market_panels(sim)


def render_dashboard() -> None:
    st.title("Crypto Mining Simulator")
    sim = get_simulator()
    _apply_controls(sim)
    _render_commands(sim)

    run_every = settings.TICK_INTERVAL_S if sim.is_running else None
    st.fragment(run_every=run_every)(_render_live)(sim)
