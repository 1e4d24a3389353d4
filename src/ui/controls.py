# src/ui/controls.py
from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from src.config import settings
from src.core.parameters import MiningParameters
from src.data.coins import COINS, coin_symbols


@dataclass
class ControlInputs:
    """Values read from the configuration panel on this rerun."""

    coin_symbol: str
    params: MiningParameters


def _slider(label: str, bounds: tuple[float, float, float], value: float, key: str):
    low, high, step = bounds
    kwargs = {}
    # Once the widget owns its state, passing a default as well makes Streamlit warn.
    if key not in st.session_state:
        kwargs["value"] = float(min(max(value, low), high))
    return st.slider(
        label,
        min_value=float(low),
        max_value=float(high),
        step=float(step),
        key=key,
        **kwargs,
    )


def render_controls(current: MiningParameters, current_coin: str) -> ControlInputs:
    """Render coin picker and hardware/cost sliders.

    Returns
    -------
    ControlInputs
        Coin symbol and the slider values; clamping happens in the engine.
    """
    symbols = coin_symbols()
    coin_symbol = st.selectbox(
        "Cryptocurrency",
        options=symbols,
        index=symbols.index(current_coin),
        format_func=lambda s: COINS[s].label,
        key="control_coin",
    )

    hashrate = _slider(
        "Hashrate (TH/s)",
        settings.HASHRATE_RANGE_TH,
        current.hashrate_th,
        "control_hashrate",
    )
    power = _slider(
        "Power consumption (W)",
        settings.POWER_RANGE_W,
        current.power_w,
        "control_power",
    )
    electricity = _slider(
        "Electricity rate ($/kWh)",
        settings.ELECTRICITY_RANGE_USD_PER_KWH,
        current.electricity_usd_per_kwh,
        "control_electricity",
    )
    pool_fee = _slider(
        "Pool fee (%)",
        settings.POOL_FEE_RANGE_PCT,
        current.pool_fee_pct,
        "control_pool_fee",
    )

    return ControlInputs(
        coin_symbol=coin_symbol,
        params=MiningParameters(
            hashrate_th=hashrate,
            power_w=power,
            electricity_usd_per_kwh=electricity,
            pool_fee_pct=pool_fee,
        ),
    )
