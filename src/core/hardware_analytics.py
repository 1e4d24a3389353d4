# src/core/hardware_analytics.py
from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from src.core.miner_models import MinerOption
from src.core.parameters import MarketState, MiningParameters
from src.core.probability import compute_mining_economics


def hardware_to_dataframe(options: Iterable[MinerOption]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "name": o.name,
                "hashrate_th": o.hashrate_th,
                "power_w": o.power_w,
                "price_usd": o.price_usd,
                "efficiency_j_per_th": o.efficiency_j_per_th,
            }
            for o in options
        ]
    )


def compute_hardware_comparison_table(
    options: Iterable[MinerOption],
    params: MiningParameters,
    market: MarketState,
) -> pd.DataFrame:
    """
    Daily economics of each hardware option under the current market.

    Electricity rate and pool fee come from `params`; hashrate and power come
    from each option. Ranges of the dashboard inputs are not applied here so
    GPU-class hardware is compared at its real (tiny) hashrate.
    """
    df = hardware_to_dataframe(options)
    if df.empty:
        return df

    rows = []
    for option in df.itertuples(index=False):
        option_params = MiningParameters(
            hashrate_th=float(option.hashrate_th),
            power_w=float(option.power_w),
            electricity_usd_per_kwh=params.electricity_usd_per_kwh,
            pool_fee_pct=params.pool_fee_pct,
        )
        econ = compute_mining_economics(option_params, market)
        rows.append(
            {
                "efficiency_th_per_kw": econ.efficiency_th_per_kw,
                "daily_revenue_usd": econ.daily_revenue_usd,
                "daily_power_cost_usd": econ.daily_power_cost_usd,
                "daily_profit_usd": econ.daily_profit_usd,
            }
        )
    df = pd.concat([df, pd.DataFrame(rows)], axis=1)

    df["is_profitable"] = df["daily_profit_usd"] > 0
    df["payback_days"] = np.where(
        (df["daily_profit_usd"] > 0) & (df["price_usd"] > 0),
        df["price_usd"] / df["daily_profit_usd"],
        np.nan,
    )
    return df
