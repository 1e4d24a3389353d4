import math

import pytest

from src.core.hardware_analytics import compute_hardware_comparison_table
from src.core.parameters import MarketState, MiningParameters
from src.data.coins import COINS
from src.data.hardware import HARDWARE


def test_comparison_table_covers_catalogue():
    df = compute_hardware_comparison_table(
        HARDWARE.values(), MiningParameters(), MarketState.from_coin(COINS["BTC"])
    )
    assert list(df["name"]) == list(HARDWARE)
    s19 = df[df["name"] == "Antminer S19 Pro"].iloc[0]
    assert s19["efficiency_th_per_kw"] == pytest.approx(110 / 3.25)
    assert s19["daily_power_cost_usd"] == pytest.approx(3.25 * 24 * 0.08)
    assert bool(s19["is_profitable"])
    assert s19["payback_days"] == pytest.approx(8000 / s19["daily_profit_usd"])


def test_unprofitable_hardware_has_no_payback():
    market = MarketState(coin_price_usd=1.0, network_difficulty=1e30, block_reward_coins=1.0)
    df = compute_hardware_comparison_table(HARDWARE.values(), MiningParameters(), market)
    assert not df["is_profitable"].any()
    assert all(math.isnan(v) for v in df["payback_days"])


def test_empty_catalogue_returns_empty_frame():
    df = compute_hardware_comparison_table(
        [], MiningParameters(), MarketState.from_coin(COINS["BTC"])
    )
    assert df.empty
