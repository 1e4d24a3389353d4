import pytest

from src.core.miner_models import MinerOption
from src.core.parameters import (
    MarketState,
    MiningParameters,
    apply_hardware,
    clamp_parameters,
    update_parameters,
)
from src.data.coins import COINS, coin_symbols, get_coin


def test_defaults_match_dashboard():
    params = MiningParameters()
    assert params.hashrate_th == 100
    assert params.power_w == 3250
    assert params.electricity_usd_per_kwh == pytest.approx(0.08)
    assert params.pool_fee_pct == pytest.approx(1.5)
    assert params.pool_fee_fraction == pytest.approx(0.015)


def test_clamp_leaves_valid_values():
    params = MiningParameters(50.0, 1000.0, 0.1, 2.0)
    assert clamp_parameters(params) == params


def test_update_parameters_clamps_each_field():
    params = update_parameters(MiningParameters(), hashrate_th=0.5, pool_fee_pct=-1)
    assert params.hashrate_th == 1.0
    assert params.pool_fee_pct == 0.0
    assert params.power_w == 3250.0


def test_apply_hardware_copies_hashrate_and_power():
    option = MinerOption(
        name="Test", hashrate_th=110.0, power_w=3250, price_usd=1.0, efficiency_j_per_th=29.5
    )
    params = apply_hardware(MiningParameters(electricity_usd_per_kwh=0.12), option)
    assert params.hashrate_th == 110.0
    assert params.power_w == 3250.0
    assert params.electricity_usd_per_kwh == pytest.approx(0.12)


def test_market_from_coin():
    market = MarketState.from_coin(COINS["DOGE"])
    assert market == MarketState(
        coin_price_usd=0.08, network_difficulty=8_000_000, block_reward_coins=10_000
    )


def test_coin_catalogue():
    assert coin_symbols() == ["BTC", "ETH", "LTC", "DOGE"]
    assert get_coin("btc").label == "Bitcoin (BTC) - SHA-256"
    assert get_coin("LTC").algorithm == "Scrypt"
