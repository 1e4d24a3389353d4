import pytest

from src.core.parameters import MarketState, MiningParameters
from src.core.probability import (
    block_payout_usd,
    compute_efficiency,
    compute_mining_economics,
    compute_profitability_breakdown,
    compute_tick_probability,
)
from src.data.coins import COINS


@pytest.fixture()
def btc_market() -> MarketState:
    return MarketState.from_coin(COINS["BTC"])


def test_tick_probability_reference_ratio():
    # networkHashrate = 5e13 / 600 ~ 8.33e10; 100e12 / 8.33e10 / 600 ~ 2.0
    p = compute_tick_probability(100, 50_000_000_000_000)
    assert p == pytest.approx(2.0)


def test_tick_probability_scales_linearly_with_hashrate():
    p1 = compute_tick_probability(10, 1e18)
    p2 = compute_tick_probability(20, 1e18)
    assert p2 == pytest.approx(2 * p1)


@pytest.mark.parametrize(
    "hashrate, difficulty, block_time",
    [
        (100, 0, 600),
        (100, -1e13, 600),
        (0, 5e13, 600),
        (-5, 5e13, 600),
        (100, 5e13, 0),
    ],
)
def test_tick_probability_fails_closed(hashrate, difficulty, block_time):
    assert compute_tick_probability(hashrate, difficulty, block_time) == 0.0


def test_mining_economics_daily_and_hourly(btc_market: MarketState):
    params = MiningParameters(
        hashrate_th=100.0,
        power_w=3250.0,
        electricity_usd_per_kwh=0.08,
        pool_fee_pct=1.5,
    )
    econ = compute_mining_economics(params, btc_market)

    assert econ.probability_per_tick == pytest.approx(2.0)
    assert econ.expected_blocks_per_day == pytest.approx(2.0 * 86_400)

    expected_revenue = 2.0 * 86_400 * 6.25 * 45_000
    expected_cost = 3.25 * 24 * 0.08
    assert econ.daily_revenue_usd == pytest.approx(expected_revenue)
    assert econ.daily_power_cost_usd == pytest.approx(expected_cost)
    assert econ.daily_pool_fee_usd == pytest.approx(expected_revenue * 0.015)
    assert econ.daily_profit_usd == pytest.approx(
        expected_revenue * 0.985 - expected_cost
    )
    assert econ.hourly_revenue_usd == pytest.approx(expected_revenue / 24)
    assert econ.hourly_profit_usd == pytest.approx(econ.daily_profit_usd / 24)
    assert econ.efficiency_th_per_kw == pytest.approx(100 / 3.25)


def test_mining_economics_loss_when_difficulty_degenerate():
    params = MiningParameters(power_w=1000.0, electricity_usd_per_kwh=0.1)
    market = MarketState(coin_price_usd=100.0, network_difficulty=0.0, block_reward_coins=1.0)
    econ = compute_mining_economics(params, market)
    assert econ.daily_revenue_usd == 0.0
    assert econ.daily_profit_usd == pytest.approx(-2.4)


def test_profitability_breakdown_components(btc_market: MarketState):
    params = MiningParameters()
    econ = compute_mining_economics(params, btc_market)
    breakdown = compute_profitability_breakdown(params, btc_market)

    assert breakdown.revenue_usd == pytest.approx(econ.daily_revenue_usd)
    assert breakdown.electricity_cost_usd == pytest.approx(econ.daily_power_cost_usd)
    assert breakdown.pool_fee_usd == pytest.approx(econ.daily_pool_fee_usd)
    assert breakdown.net_profit_usd == pytest.approx(
        breakdown.revenue_usd - breakdown.pool_fee_usd - breakdown.electricity_cost_usd
    )
    assert [name for name, _ in breakdown.as_rows()] == [
        "Revenue",
        "Electricity",
        "Pool Fee",
        "Net Profit",
    ]


def test_block_payout_net_of_pool_fee(btc_market: MarketState):
    params = MiningParameters(pool_fee_pct=2.0)
    assert block_payout_usd(params, btc_market) == pytest.approx(6.25 * 45_000 * 0.98)


def test_efficiency_guards_zero_power():
    assert compute_efficiency(100.0, 0.0) == 0.0
    assert compute_efficiency(110.0, 3250.0) == pytest.approx(33.846, rel=1e-4)
