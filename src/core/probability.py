# src/core/probability.py
from __future__ import annotations

from dataclasses import dataclass

from src.config import settings
from src.core.parameters import MarketState, MiningParameters


@dataclass(frozen=True)
class MiningEconomics:
    probability_per_tick: float
    expected_blocks_per_day: float
    daily_revenue_usd: float
    daily_power_cost_usd: float
    daily_pool_fee_usd: float
    daily_profit_usd: float
    efficiency_th_per_kw: float

    @property
    def hourly_revenue_usd(self) -> float:
        return self.daily_revenue_usd / settings.HOURS_PER_DAY

    @property
    def hourly_profit_usd(self) -> float:
        return self.daily_profit_usd / settings.HOURS_PER_DAY


@dataclass(frozen=True)
class ProfitabilityBreakdown:
    """Daily split of revenue into electricity, pool fee and net profit."""

    revenue_usd: float
    electricity_cost_usd: float
    pool_fee_usd: float
    net_profit_usd: float

    def as_rows(self) -> list[tuple[str, float]]:
        return [
            ("Revenue", self.revenue_usd),
            ("Electricity", self.electricity_cost_usd),
            ("Pool Fee", self.pool_fee_usd),
            ("Net Profit", self.net_profit_usd),
        ]


def compute_tick_probability(
    hashrate_th: float,
    network_difficulty: float,
    block_time_s: float = settings.BLOCK_TIME_S,
) -> float:
    """
    Per-second chance that the rig finds the next block.

    Network hashrate is approximated as difficulty / block_time, without the
    2**32 hashes-per-difficulty factor a real proof-of-work target implies.
    With the toy catalogue difficulties this routinely exceeds 1.0; the
    value is returned unclamped so the economics stay proportional.

    Degenerate inputs (non-positive difficulty, hashrate or block time)
    yield 0.0 rather than raising.
    """
    if network_difficulty <= 0 or hashrate_th <= 0 or block_time_s <= 0:
        return 0.0

    network_hashrate = network_difficulty / block_time_s
    my_hashrate_hs = hashrate_th * settings.TH_TO_HS
    return my_hashrate_hs / network_hashrate / block_time_s


def compute_efficiency(hashrate_th: float, power_w: float) -> float:
    """TH/s delivered per kW drawn."""
    if power_w <= 0:
        return 0.0
    return hashrate_th / (power_w / 1000.0)


def compute_mining_economics(
    params: MiningParameters, market: MarketState
) -> MiningEconomics:
    """
    Expected daily economics for the current parameters and market.

    - expected blocks/day = probability per second * 86,400
    - revenue = blocks/day * block reward * coin price
    - power cost = kW * 24h * $/kWh
    - profit = revenue net of pool fee, minus power cost
    """
    probability = compute_tick_probability(
        params.hashrate_th, market.network_difficulty
    )
    expected_blocks_per_day = probability * settings.SECONDS_PER_DAY
    daily_revenue = (
        expected_blocks_per_day * market.block_reward_coins * market.coin_price_usd
    )
    daily_power_cost = (
        (params.power_w / 1000.0)
        * settings.HOURS_PER_DAY
        * params.electricity_usd_per_kwh
    )
    daily_pool_fee = daily_revenue * params.pool_fee_fraction
    daily_profit = daily_revenue * (1 - params.pool_fee_fraction) - daily_power_cost

    return MiningEconomics(
        probability_per_tick=probability,
        expected_blocks_per_day=expected_blocks_per_day,
        daily_revenue_usd=daily_revenue,
        daily_power_cost_usd=daily_power_cost,
        daily_pool_fee_usd=daily_pool_fee,
        daily_profit_usd=daily_profit,
        efficiency_th_per_kw=compute_efficiency(params.hashrate_th, params.power_w),
    )


def compute_profitability_breakdown(
    params: MiningParameters, market: MarketState
) -> ProfitabilityBreakdown:
    econ = compute_mining_economics(params, market)
    return ProfitabilityBreakdown(
        revenue_usd=econ.daily_revenue_usd,
        electricity_cost_usd=econ.daily_power_cost_usd,
        pool_fee_usd=econ.daily_pool_fee_usd,
        net_profit_usd=econ.daily_profit_usd,
    )


def block_payout_usd(params: MiningParameters, market: MarketState) -> float:
    """USD credited for one found block, after the pool fee."""
    return (
        market.block_reward_coins
        * market.coin_price_usd
        * (1 - params.pool_fee_fraction)
    )
