# src/core/tick_engine.py
"""
Tick engine

One tick is one simulated second. `apply_tick` is a pure state transition:
given a session and the uniform draws for this tick it returns the next
session. Per tick, in order:

1. advance the clock by one second;
2. compute the per-second block probability and current economics;
3. Bernoulli trial: a draw below the probability finds a block and credits
   reward * price net of the pool fee;
4. append a jittered metrics sample to the history window;
5. on retarget ticks, perturb difficulty;
6. perturb price.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np

from src.config import settings
from src.core.drift import drift_difficulty, drift_price
from src.core.history import HistoryBuffer, MetricsSample
from src.core.parameters import MarketState, MiningParameters
from src.core.probability import (
    block_payout_usd,
    compute_efficiency,
    compute_mining_economics,
)
from src.data.coins import get_coin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickDraws:
    """The six independent uniform [0, 1) draws consumed by one tick."""

    block: float
    hashrate_noise: float
    power_noise: float
    temperature: float
    difficulty: float
    price: float


@dataclass(frozen=True)
class SimulationSession:
    coin_symbol: str
    params: MiningParameters
    market: MarketState
    elapsed_s: int = 0
    total_earnings_usd: float = 0.0
    blocks_found: int = 0
    history: HistoryBuffer = field(default_factory=HistoryBuffer)
    is_running: bool = False


def draw_tick(rng: np.random.Generator) -> TickDraws:
    u = rng.random(6)
    return TickDraws(
        block=float(u[0]),
        hashrate_noise=float(u[1]),
        power_noise=float(u[2]),
        temperature=float(u[3]),
        difficulty=float(u[4]),
        price=float(u[5]),
    )


def new_session(
    coin_symbol: str = settings.DEFAULT_COIN,
    params: Optional[MiningParameters] = None,
) -> SimulationSession:
    coin = get_coin(coin_symbol)
    return SimulationSession(
        coin_symbol=coin.symbol,
        params=params if params is not None else MiningParameters(),
        market=MarketState.from_coin(coin),
    )


def start_session(session: SimulationSession) -> SimulationSession:
    return replace(session, is_running=True)


def stop_session(session: SimulationSession) -> SimulationSession:
    return replace(session, is_running=False)


def reset_session(session: SimulationSession) -> SimulationSession:
    """Stop, zero clock/counters/history and reseed the market."""
    return SimulationSession(
        coin_symbol=session.coin_symbol,
        params=session.params,
        market=MarketState.from_coin(get_coin(session.coin_symbol)),
        history=HistoryBuffer(max_samples=session.history.max_samples),
    )


def select_coin(session: SimulationSession, coin_symbol: str) -> SimulationSession:
    """Switch coin: market reseeds, clock and counters carry on."""
    coin = get_coin(coin_symbol)
    return replace(
        session, coin_symbol=coin.symbol, market=MarketState.from_coin(coin)
    )


def _jitter(center: float, amplitude: float, u: float) -> float:
    return center + (u - 0.5) * 2.0 * amplitude


def apply_tick(session: SimulationSession, draws: TickDraws) -> SimulationSession:
    elapsed_s = session.elapsed_s + 1
    params = session.params
    market = session.market

    econ = compute_mining_economics(params, market)

    blocks_found = session.blocks_found
    total_earnings = session.total_earnings_usd
    if draws.block < econ.probability_per_tick:
        payout = block_payout_usd(params, market)
        blocks_found += 1
        total_earnings += payout
        logger.debug("Block found at t=%ss (+$%.2f)", elapsed_s, payout)

    sample = MetricsSample(
        time_s=elapsed_s,
        hashrate_th=_jitter(
            params.hashrate_th, settings.HASHRATE_JITTER_TH, draws.hashrate_noise
        ),
        power_w=_jitter(params.power_w, settings.POWER_JITTER_W, draws.power_noise),
        temperature_c=settings.TEMPERATURE_BASE_C
        + draws.temperature * settings.TEMPERATURE_SPAN_C,
        hourly_profit_usd=econ.hourly_profit_usd,
        hourly_revenue_usd=econ.hourly_revenue_usd,
        efficiency_th_per_kw=round(
            compute_efficiency(params.hashrate_th, params.power_w), 2
        ),
    )

    next_market = MarketState(
        coin_price_usd=drift_price(market.coin_price_usd, draws.price),
        network_difficulty=drift_difficulty(
            market.network_difficulty, elapsed_s, draws.difficulty
        ),
        block_reward_coins=market.block_reward_coins,
    )

    return replace(
        session,
        elapsed_s=elapsed_s,
        blocks_found=blocks_found,
        total_earnings_usd=total_earnings,
        history=session.history.with_sample(sample),
        market=next_market,
    )


def run_ticks(
    session: SimulationSession, rng: np.random.Generator, n: int
) -> SimulationSession:
    for _ in range(n):
        session = apply_tick(session, draw_tick(rng))
    return session


def format_runtime(elapsed_s: int) -> str:
    hours, rem = divmod(max(0, int(elapsed_s)), 3600)
    return f"{hours}h {rem // 60}m"
