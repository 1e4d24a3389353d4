# src/core/parameters.py
from __future__ import annotations

from dataclasses import dataclass, replace

from src.config import settings
from src.core.miner_models import CoinSpec, MinerOption


@dataclass(frozen=True)
class MiningParameters:
    """User-tunable hardware and cost configuration."""

    hashrate_th: float = settings.DEFAULT_HASHRATE_TH
    power_w: float = settings.DEFAULT_POWER_W
    electricity_usd_per_kwh: float = settings.DEFAULT_ELECTRICITY_USD_PER_KWH
    pool_fee_pct: float = settings.DEFAULT_POOL_FEE_PCT

    @property
    def pool_fee_fraction(self) -> float:
        return self.pool_fee_pct / 100.0


@dataclass(frozen=True)
class MarketState:
    """Price, difficulty and reward; drifted by the engine while running."""

    coin_price_usd: float
    network_difficulty: float
    block_reward_coins: float

    @classmethod
    def from_coin(cls, coin: CoinSpec) -> "MarketState":
        return cls(
            coin_price_usd=float(coin.price_usd),
            network_difficulty=float(coin.difficulty),
            block_reward_coins=float(coin.block_reward_coins),
        )


def _clamp(value: float, bounds: tuple[float, float, float]) -> float:
    low, high, _step = bounds
    return max(low, min(float(value), high))


def clamp_parameters(params: MiningParameters) -> MiningParameters:
    """
    Pull every field back into the range the dashboard inputs allow.

    Out-of-range configuration is never an error: it is clamped here, at the
    input boundary, before the tick engine sees it.
    """
    return MiningParameters(
        hashrate_th=_clamp(params.hashrate_th, settings.HASHRATE_RANGE_TH),
        power_w=_clamp(params.power_w, settings.POWER_RANGE_W),
        electricity_usd_per_kwh=_clamp(
            params.electricity_usd_per_kwh, settings.ELECTRICITY_RANGE_USD_PER_KWH
        ),
        pool_fee_pct=_clamp(params.pool_fee_pct, settings.POOL_FEE_RANGE_PCT),
    )


def update_parameters(params: MiningParameters, **changes: float) -> MiningParameters:
    """Return a clamped copy of `params` with `changes` applied."""
    return clamp_parameters(replace(params, **changes))


def apply_hardware(params: MiningParameters, option: MinerOption) -> MiningParameters:
    """Copy a hardware option's hashrate and power into the parameters."""
    return update_parameters(
        params, hashrate_th=option.hashrate_th, power_w=float(option.power_w)
    )
