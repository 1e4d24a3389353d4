# src/core/miner_models.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MinerOption:
    """
    A single piece of mining hardware from the comparison catalogue.

    Applying an option to the simulation copies hashrate and power into
    MiningParameters; price and efficiency are informational.
    """

    name: str
    hashrate_th: float  # terahash per second
    power_w: int  # watts
    price_usd: float
    efficiency_j_per_th: float  # joules per terahash


@dataclass(frozen=True)
class CoinSpec:
    """Canonical market defaults for one catalogue coin."""

    symbol: str
    name: str
    price_usd: float
    block_reward_coins: float
    difficulty: float
    algorithm: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.symbol}) - {self.algorithm}"
