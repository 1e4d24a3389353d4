# src/data/coins.py
from __future__ import annotations

from typing import Dict, List

from src.core.miner_models import CoinSpec

# Toy market defaults; difficulties are not real network values.
COINS: Dict[str, CoinSpec] = {
    "BTC": CoinSpec(
        symbol="BTC",
        name="Bitcoin",
        price_usd=45_000.0,
        block_reward_coins=6.25,
        difficulty=50_000_000_000_000,
        algorithm="SHA-256",
    ),
    "ETH": CoinSpec(
        symbol="ETH",
        name="Ethereum",
        price_usd=2_800.0,
        block_reward_coins=2.0,
        difficulty=15_000_000_000_000_000,
        algorithm="Ethash",
    ),
    "LTC": CoinSpec(
        symbol="LTC",
        name="Litecoin",
        price_usd=75.0,
        block_reward_coins=12.5,
        difficulty=24_000_000,
        algorithm="Scrypt",
    ),
    "DOGE": CoinSpec(
        symbol="DOGE",
        name="Dogecoin",
        price_usd=0.08,
        block_reward_coins=10_000.0,
        difficulty=8_000_000,
        algorithm="Scrypt",
    ),
}


class UnknownCoinError(ValueError):
    """Raised when a coin symbol is not in the catalogue."""


def get_coin(symbol: str) -> CoinSpec:
    try:
        return COINS[symbol.upper()]
    except (KeyError, AttributeError) as exc:
        raise UnknownCoinError(
            f"Unknown coin {symbol!r}; expected one of {', '.join(COINS)}"
        ) from exc


def coin_symbols() -> List[str]:
    return list(COINS)
