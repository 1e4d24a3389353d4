# src/core/drift.py
"""
Market and protocol drift.

Price moves every tick (market noise); difficulty moves only on retarget
ticks, which stand in for the network's periodic difficulty adjustment.
Both are multiplicative perturbations driven by a single uniform draw in
[0, 1) so callers can inject the randomness.
"""
from __future__ import annotations

import logging

from src.config import settings

logger = logging.getLogger(__name__)


def _scale(u: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return low + u * (high - low)


def is_retarget_tick(elapsed_s: int) -> bool:
    interval = int(settings.DIFFICULTY_RETARGET_INTERVAL_TICKS)
    return elapsed_s > 0 and elapsed_s % interval == 0


def drift_difficulty(difficulty: float, elapsed_s: int, u: float) -> float:
    if not is_retarget_tick(elapsed_s):
        return difficulty
    factor = _scale(u, settings.DIFFICULTY_DRIFT_RANGE)
    logger.debug("Difficulty retarget at t=%ss: x%.4f", elapsed_s, factor)
    return difficulty * factor


def drift_price(price: float, u: float) -> float:
    return price * _scale(u, settings.PRICE_DRIFT_RANGE)
