# src/core/simulator.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

import numpy as np

from src.config import settings
from src.core.history import HistoryBuffer, export_csv
from src.core.miner_models import MinerOption
from src.core.parameters import MiningParameters, apply_hardware, update_parameters
from src.core.probability import (
    MiningEconomics,
    ProfitabilityBreakdown,
    compute_mining_economics,
    compute_profitability_breakdown,
)
from src.core.scheduler import TickScheduler, WallClockScheduler
from src.core.tick_engine import (
    SimulationSession,
    apply_tick,
    draw_tick,
    new_session,
    reset_session,
    select_coin,
    start_session,
    stop_session,
)

logger = logging.getLogger(__name__)


class MiningSimulator:
    """
    One isolated simulation: a session, its random source and its scheduler.

    The dashboard keeps one instance per browser session and calls `poll()`
    periodically; tests inject a ManualScheduler and a seeded generator.
    """

    def __init__(
        self,
        coin_symbol: str = settings.DEFAULT_COIN,
        params: Optional[MiningParameters] = None,
        rng: Optional[np.random.Generator] = None,
        scheduler: Optional[TickScheduler] = None,
        seed: Optional[int] = settings.SIMULATION_SEED,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.scheduler = scheduler if scheduler is not None else WallClockScheduler()
        self._session = new_session(coin_symbol, params)

    # --- observable state -------------------------------------------------

    @property
    def session(self) -> SimulationSession:
        return self._session

    @property
    def history(self) -> HistoryBuffer:
        return self._session.history

    @property
    def is_running(self) -> bool:
        return self._session.is_running

    @property
    def status_label(self) -> str:
        return "Mining" if self.is_running else "Stopped"

    @property
    def economics(self) -> MiningEconomics:
        return compute_mining_economics(self._session.params, self._session.market)

    @property
    def breakdown(self) -> ProfitabilityBreakdown:
        return compute_profitability_breakdown(
            self._session.params, self._session.market
        )

    # --- commands ---------------------------------------------------------

    def start(self) -> None:
        if self.is_running:
            return
        self._session = start_session(self._session)
        self.scheduler.start()
        logger.info(
            "Simulation started (%s, t=%ss)",
            self._session.coin_symbol,
            self._session.elapsed_s,
        )

    def stop(self) -> None:
        # Scheduler first: no tick may be handed out once stop() returns.
        self.scheduler.stop()
        if not self.is_running:
            return
        self._session = stop_session(self._session)
        logger.info("Simulation stopped at t=%ss", self._session.elapsed_s)

    def toggle(self) -> None:
        if self.is_running:
            self.stop()
        else:
            self.start()

    def reset(self) -> None:
        self.stop()
        self._session = reset_session(self._session)
        logger.info("Simulation reset (%s)", self._session.coin_symbol)

    def select_coin(self, coin_symbol: str) -> None:
        self._session = select_coin(self._session, coin_symbol)
        logger.info("Coin selected: %s", self._session.coin_symbol)

    def update_parameters(self, **changes: float) -> MiningParameters:
        params = update_parameters(self._session.params, **changes)
        self._session = _with_params(self._session, params)
        return params

    def apply_hardware(self, option: MinerOption) -> MiningParameters:
        params = apply_hardware(self._session.params, option)
        self._session = _with_params(self._session, params)
        logger.info("Hardware applied: %s", option.name)
        return params

    def step(self, n: int = 1) -> SimulationSession:
        """Run `n` ticks immediately, regardless of the scheduler."""
        for _ in range(n):
            self._session = apply_tick(self._session, draw_tick(self.rng))
        return self._session

    def poll(self) -> int:
        """Run whatever ticks the scheduler says are due; returns the count."""
        if not self.is_running:
            return 0
        due = self.scheduler.due_ticks()
        if due:
            self.step(due)
        return due

    def export_csv(self) -> str:
        return export_csv(self._session.history)


def _with_params(
    session: SimulationSession, params: MiningParameters
) -> SimulationSession:
    return replace(session, params=params)
