import numpy as np
import pytest

from src.config import settings
from src.core.parameters import MarketState, MiningParameters
from src.core.scheduler import ManualScheduler
from src.core.simulator import MiningSimulator
from src.data.coins import COINS
from src.data.hardware import HARDWARE


@pytest.fixture()
def sim() -> MiningSimulator:
    return MiningSimulator(
        coin_symbol="BTC",
        rng=np.random.default_rng(2024),
        scheduler=ManualScheduler(),
    )


def test_poll_does_nothing_while_idle(sim: MiningSimulator):
    sim.scheduler.advance(5)
    assert sim.poll() == 0
    assert sim.session.elapsed_s == 0
    assert sim.status_label == "Stopped"


def test_poll_runs_due_ticks(sim: MiningSimulator):
    sim.start()
    assert sim.status_label == "Mining"
    sim.scheduler.advance(60)
    assert sim.poll() == 60
    assert sim.session.elapsed_s == 60
    assert [s.time_s for s in sim.history] == list(range(11, 61))


def test_stop_then_start_preserves_clock_and_counters(sim: MiningSimulator):
    sim.start()
    sim.scheduler.advance(10)
    sim.poll()
    before = sim.session

    sim.stop()
    sim.scheduler.advance(5)
    assert sim.poll() == 0
    assert sim.session.elapsed_s == before.elapsed_s
    assert sim.session.blocks_found == before.blocks_found
    assert sim.session.total_earnings_usd == before.total_earnings_usd

    sim.start()
    sim.scheduler.advance(3)
    sim.poll()
    assert sim.session.elapsed_s == 13
    assert sim.session.blocks_found >= before.blocks_found
    assert sim.session.total_earnings_usd >= before.total_earnings_usd


def test_reset_stops_and_zeroes(sim: MiningSimulator):
    sim.start()
    sim.scheduler.advance(120)
    sim.poll()
    sim.reset()

    s = sim.session
    assert not sim.is_running
    assert not sim.scheduler.is_active
    assert s.elapsed_s == 0
    assert s.blocks_found == 0
    assert s.total_earnings_usd == 0.0
    assert s.market == MarketState.from_coin(COINS["BTC"])
    assert sim.export_csv() == ",".join(settings.EXPORT_HEADER)


def test_toggle_switches_state(sim: MiningSimulator):
    sim.toggle()
    assert sim.is_running
    sim.toggle()
    assert not sim.is_running


def test_select_coin_keeps_parameters(sim: MiningSimulator):
    params = sim.update_parameters(hashrate_th=150, pool_fee_pct=3.0)
    sim.select_coin("ETH")
    assert sim.session.params == params
    assert sim.session.market == MarketState(
        coin_price_usd=2800.0, network_difficulty=1.5e16, block_reward_coins=2.0
    )


def test_update_parameters_clamps(sim: MiningSimulator):
    params = sim.update_parameters(
        hashrate_th=999, power_w=10, electricity_usd_per_kwh=-1, pool_fee_pct=50
    )
    assert params == MiningParameters(
        hashrate_th=200.0, power_w=300.0, electricity_usd_per_kwh=0.02, pool_fee_pct=5.0
    )


def test_apply_hardware_clamps_gpu_hashrate(sim: MiningSimulator):
    params = sim.apply_hardware(HARDWARE["RTX 4090"])
    assert params.hashrate_th == 1.0
    assert params.power_w == 450.0


def test_step_ignores_scheduler(sim: MiningSimulator):
    sim.step(4)
    assert sim.session.elapsed_s == 4
    assert len(sim.history) == 4


def test_export_lists_buffer_rows(sim: MiningSimulator):
    sim.step(3)
    lines = sim.export_csv().split("\n")
    assert len(lines) == 4
    assert [line.split(",")[0] for line in lines[1:]] == ["1", "2", "3"]


def test_economics_and_breakdown_follow_session(sim: MiningSimulator):
    assert sim.economics.probability_per_tick == pytest.approx(2.0)
    assert sim.breakdown.revenue_usd == pytest.approx(sim.economics.daily_revenue_usd)


def test_sessions_are_isolated():
    a = MiningSimulator(rng=np.random.default_rng(1), scheduler=ManualScheduler())
    b = MiningSimulator(rng=np.random.default_rng(1), scheduler=ManualScheduler())
    a.step(20)
    a.select_coin("DOGE")
    assert b.session.elapsed_s == 0
    assert b.session.coin_symbol == "BTC"
    assert len(b.history) == 0

    b.step(20)
    assert [s.time_s for s in b.history] == list(range(1, 21))
    assert b.history.samples() == a.history.samples()
