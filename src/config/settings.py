# src/config/settings.py

import os

from src.config.env import APP_ENV, ENV_DEV

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == ENV_DEV else "INFO").upper()

# --- Randomness ---
# Fixed seed in dev so runs are reproducible; unseeded in prod unless overridden.
_seed_env = os.getenv("SIMULATION_SEED")
SIMULATION_SEED = (
    int(_seed_env) if _seed_env else (42 if APP_ENV == ENV_DEV else None)
)

# --- Network / protocol constants ---
BLOCK_TIME_S = 600  # 10 minute target block interval
SECONDS_PER_DAY = 86_400
HOURS_PER_DAY = 24
TH_TO_HS = 1e12  # TH/s -> H/s

# --- Default configuration ---
DEFAULT_COIN = "BTC"
DEFAULT_HASHRATE_TH = 100.0
DEFAULT_POWER_W = 3250.0
DEFAULT_ELECTRICITY_USD_PER_KWH = 0.08
DEFAULT_POOL_FEE_PCT = 1.5

# --- Input ranges (min, max, step) ---
HASHRATE_RANGE_TH = (1.0, 200.0, 1.0)
POWER_RANGE_W = (300.0, 5000.0, 50.0)
ELECTRICITY_RANGE_USD_PER_KWH = (0.02, 0.30, 0.01)
POOL_FEE_RANGE_PCT = (0.0, 5.0, 0.1)

# --- Tick engine ---
TICK_INTERVAL_S = 1.0
# Ticks owed after a stalled browser tab are replayed up to this many per poll.
MAX_CATCH_UP_TICKS = 5
HISTORY_MAX_SAMPLES = 50

# Sample jitter: uniform noise of +/- the amplitude around the configured value
HASHRATE_JITTER_TH = 2.5
POWER_JITTER_W = 50.0
TEMPERATURE_BASE_C = 65.0
TEMPERATURE_SPAN_C = 20.0

# --- Drift model ---
# Every 100 ticks stands in for a 2016-block retarget
DIFFICULTY_RETARGET_INTERVAL_TICKS = 100
DIFFICULTY_DRIFT_RANGE = (0.98, 1.02)
PRICE_DRIFT_RANGE = (0.995, 1.005)

# --- Export ---
EXPORT_FILENAME = "mining_simulation_data.csv"
EXPORT_ENCODING = "utf-8"
EXPORT_HEADER = (
    "Time",
    "Hashrate(TH/s)",
    "Power(W)",
    "Temperature(C)",
    "Hourly_Profit($)",
    "Revenue($)",
)

