# src/data/hardware.py
from __future__ import annotations

from typing import Dict

from src.core.miner_models import MinerOption

# Comparison catalogue (prices & specs indicative only).
HARDWARE: Dict[str, MinerOption] = {
    "Antminer S19 Pro": MinerOption(
        name="Antminer S19 Pro",
        hashrate_th=110.0,
        power_w=3250,
        price_usd=8000.0,
        efficiency_j_per_th=29.5,
    ),
    "Whatsminer M30S++": MinerOption(
        name="Whatsminer M30S++",
        hashrate_th=112.0,
        power_w=3472,
        price_usd=7500.0,
        efficiency_j_per_th=31.0,
    ),
    "RTX 4090": MinerOption(
        name="RTX 4090",
        hashrate_th=0.13,
        power_w=450,
        price_usd=1600.0,
        efficiency_j_per_th=3461.0,
    ),
    "RTX 3080": MinerOption(
        name="RTX 3080",
        hashrate_th=0.1,
        power_w=320,
        price_usd=800.0,
        efficiency_j_per_th=3200.0,
    ),
}
