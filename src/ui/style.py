# src/ui/style.py

from __future__ import annotations

"""
UI / visual style constants for the dashboard.

Keep anything purely presentational in here (colours, line widths, sizes),
and keep simulation constants in src/config/settings.py.
"""

# ---------------------------------------------------------------------------
# Chart sizing
# ---------------------------------------------------------------------------

LINE_WIDTH_PRIMARY = 2.0
CHART_HEIGHT_PX = 320


# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

COLOR_HASHRATE = "#8884d8"  # lavender
COLOR_POWER = "#82ca9d"  # mint
COLOR_REVENUE = "#10B981"  # green (money in)
COLOR_ELECTRICITY = "#EF4444"  # red
COLOR_POOL_FEE = "#F59E0B"  # amber
COLOR_PROFIT = "#3B82F6"  # blue
COLOR_HARDWARE_BAR = "#ffc658"

BREAKDOWN_COLORS = {
    "Revenue": COLOR_REVENUE,
    "Electricity": COLOR_ELECTRICITY,
    "Pool Fee": COLOR_POOL_FEE,
    "Net Profit": COLOR_PROFIT,
}

COLOR_POSITIVE = "#16a34a"
COLOR_NEGATIVE = "#dc2626"
