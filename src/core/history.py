# src/core/history.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List

import pandas as pd

from src.config import settings


@dataclass(frozen=True)
class MetricsSample:
    time_s: int
    hashrate_th: float
    power_w: float
    temperature_c: float
    hourly_profit_usd: float
    hourly_revenue_usd: float
    efficiency_th_per_kw: float = 0.0


class HistoryBuffer:
    """
    Sliding window over the most recent samples, oldest first.

    Appending past `max_samples` evicts the oldest sample.
    """

    def __init__(
        self,
        samples: Iterable[MetricsSample] = (),
        max_samples: int = settings.HISTORY_MAX_SAMPLES,
    ) -> None:
        self.max_samples = max_samples
        self._samples: Deque[MetricsSample] = deque(samples, maxlen=max_samples)

    def append(self, sample: MetricsSample) -> None:
        self._samples.append(sample)

    def with_sample(self, sample: MetricsSample) -> "HistoryBuffer":
        """Copy of this buffer with `sample` appended; self is untouched."""
        buf = HistoryBuffer(self._samples, max_samples=self.max_samples)
        buf.append(sample)
        return buf

    def samples(self) -> List[MetricsSample]:
        return list(self._samples)

    def latest(self) -> MetricsSample | None:
        return self._samples[-1] if self._samples else None

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[MetricsSample]:
        return iter(list(self._samples))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoryBuffer):
            return NotImplemented
        return (
            self.max_samples == other.max_samples
            and list(self._samples) == list(other._samples)
        )

    def __repr__(self) -> str:
        return f"HistoryBuffer(len={len(self)}, max_samples={self.max_samples})"

    def to_dataframe(self) -> pd.DataFrame:
        columns = [
            "time_s",
            "hashrate_th",
            "power_w",
            "temperature_c",
            "hourly_profit_usd",
            "hourly_revenue_usd",
            "efficiency_th_per_kw",
        ]
        if not self._samples:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [
                {
                    "time_s": s.time_s,
                    "hashrate_th": s.hashrate_th,
                    "power_w": s.power_w,
                    "temperature_c": s.temperature_c,
                    "hourly_profit_usd": s.hourly_profit_usd,
                    "hourly_revenue_usd": s.hourly_revenue_usd,
                    "efficiency_th_per_kw": s.efficiency_th_per_kw,
                }
                for s in self._samples
            ],
            columns=columns,
        )


def _format_number(value: float) -> str:
    # Integral floats drop the ".0" (70.0 -> "70"); others use the shortest
    # round-trip repr (1.1 -> "1.1").
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def export_csv(buffer: Iterable[MetricsSample]) -> str:
    """
    Serialise the buffer to CSV text.

    Header row first, then one row per sample in chronological order, joined
    by newlines with no trailing newline. An empty buffer yields the header
    alone.
    """
    lines = [",".join(settings.EXPORT_HEADER)]
    for s in buffer:
        lines.append(
            ",".join(
                _format_number(v)
                for v in (
                    s.time_s,
                    s.hashrate_th,
                    s.power_w,
                    s.temperature_c,
                    s.hourly_profit_usd,
                    s.hourly_revenue_usd,
                )
            )
        )
    return "\n".join(lines)


def export_csv_bytes(buffer: Iterable[MetricsSample]) -> bytes:
    return export_csv(buffer).encode(settings.EXPORT_ENCODING)
