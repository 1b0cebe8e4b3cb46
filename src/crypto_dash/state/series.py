"""In-memory per-asset price series."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

SERIES_COLUMNS = ["timestamp", "price"]


@dataclass
class Series:
    """Index-aligned prices and timestamp labels for one asset."""

    prices: deque[float] = field(default_factory=deque)
    timestamps: deque[str] = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.prices)

    def points(self) -> Iterator[tuple[str, float]]:
        return zip(self.timestamps, self.prices)


class SeriesStore:
    """Append-only mapping of symbol to :class:`Series`.

    ``capacity`` bounds each series to its most recent points; ``None`` keeps
    every point for the lifetime of the store.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be positive or None")
        self.capacity = capacity
        self._series: dict[str, Series] = {}

    def append(self, symbol: str, price: float, timestamp: str) -> None:
        series = self._series.get(symbol)
        if series is None:
            series = Series(deque(maxlen=self.capacity), deque(maxlen=self.capacity))
            self._series[symbol] = series
        series.prices.append(price)
        series.timestamps.append(timestamp)

    def get(self, symbol: str) -> Series:
        return self._series.get(symbol) or Series()

    def symbols(self) -> list[str]:
        return list(self._series)

    def tail(self, symbol: str, n: int) -> list[tuple[str, float]]:
        """Return the last ``n`` (timestamp, price) pairs in append order."""
        if n <= 0:
            return []
        points = list(self.get(symbol).points())
        return points[-n:]

    def to_frame(self, symbol: str, last: Optional[int] = None) -> pd.DataFrame:
        points = self.tail(symbol, last) if last is not None else list(self.get(symbol).points())
        return pd.DataFrame(points, columns=SERIES_COLUMNS)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._series

    def __len__(self) -> int:
        return len(self._series)
