from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from crypto_dash.domain import Quote
from crypto_dash.utils import FetchError


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeProvider:
    """Returns queued payloads in order; exceptions in the queue are raised."""

    def __init__(self, *results: dict[str, float] | Exception) -> None:
        self.results = list(results)
        self.calls = 0

    def fetch_quotes(self) -> dict[str, Quote]:
        self.calls += 1
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return {symbol: Quote(symbol, price) for symbol, price in result.items()}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 5, 12, 0, 0))


@pytest.fixture
def network_error() -> FetchError:
    return FetchError("Network error: connection refused")


@pytest.fixture
def make_provider():
    return FakeProvider
