"""Provider protocol for fetching quotes."""

from __future__ import annotations

from typing import Protocol

from ..domain import Quote


class QuotesProvider(Protocol):
    """Abstraction for quote sources."""

    def fetch_quotes(self) -> dict[str, Quote]:
        """Fetch the current USD quote for every asset the source reports."""
        raise NotImplementedError
