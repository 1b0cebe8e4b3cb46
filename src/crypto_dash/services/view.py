"""Read-only derivations the dashboard renders from session state."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

import pandas as pd

from ..domain import Quote, VisibleAsset
from ..state import SeriesStore

DEFAULT_CHART_WINDOW = 3


def visible_assets(quotes: Optional[Mapping[str, Quote]], search_term: str) -> list[VisibleAsset]:
    """Filter the latest quotes by case-insensitive substring match on the symbol.

    Order follows the fetch result.
    """
    if not quotes:
        return []
    needle = (search_term or "").lower()
    return [
        VisibleAsset(name=symbol, price=quote.price_usd)
        for symbol, quote in quotes.items()
        if needle in symbol.lower()
    ]


def format_price(price: float) -> str:
    return f"${price:.2f}"


def display_name(symbol: str) -> str:
    if not symbol:
        return symbol
    return symbol[0].upper() + symbol[1:].lower()


def chart_frame(store: SeriesStore, symbol: str, window: int = DEFAULT_CHART_WINDOW) -> pd.DataFrame:
    """Last ``window`` points of a symbol's series as a (timestamp, price) frame."""
    return store.to_frame(symbol, last=window)
