"""Normalize price endpoint payloads into quotes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..domain import Quote
from ..utils import FetchError

PRICE_FIELD = "usd"


def parse_quotes(payload: Any) -> dict[str, Quote]:
    """Convert a ``{symbol: {"usd": number}}`` payload to quotes, keeping key order."""
    if not isinstance(payload, Mapping):
        raise FetchError(f"Unexpected response: expected a JSON object, got {type(payload).__name__}")

    quotes: dict[str, Quote] = {}
    for symbol, entry in payload.items():
        quotes[str(symbol)] = Quote(symbol=str(symbol), price_usd=_extract_price(symbol, entry))
    return quotes


def _extract_price(symbol: Any, entry: Any) -> float:
    if not isinstance(entry, Mapping) or PRICE_FIELD not in entry:
        raise FetchError(f"Unexpected response: no {PRICE_FIELD!r} price for {symbol!r}")
    price = entry[PRICE_FIELD]
    # bool is an int subclass
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise FetchError(f"Unexpected response: {PRICE_FIELD!r} price for {symbol!r} is not a number")
    try:
        return float(price)
    except OverflowError as err:
        raise FetchError(f"Unexpected response: {PRICE_FIELD!r} price for {symbol!r} is out of range") from err
