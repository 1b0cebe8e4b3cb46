"""Summary table helpers for session series."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from ..state import SeriesStore

SUMMARY_COLUMNS = ["symbol", "first_price", "last_price", "change_pct", "points", "first_seen", "last_seen"]


def session_change_pct(store: SeriesStore, symbol: str) -> Optional[float]:
    """Percent change from the first to the last retained price, or None."""
    prices = store.get(symbol).prices
    if len(prices) < 2 or prices[0] == 0:
        return None
    return (prices[-1] / prices[0] - 1) * 100


def build_session_summary(store: SeriesStore) -> pd.DataFrame:
    """Compute first/last price and change per symbol over the retained window."""
    rows = []
    for symbol in store.symbols():
        frame = store.to_frame(symbol)
        if frame.empty:
            continue
        rows.append(
            {
                "symbol": symbol,
                "first_price": frame["price"].iloc[0],
                "last_price": frame["price"].iloc[-1],
                "points": len(frame),
                "first_seen": frame["timestamp"].iloc[0],
                "last_seen": frame["timestamp"].iloc[-1],
            }
        )

    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    summary = pd.DataFrame(rows)
    change = (summary["last_price"] / summary["first_price"] - 1) * 100
    summary["change_pct"] = change.where(summary["first_price"] != 0)

    return summary[SUMMARY_COLUMNS]
