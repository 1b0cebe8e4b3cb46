from __future__ import annotations

"""Domain models and configuration types."""

from dataclasses import dataclass
from typing import Literal

PollMode = Literal["continuous", "single"]


@dataclass(frozen=True, slots=True)
class Quote:
    """One USD snapshot for one asset at fetch time."""

    symbol: str
    price_usd: float


@dataclass(frozen=True, slots=True)
class VisibleAsset:
    name: str
    price: float
