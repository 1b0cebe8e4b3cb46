"""Static icon table for well-known assets."""

from __future__ import annotations

from typing import Optional

PLACEHOLDER_GLYPH = "?"

ICON_URLS = {
    "bitcoin": "https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
    "ethereum": "https://assets.coingecko.com/coins/images/279/large/ethereum.png",
    "tether": "https://assets.coingecko.com/coins/images/325/large/Tether.png",
    "binancecoin": "https://assets.coingecko.com/coins/images/825/large/bnb-icon2_2x.png",
    "solana": "https://assets.coingecko.com/coins/images/4128/large/solana.png",
    "ripple": "https://assets.coingecko.com/coins/images/44/large/xrp-symbol-white-128.png",
    "cardano": "https://assets.coingecko.com/coins/images/975/large/cardano.png",
    "dogecoin": "https://assets.coingecko.com/coins/images/5/large/dogecoin.png",
    "polkadot": "https://assets.coingecko.com/coins/images/12171/large/polkadot.png",
    "litecoin": "https://assets.coingecko.com/coins/images/2/large/litecoin.png",
    "tron": "https://assets.coingecko.com/coins/images/1094/large/tron-logo.png",
    "chainlink": "https://assets.coingecko.com/coins/images/877/large/chainlink-new-logo.png",
}


def icon_url(symbol: str) -> Optional[str]:
    """Return the icon URL for a symbol, or None when a placeholder should render."""
    return ICON_URLS.get(symbol.lower())
