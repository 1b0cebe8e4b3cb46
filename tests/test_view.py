from __future__ import annotations

from crypto_dash.data import parse_quotes
from crypto_dash.domain import VisibleAsset
from crypto_dash.services import chart_frame, display_name, format_price, visible_assets
from crypto_dash.state import SeriesStore


def test_visible_assets_filters_case_insensitive_substring() -> None:
    quotes = parse_quotes({"BTCUSD": {"usd": 1.0}, "ethereum": {"usd": 2.0}, "wrapped-bitcoin": {"usd": 3.0}})

    assert [a.name for a in visible_assets(quotes, "btc")] == ["BTCUSD"]
    assert [a.name for a in visible_assets(quotes, "BITCOIN")] == ["wrapped-bitcoin"]
    assert [a.name for a in visible_assets(quotes, "")] == ["BTCUSD", "ethereum", "wrapped-bitcoin"]
    assert visible_assets(quotes, "xyz") == []


def test_visible_assets_without_data_is_empty() -> None:
    assert visible_assets(None, "btc") == []
    assert visible_assets({}, "") == []


def test_single_bitcoin_quote_renders_expected_card_values() -> None:
    quotes = parse_quotes({"bitcoin": {"usd": 50000.5}})

    assets = visible_assets(quotes, "")

    assert assets == [VisibleAsset(name="bitcoin", price=50000.5)]
    assert format_price(assets[0].price) == "$50000.50"
    assert display_name(assets[0].name) == "Bitcoin"


def test_format_price_uses_two_fixed_decimals_without_grouping() -> None:
    assert format_price(0.123456) == "$0.12"
    assert format_price(1234567.0) == "$1234567.00"
    assert format_price(3) == "$3.00"


def test_display_name_capitalizes_first_letter_only() -> None:
    assert display_name("ETHEREUM") == "Ethereum"
    assert display_name("binancecoin") == "Binancecoin"
    assert display_name("") == ""


def test_chart_frame_uses_last_window_points() -> None:
    store = SeriesStore()
    for i, stamp in enumerate(["12:00:00", "12:00:03", "12:00:06", "12:00:09"]):
        store.append("bitcoin", 100.0 + i, stamp)

    frame = chart_frame(store, "bitcoin")

    assert frame["timestamp"].tolist() == ["12:00:03", "12:00:06", "12:00:09"]
    assert frame["price"].tolist() == [101.0, 102.0, 103.0]
    assert len(chart_frame(store, "bitcoin", window=10)) == 4
