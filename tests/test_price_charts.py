from __future__ import annotations

import pandas as pd

from crypto_dash.data import PLACEHOLDER_GLYPH, icon_url
from crypto_dash.viz import make_sparkline


def test_sparkline_plots_frame_points_on_category_axis() -> None:
    frame = pd.DataFrame({"timestamp": ["12:00:00", "12:00:03"], "price": [1.0, 2.0]})

    fig = make_sparkline(frame, title="bitcoin Price (USD)")

    assert len(fig.data) == 1
    assert list(fig.data[0].x) == ["12:00:00", "12:00:03"]
    assert list(fig.data[0].y) == [1.0, 2.0]
    assert fig.data[0].name == "bitcoin Price (USD)"
    assert fig.layout.xaxis.type == "category"
    assert fig.layout.height == 120


def test_sparkline_for_empty_frame_shows_placeholder() -> None:
    fig = make_sparkline(pd.DataFrame(columns=["timestamp", "price"]), title="x")

    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == "Waiting for data"


def test_icon_lookup_falls_back_to_placeholder() -> None:
    assert icon_url("Bitcoin").startswith("https://assets.coingecko.com/")
    assert icon_url("not-a-coin") is None
    assert PLACEHOLDER_GLYPH == "?"
