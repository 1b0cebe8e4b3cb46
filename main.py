"""Streamlit entrypoint for the cryptocurrency tracker dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

# --- Ensure src is on path for local imports ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

import pandas as pd
import streamlit as st

from crypto_dash import VisibleAsset  # noqa: E402
from crypto_dash.analytics import build_session_summary, session_change_pct  # noqa: E402
from crypto_dash.config import Settings, get_settings  # noqa: E402
from crypto_dash.data import PLACEHOLDER_GLYPH, HttpQuotesProvider, icon_url  # noqa: E402
from crypto_dash.services import (  # noqa: E402
    Poller,
    PollingSession,
    chart_frame,
    display_name,
    format_price,
    visible_assets,
)
from crypto_dash.utils import ConfigError, get_logger  # noqa: E402
from crypto_dash.viz import make_sparkline  # noqa: E402

GRID_COLUMNS = 3


def get_poller(settings: Settings) -> Poller:
    """Create the poller once per browser session and start polling."""
    if "poller" not in st.session_state:
        provider = HttpQuotesProvider(settings.api_url, timeout=settings.request_timeout)
        poller = Poller(
            provider,
            interval=settings.poll_interval,
            mode=settings.poll_mode,
            capacity=settings.series_capacity,
        )
        poller.start()
        st.session_state.poller = poller
    return st.session_state.poller


def handle_refresh() -> None:
    st.session_state.poller.refresh()


def render_toolbar() -> None:
    col_search, col_refresh = st.columns([6, 1], vertical_alignment="bottom")
    with col_search:
        st.text_input(
            "Search",
            key="search_term",
            placeholder="Search Cryptocurrency...",
            label_visibility="collapsed",
        )
    with col_refresh:
        st.button("🔄 Refresh", on_click=handle_refresh, width="stretch")


def render_card(asset: VisibleAsset, session: PollingSession, settings: Settings) -> None:
    with st.container(border=True):
        name_col, icon_col = st.columns([4, 1])
        name_col.subheader(display_name(asset.name))
        url = icon_url(asset.name)
        if url:
            icon_col.image(url, width=40)
        else:
            icon_col.markdown(f"### {PLACEHOLDER_GLYPH}")

        change = session_change_pct(session.store, asset.name)
        st.metric(
            "Price (USD)",
            format_price(asset.price),
            delta=f"{change:+.2f}%" if change is not None else None,
        )

        frame = chart_frame(session.store, asset.name, settings.chart_window)
        chart = make_sparkline(frame, title=f"{asset.name} Price (USD)")
        st.plotly_chart(chart, key=f"chart-{asset.name}", config={"displayModeBar": False})


def render_error(message: str) -> None:
    st.error(message)
    st.button("Retry", key="retry", on_click=handle_refresh)


def render_summary(session: PollingSession) -> None:
    with st.expander("📊 Session summary"):
        summary = build_session_summary(session.store)
        if summary.empty:
            st.info("No prices collected in this session yet.")
            return
        display_summary = summary.set_index("symbol")
        display_summary["change_pct"] = display_summary["change_pct"].map(
            lambda value: "n/a" if pd.isna(value) else f"{value:.2f}%"
        )
        st.dataframe(display_summary, width="stretch")


def render_board(poller: Poller, settings: Settings) -> None:
    @st.fragment(run_every=settings.poll_interval)
    def live_board() -> None:
        if poller.due():
            with st.spinner("Loading..."):
                poller.poll()

        session = poller.session
        if session.show_loader:
            st.info("Loading prices...", icon="⏳")
            return
        if session.error:
            render_error(session.error)
            return

        assets = visible_assets(session.quotes, st.session_state.get("search_term", ""))
        if not assets:
            st.info("No cryptocurrency matches your search.")
        for start in range(0, len(assets), GRID_COLUMNS):
            columns = st.columns(GRID_COLUMNS)
            for column, asset in zip(columns, assets[start : start + GRID_COLUMNS]):
                with column:
                    render_card(asset, session, settings)

        if session.last_updated is not None:
            st.caption(f"Last updated {session.last_updated:%H:%M:%S} · {session.ticks} updates this session")
        render_summary(session)

    live_board()


def main() -> None:
    st.set_page_config(page_title="Crypto Tracker", layout="wide")
    st.title("Cryptocurrency Tracker Dashboard")

    try:
        settings = get_settings()
    except ConfigError as err:
        st.error(f"Invalid configuration: {err}")
        return

    get_logger("crypto_dash", settings.log_level)
    poller = get_poller(settings)
    render_toolbar()
    render_board(poller, settings)


if __name__ == "__main__":
    main()
