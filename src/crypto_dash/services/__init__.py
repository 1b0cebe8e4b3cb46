"""Service layer entry points."""

from .poller import Poller, PollerState, PollingSession
from .view import chart_frame, display_name, format_price, visible_assets

__all__ = [
    "Poller",
    "PollerState",
    "PollingSession",
    "chart_frame",
    "display_name",
    "format_price",
    "visible_assets",
]
