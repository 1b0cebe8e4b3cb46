"""crypto_dash package with UI-agnostic logic for the dashboard."""

from .domain import PollMode, Quote, VisibleAsset

__all__ = ["PollMode", "Quote", "VisibleAsset"]
