"""Session analytics."""

from .summary import build_session_summary, session_change_pct

__all__ = ["build_session_summary", "session_change_pct"]
