"""Process-local price series state."""

from .series import Series, SeriesStore

__all__ = ["Series", "SeriesStore"]
