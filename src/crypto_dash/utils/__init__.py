"""Utility helpers."""

from .errors import ConfigError, FetchError
from .logging import get_logger

__all__ = ["ConfigError", "FetchError", "get_logger"]
