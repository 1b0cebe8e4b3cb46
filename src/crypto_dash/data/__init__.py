"""Data access layer."""

from .http_provider import HttpQuotesProvider
from .icons import PLACEHOLDER_GLYPH, icon_url
from .normalization import parse_quotes
from .providers import QuotesProvider

__all__ = ["HttpQuotesProvider", "PLACEHOLDER_GLYPH", "QuotesProvider", "icon_url", "parse_quotes"]
