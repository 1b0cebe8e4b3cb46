"""requests-backed quotes provider."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..domain import Quote
from ..utils import FetchError
from .normalization import parse_quotes
from .providers import QuotesProvider

logger = logging.getLogger(__name__)

STATUS_ERROR_MESSAGE = "Failed to fetch data. Please try again later."


class HttpQuotesProvider(QuotesProvider):
    """Single GET against a configured endpoint returning ``{symbol: {"usd": n}}``."""

    def __init__(self, url: str, timeout: Optional[float] = 10.0, session: Optional[requests.Session] = None) -> None:
        self.url = url
        self.timeout = timeout
        self._http = session or requests

    def fetch_quotes(self) -> dict[str, Quote]:
        try:
            response = self._http.get(self.url, timeout=self.timeout)
        except requests.RequestException as err:
            raise FetchError(f"Network error: {err}") from err

        if not 200 <= response.status_code < 300:
            logger.warning(f"Price endpoint returned HTTP {response.status_code}")
            raise FetchError(STATUS_ERROR_MESSAGE)

        try:
            payload = response.json()
        except ValueError as err:
            raise FetchError(f"Unexpected response: body is not valid JSON ({err})") from err

        quotes = parse_quotes(payload)
        logger.debug(f"Fetched {len(quotes)} quotes")
        return quotes
