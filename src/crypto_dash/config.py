"""Environment-driven settings for the dashboard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .domain import PollMode
from .utils.errors import ConfigError

DEFAULT_COINS = [
    "bitcoin",
    "ethereum",
    "tether",
    "binancecoin",
    "solana",
    "ripple",
    "cardano",
    "dogecoin",
    "polkadot",
    "litecoin",
]
DEFAULT_API_URL = (
    "https://api.coingecko.com/api/v3/simple/price"
    f"?ids={','.join(DEFAULT_COINS)}&vs_currencies=usd"
)
POLL_MODES = ("continuous", "single")


def parse_float(name: str, value: str | None, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as err:
        raise ConfigError(f"{name} must be a number, got {value!r}") from err


def parse_int(name: str, value: str | None, default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as err:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from err


def parse_mode(value: str | None) -> PollMode:
    if value is None or value.strip() == "":
        return "continuous"
    mode = value.strip().lower()
    if mode not in POLL_MODES:
        raise ConfigError(f"CRYPTO_DASH_POLL_MODE must be one of {POLL_MODES}, got {value!r}")
    return mode  # type: ignore[return-value]


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    poll_interval: float = 3.0
    poll_mode: PollMode = "continuous"
    series_capacity: Optional[int] = 300
    chart_window: int = 3
    request_timeout: Optional[float] = 10.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ConfigError("CRYPTO_DASH_POLL_INTERVAL must be positive")
        if self.chart_window < 1:
            raise ConfigError("CRYPTO_DASH_CHART_WINDOW must be at least 1")
        if self.series_capacity is not None and self.series_capacity < self.chart_window:
            raise ConfigError("CRYPTO_DASH_SERIES_CAPACITY must not be smaller than the chart window")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigError("CRYPTO_DASH_REQUEST_TIMEOUT must be positive, or 0 for no timeout")
        # getLevelName maps known names to their numeric level and echoes unknown ones back
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"CRYPTO_DASH_LOG_LEVEL must be a logging level name, got {self.log_level!r}")

    @staticmethod
    def from_env() -> "Settings":
        capacity = parse_int("CRYPTO_DASH_SERIES_CAPACITY", os.getenv("CRYPTO_DASH_SERIES_CAPACITY"), 300)
        timeout = parse_float("CRYPTO_DASH_REQUEST_TIMEOUT", os.getenv("CRYPTO_DASH_REQUEST_TIMEOUT"), 10.0)
        if capacity < 0:
            raise ConfigError(f"CRYPTO_DASH_SERIES_CAPACITY must be 0 or positive, got {capacity}")
        if timeout < 0:
            raise ConfigError(f"CRYPTO_DASH_REQUEST_TIMEOUT must be 0 or positive, got {timeout}")
        return Settings(
            api_url=os.getenv("CRYPTO_DASH_API_URL") or DEFAULT_API_URL,
            poll_interval=parse_float("CRYPTO_DASH_POLL_INTERVAL", os.getenv("CRYPTO_DASH_POLL_INTERVAL"), 3.0),
            poll_mode=parse_mode(os.getenv("CRYPTO_DASH_POLL_MODE")),
            series_capacity=capacity if capacity > 0 else None,
            chart_window=parse_int("CRYPTO_DASH_CHART_WINDOW", os.getenv("CRYPTO_DASH_CHART_WINDOW"), 3),
            request_timeout=timeout if timeout > 0 else None,
            log_level=(os.getenv("CRYPTO_DASH_LOG_LEVEL") or "INFO").upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
