"""Custom exceptions."""


class FetchError(Exception):
    """Raised when the price endpoint fails to return usable quotes."""


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""
