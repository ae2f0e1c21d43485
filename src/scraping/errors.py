"""Errors raised by scrape engines."""

from typing import Any


class ScrapeError(Exception):
    """Base exception for scrape engine errors."""


class EngineError(ScrapeError):
    """The engine answered, but not with something usable."""

    def __init__(self, message: str, cause: Any = None) -> None:
        super().__init__(message)
        self.cause = cause


class EngineTimeoutError(ScrapeError):
    """The engine did not answer within the effective timeout."""

    def __init__(self, message: str, timeout: float) -> None:
        super().__init__(message)
        self.timeout = timeout


class AddFeatureError(ScrapeError):
    """The document needs a pipeline feature this engine does not provide."""

    def __init__(self, features: list[str]) -> None:
        super().__init__(f"New feature required: {', '.join(features)}")
        self.features = features


class ConfigurationError(ScrapeError):
    """Required engine configuration is missing."""
