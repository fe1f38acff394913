from __future__ import annotations


class CacheError(Exception):
    """Base error for the fetch cache."""


class ValidationError(CacheError):
    """Raised when configuration or user input is invalid."""


class ExpiredError(CacheError):
    """Raised when a cached item is older than the expiration window."""

    def __init__(self, url: str) -> None:
        super().__init__(f"The item {url} is out of date.")
        self.url = url


class DuplicateKeyError(CacheError):
    """Raised when appending a key that is already stored."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Unable to append an existing value {url}. Use set instead.")
        self.url = url


class ExternalServiceError(CacheError):
    """Raised when fetching a remote resource fails."""
