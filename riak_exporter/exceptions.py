"""Exception hierarchy for the exporter.

``ConfigurationError`` is fatal and only raised at startup. ``ScrapeError``
and its subclasses describe a failed scrape step; they are caught inside the
collector and turned into metric values, never surfaced to HTTP clients.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when application configuration is invalid."""

    pass


class ScrapeError(RuntimeError):
    """Base class for failures while scraping the Riak node."""

    def __init__(self, message: str, *, url: str | None = None):
        detail = message if url is None else f"{message} (url={url})"
        super().__init__(detail)
        self.url = url


class RiakUnreachable(ScrapeError):
    """Raised when the Riak HTTP API cannot be reached or times out."""


class RiakNodeDown(ScrapeError):
    """Raised when the ping endpoint answers with a non-200 status."""

    def __init__(self, status_code: int, *, url: str | None = None):
        super().__init__(f"Riak node is down (status={status_code})", url=url)
        self.status_code = status_code


class StatsFetchFailed(ScrapeError):
    """Raised when the stats endpoint fails or its body cannot be read."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class StatsPayloadInvalid(ScrapeError):
    """Raised when the stats body is not a single JSON object."""
