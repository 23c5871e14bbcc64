"""
Poller error taxonomy.

Every failure that ends a run is raised as one of these, with the underlying
library exception chained as ``__cause__``.
"""


class PollerError(Exception):
    """Base class for errors that abort a polling run."""


class TransportError(PollerError):
    """The request never produced a response (DNS, connect, timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url


class HttpStatusError(PollerError):
    """The upstream answered with a 4xx or 5xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Server responded with: {status_code}")
        self.url = url
        self.status_code = status_code


class DecodeError(PollerError):
    """The response body does not match the record schema."""


class StoreError(PollerError):
    """The record store could not persist or read a record."""
