"""
Fact Fetcher - HTTP access to the upstream API

Wraps a single httpx.AsyncClient that is opened once and reused for every
iteration of a run. No retries: a transport failure is raised immediately.

Usage:
    from apps.poller.fetcher import FactFetcher

    async with FactFetcher(settings.POLL_URL) as fetcher:
        response = await fetcher.fetch()
"""

import logging
from typing import Optional

import httpx

from utils.errors import HttpStatusError, TransportError

logger = logging.getLogger(__name__)


class FactFetcher:
    """Issues GET requests to a fixed URL."""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize fetcher and its HTTP client.

        Args:
            url: Endpoint polled on every fetch
            timeout: Transport timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.url = url
        self.client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def fetch(self) -> httpx.Response:
        """
        GET the configured URL.

        Returns:
            The response, whatever its status

        Raises:
            TransportError: If no response was received
        """
        try:
            response = await self.client.get(self.url)
        except httpx.TransportError as e:
            raise TransportError(self.url, str(e) or type(e).__name__) from e

        logger.debug("Fetched %s: status=%s", self.url, response.status_code)
        return response

    async def close(self) -> None:
        """Close the HTTP client."""
        if not self.client.is_closed:
            await self.client.aclose()

    async def __aenter__(self) -> "FactFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def check_status(response: httpx.Response) -> None:
    """
    Reject client and server error responses.

    Raises:
        HttpStatusError: If the status is in 400-599
    """
    if 400 <= response.status_code <= 599:
        raise HttpStatusError(str(response.request.url), response.status_code)
