"""
Poll Scheduler - Fixed-count run loop

Runs POLL_ITERATIONS iterations of the poll job, sleeping POLL_INTERVAL_MS
after each one, and stops on the first error.

States: start -> iterating(1..N) -> done, with failure reachable from any
iteration. There is no recovery path; a failed run exits with status 1.

Usage:
    python -m apps.poller
"""

import asyncio
import logging
import sys
from typing import Awaitable, Callable

from apps.poller.fetcher import FactFetcher
from apps.poller.poller_job import run_iteration
from utils.config import settings
from utils.logging import setup_logging
from utils.store import JsonFileStore

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class PollScheduler:
    """
    Sequential runner for a fixed number of poll iterations.

    Owns the iteration counter; the fetcher and store are opened by the
    caller and reused for every iteration.
    """

    def __init__(
        self,
        fetcher: FactFetcher,
        store: JsonFileStore,
        iterations: int = 5,
        interval_ms: int = 5000,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """
        Initialize scheduler.

        Args:
            fetcher: Open fetcher for the upstream API
            store: Open record store
            iterations: Number of iterations to run
            interval_ms: Delay after each successful iteration
            sleep: Coroutine used for the delay
        """
        if iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {iterations}")
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be >= 0, got {interval_ms}")

        self.fetcher = fetcher
        self.store = store
        self.iterations = iterations
        self.interval_ms = interval_ms
        self._sleep = sleep
        self.count = 0

    async def run(self) -> list[str]:
        """
        Run every iteration in order.

        Returns:
            Keys of the saved records, in save order

        Raises:
            PollerError: On the first failing iteration
        """
        keys: list[str] = []

        while self.count < self.iterations:
            self.count += 1
            logger.debug("Iteration %d/%d", self.count, self.iterations)

            keys.append(await run_iteration(self.fetcher, self.store))
            await self._sleep(self.interval_ms / 1000)

        logger.debug("Run complete: %d records saved", len(keys))
        return keys


async def main() -> None:
    """Main entry point for the poller."""
    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)
    logger.info(
        "Starting up",
        extra={
            "url": settings.POLL_URL,
            "iterations": settings.POLL_ITERATIONS,
            "interval_ms": settings.POLL_INTERVAL_MS,
            "store_dir": settings.STORE_DIR,
        },
    )

    try:
        store = JsonFileStore.open(settings.STORE_DIR)
        async with FactFetcher(settings.POLL_URL, timeout=settings.HTTP_TIMEOUT) as fetcher:
            scheduler = PollScheduler(
                fetcher,
                store,
                iterations=settings.POLL_ITERATIONS,
                interval_ms=settings.POLL_INTERVAL_MS,
            )
            await scheduler.run()
    except Exception as e:
        logger.error("Poller failed: %s", e, extra={"error": str(e)}, exc_info=True)
        sys.exit(1)


def cli() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
