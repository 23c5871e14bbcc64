"""
Poll Job - One fetch/validate/decode/save pass

A single iteration of the run loop. Any failure propagates as a PollerError
subclass; nothing is written to the store unless the fact decoded cleanly.
"""

import logging

from apps.poller.fetcher import FactFetcher, check_status
from utils.schemas import CatFact
from utils.store import JsonFileStore

logger = logging.getLogger(__name__)


async def run_iteration(fetcher: FactFetcher, store: JsonFileStore) -> str:
    """
    Fetch one fact and persist it.

    Args:
        fetcher: Open fetcher for the upstream API
        store: Open record store

    Returns:
        Key of the saved record

    Raises:
        TransportError: If the request fails
        HttpStatusError: If upstream answers 4xx/5xx
        DecodeError: If the body does not match the CatFact schema
        StoreError: If the record cannot be written
    """
    response = await fetcher.fetch()
    check_status(response)

    fact = CatFact.from_json(response.content)
    key = store.save(fact)

    logger.info("Written one file with key: %s", key, extra={"key": key})
    return key
