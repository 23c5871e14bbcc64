"""Fake upstream helpers built on httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import orjson

from apps.poller.fetcher import FactFetcher

FACT_URL = "https://cat-fact.test/facts/random"

SAMPLE_FACT: dict[str, Any] = {
    "used": False,
    "source": "user",
    "type": "cat",
    "deleted": False,
    "_id": "591f98803b90f7150a19c229",
    "__v": 0,
    "text": "In an average year, cat owners in the United States spend over $2 billion on cat food.",
    "updatedAt": "2020-08-23T20:20:01.611Z",
    "createdAt": "2018-01-04T01:10:54.673Z",
    "status": {"verified": True, "sentCount": 1},
    "user": "5a9ac18c7478810ea6c06381",
}

Handler = Callable[[httpx.Request], httpx.Response]


def scripted_handler(*responses: httpx.Response) -> Handler:
    """Serve ``responses`` in order and record every request seen."""
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        handler.requests.append(request)
        return queue.pop(0)

    handler.requests = []
    return handler


def ok(body: dict[str, Any]) -> httpx.Response:
    return httpx.Response(200, content=orjson.dumps(body))


def make_fetcher(handler: Handler) -> FactFetcher:
    return FactFetcher(FACT_URL, transport=httpx.MockTransport(handler))
