"""
Poller App - Fixed-count fact collector

Responsibilities:
- Fetch one random cat fact per iteration from the upstream API (httpx)
- Fail fast on 4xx/5xx responses and transport errors
- Validate the body against the CatFact schema (pydantic)
- Persist each fact as its own JSON file in the local store
- Sleep POLL_INTERVAL_MS between iterations, stop after POLL_ITERATIONS

Output:
- data/<uuid>.json, one file per fetched fact
- One "Written one file with key" log line per saved fact

Usage:
    python -m apps.poller
"""
