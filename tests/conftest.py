"""Shared fixtures: sample payloads and a temp store."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from tests.fakes import SAMPLE_FACT
from utils.store import JsonFileStore


@pytest.fixture()
def fact_payload() -> dict[str, Any]:
    """A fresh copy of a valid upstream payload."""
    return copy.deepcopy(SAMPLE_FACT)


@pytest.fixture()
def store(tmp_path) -> JsonFileStore:
    return JsonFileStore.open(tmp_path / "data")


@pytest.fixture()
def distinct_facts(fact_payload) -> list[dict[str, Any]]:
    """Five payloads that differ in id, text and revision."""
    facts = []
    for n in range(5):
        fact = copy.deepcopy(fact_payload)
        fact["_id"] = f"fact-{n}"
        fact["text"] = f"Cat fact number {n}."
        fact["__v"] = n
        facts.append(fact)
    return facts
