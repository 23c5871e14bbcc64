"""setup_logging text/json output."""

from __future__ import annotations

import io
import logging

import orjson
import pytest

from utils.logging import get_logger, setup_logging


@pytest.fixture()
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format_includes_extra(restore_root):
    stream = io.StringIO()
    setup_logging(level="INFO", format_type="json", stream=stream)

    get_logger("poller.test").info("Written one file with key: %s", "abc", extra={"key": "abc"})

    line = orjson.loads(stream.getvalue().strip())
    assert line["message"] == "Written one file with key: abc"
    assert line["level"] == "INFO"
    assert line["logger"] == "poller.test"
    assert line["key"] == "abc"


def test_text_format_and_level(restore_root):
    stream = io.StringIO()
    setup_logging(level="warning", format_type="text", stream=stream)

    logger = get_logger("poller.test")
    logger.info("hidden")
    logger.warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert " - poller.test - WARNING - shown" in output


def test_setup_is_idempotent(restore_root):
    stream = io.StringIO()
    setup_logging(stream=stream)
    setup_logging(stream=stream)

    get_logger("poller.test").info("once")

    assert stream.getvalue().count("once") == 1
