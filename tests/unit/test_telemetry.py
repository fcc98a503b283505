#
# tests/unit/test_telemetry.py
#
"""Tests for structlog setup and processors."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from nestest.telemetry import setup_logging
from nestest.telemetry.logger.base import LOG_EMOJIS
from nestest.telemetry.logger.processors import add_emoji_processor, remove_extra_keys_processor


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    structlog.reset_defaults()


def test_emoji_follows_level() -> None:
    event = add_emoji_processor(None, "error", {"event": "broke"})
    assert event["event"] == f"{LOG_EMOJIS[logging.ERROR]} broke"


def test_emoji_key_overrides_level() -> None:
    event = add_emoji_processor(None, "info", {"event": "green", "emoji_key": "pass"})
    event = remove_extra_keys_processor(None, "info", event)
    assert event == {"event": f"{LOG_EMOJIS['pass']} green"}


def test_file_logging_writes_json(tmp_path: Path) -> None:
    log_file = tmp_path / "nestest.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))

    structlog.get_logger("nestest.test").info("hello", answer=42)
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(r["event"].endswith("hello") and r["answer"] == 42 for r in records)
