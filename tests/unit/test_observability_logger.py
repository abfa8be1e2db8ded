# pylint: disable=missing-module-docstring,missing-function-docstring

import json
from typing import Any

import pytest

from observability import logger


def test_log_event_emits_valid_jsonl(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """
    Contract:
    - log_event emits exactly one JSONL line
    - caller fields are serialized as-is
    - ts_ms and level are stamped
    - output sink is patchable
    """
    captured: list[str] = []

    def fake_print(line: str) -> None:
        captured.append(line)

    # Patch the explicit output sink used by logger
    monkeypatch.setattr(logger, "_print", fake_print)

    payload: dict[str, Any] = {
        "event_type": "TEST",
        "value": 123,
    }

    logger.log_event(payload)

    # Exactly one line emitted
    assert len(captured) == 1

    decoded = json.loads(captured[0])

    assert decoded["event_type"] == "TEST"
    assert decoded["value"] == 123
    assert decoded["level"] == "INFO"
    assert isinstance(decoded["ts_ms"], int)


def test_caller_supplied_ts_ms_wins(log_lines):
    logger.log_event({"event_type": "TEST", "ts_ms": 42})

    assert json.loads(log_lines[0])["ts_ms"] == 42


def test_events_below_threshold_are_dropped(log_lines):
    logger.configure(level="WARNING")

    logger.log_event({"event_type": "QUIET"}, level="DEBUG")
    logger.log_event({"event_type": "ALSO_QUIET"})
    logger.log_event({"event_type": "LOUD"}, level="WARNING")
    logger.log_event({"event_type": "LOUDER"}, level="ERROR")

    types = [json.loads(line)["event_type"] for line in log_lines]
    assert types == ["LOUD", "LOUDER"]


def test_disabled_logger_writes_nothing(log_lines):
    logger.configure(enabled=False)

    logger.log_event({"event_type": "TEST"}, level="ERROR")

    assert log_lines == []


def test_unknown_level_name_falls_back_to_info(log_lines):
    logger.configure(level="chatty")

    logger.log_event({"event_type": "DROPPED"}, level="DEBUG")
    logger.log_event({"event_type": "KEPT"})

    assert [json.loads(line)["event_type"] for line in log_lines] == ["KEPT"]


def test_unserializable_payload_falls_back(log_lines):
    logger.log_event({"event_type": "TEST", "obj": object()})

    decoded = json.loads(log_lines[0])
    assert decoded["event_type"] == "LOGGER_SERIALIZATION_ERROR"
    assert decoded["level"] == "ERROR"
    assert "TEST" in decoded["original_event_repr"]
