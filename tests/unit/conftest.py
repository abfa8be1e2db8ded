# pylint: disable=missing-module-docstring,missing-function-docstring

import json
from typing import Any, Callable

import pytest

from observability import logger


@pytest.fixture(autouse=True)
def _debug_logging():
    logger.configure(level="DEBUG", enabled=True)
    yield
    logger.configure()


@pytest.fixture
def log_lines(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Every JSONL line written through observability.logger."""
    lines: list[str] = []
    monkeypatch.setattr(logger, "_print", lines.append)
    return lines


@pytest.fixture
def events(log_lines: list[str]) -> Callable[[str], list[dict[str, Any]]]:
    """Decoded log records filtered by event_type."""
    def _select(event_type: str) -> list[dict[str, Any]]:
        decoded = [json.loads(line) for line in log_lines]
        return [e for e in decoded if e.get("event_type") == event_type]

    return _select
