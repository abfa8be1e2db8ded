"""
JSONL event logger.

- Write one JSON object per line
- Output to stdout
- No buffering, no batching
- Level-filtered; threshold set once at startup via configure()
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any, Mapping, Callable


LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}

_threshold: int = LEVELS["INFO"]
_enabled: bool = True


# ------------------------------------------------------------------
# Explicit output sink (patchable in tests)
# ------------------------------------------------------------------

def _stdout_print(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()

_print: Callable[[str], None] = _stdout_print


def configure(*, level: str = "INFO", enabled: bool = True) -> None:
    """
    Set the process-wide level threshold and on/off switch.

    Unknown level names fall back to INFO.
    """
    global _threshold, _enabled  # pylint: disable=global-statement
    _threshold = LEVELS.get(level.strip().upper(), LEVELS["INFO"])
    _enabled = enabled


def log_event(event: Mapping[str, Any], *, level: str = "INFO") -> None:
    """
    Write a single JSONL event to stdout.

    The caller supplies event_type and any context fields.
    This function:
    - Drops the event if logging is disabled or below threshold
    - Stamps ts_ms (unless supplied) and level
    - Writes exactly one line, flushed immediately
    - Never raises
    """
    if not _enabled or LEVELS.get(level, LEVELS["INFO"]) < _threshold:
        return

    record: dict[str, Any] = {"ts_ms": time.time_ns() // 1_000_000, "level": level}
    record.update(event)

    try:
        line = json.dumps(record, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        # Last-resort fallback; logging must never crash the event loop
        fallback: dict[str, Any] = {
            "ts_ms": record.get("ts_ms"),
            "level": "ERROR",
            "event_type": "LOGGER_SERIALIZATION_ERROR",
            "error": str(e),
            "original_event_repr": repr(event),
        }
        line = json.dumps(fallback, ensure_ascii=False, separators=(",", ":"))

    _print(line)
