"""
Timing helpers for connection observability.

Responsibilities:
- Measure durations using monotonic time (immune to clock changes)
- Emit one METRIC_TIMER JSONL event per measurement via observability.logger
- Never aggregate

Handshakes may be cancelled mid-flight, so timers are explicit
(start/stop/discard) instead of a context manager: a superseded attempt
discards its timer rather than reporting a meaningless duration.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

from observability.logger import log_event


# timer_id -> (metric_name, start_time_ns)
_active_timers: dict[str, tuple[str, int]] = {}


def start_timer(name: str) -> str:
    """
    Start a monotonic timer.

    Returns:
        timer_id (str): Opaque ID required by stop_timer()/discard_timer().
    """
    timer_id = f"timer_{uuid.uuid4().hex[:12]}"
    _active_timers[timer_id] = (name, time.monotonic_ns())
    return timer_id


def stop_timer(
    timer_id: str,
    *,
    outcome: str,
    details: dict[str, Any] | None = None,
) -> int | None:
    """
    Stop a timer and emit its metric event.

    Returns:
        duration_ms if the timer existed, else None
    """
    entry = _active_timers.pop(timer_id, None)
    if entry is None:
        return None

    name, start_ns = entry
    duration_ms = (time.monotonic_ns() - start_ns) // 1_000_000

    log_event({
        "event_type": "METRIC_TIMER",
        "metric": name,
        "value_ms": duration_ms,
        "outcome": outcome,
        "details": details or {},
    })

    return duration_ms


def discard_timer(timer_id: str) -> None:
    """Forget a timer without emitting anything."""
    _active_timers.pop(timer_id, None)


def active_timer_count() -> int:
    return len(_active_timers)
