"""
Transient user notifications (toasts).

The picker never renders anything itself; it records notifications and the
client drains them. FIFO, drained atomically.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
    ts_ms: int = field(default_factory=lambda: time.time_ns() // 1_000_000)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "severity": self.severity.value,
            "ts_ms": self.ts_ms,
        }


class Notifier(Protocol):
    """Anything that can display a transient success/error signal."""

    def notify(self, message: str, severity: Severity) -> None:
        ...


class NotificationQueue:
    """
    Buffering Notifier.

    Notifications are kept in FIFO order until drain() hands them to
    the client.
    """

    def __init__(self) -> None:
        self._pending: deque[Notification] = deque()

    def notify(self, message: str, severity: Severity) -> None:
        self._pending.append(Notification(message=message, severity=severity))

    def drain(self) -> tuple[Notification, ...]:
        """
        Atomically drain all pending notifications.

        Returns an empty tuple if nothing is pending. After this call
        the queue is empty.
        """
        if not self._pending:
            return ()
        out = tuple(self._pending)
        self._pending.clear()
        return out

    def __len__(self) -> int:
        return len(self._pending)
