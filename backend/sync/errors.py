"""
Error taxonomy for the color sync link.

Only local input errors propagate to callers. Connection failures are
caught at the ConnectionManager boundary and turned into a notification
plus a log record. They are never re-raised into the code that called
connect().
"""

from __future__ import annotations

from typing import Any


class SyncError(Exception):
    """Base class for color sync errors."""


class PeerConnectionError(SyncError):
    """
    Handshake or transport failure for one connection attempt.

    Terminal for that attempt only. An unparseable endpoint also lands
    here because endpoints are not validated before dialing.
    """

    def __init__(
        self,
        *,
        endpoint: str,
        generation: int,
        phase: str,
        cause: BaseException,
    ) -> None:
        super().__init__(f"{phase} failed for {endpoint!r}: {type(cause).__name__}: {cause}")
        self.endpoint = endpoint
        self.generation = generation
        self.phase = phase
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "generation": self.generation,
            "phase": self.phase,
            "exception": type(self.cause).__name__,
            "message": str(self.cause),
        }
