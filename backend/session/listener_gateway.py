"""
Listener gateway: the receiving side of the color sync link.

Responsibilities:
- One gateway == one connected peer
- Decode inbound color frames and validate them against the palette
- Log every accepted or rejected frame
- Remember the last accepted selection for this peer

NOT responsible for:
- Fan-out to other peers
- Acknowledging frames
- Authenticating the peer
"""

from __future__ import annotations

import time
from uuid import uuid4

from constants import LOG_PAYLOAD_PREVIEW_CHARS
from observability.logger import log_event
from protocol.color_event import ColorProtocolError, decode_color_event
from sync.selection import ColorSelection, InvalidSelection


def _new_peer_id() -> str:
    return f"peer_{uuid4().hex[:12]}"


class ListenerGateway:
    """Stateful handler for one inbound sync peer."""

    def __init__(self) -> None:
        self.peer_id = _new_peer_id()
        self.connected_at: float | None = None
        self.last_selection: ColorSelection | None = None
        self.accepted = 0
        self.rejected = 0

    def on_connect(self) -> None:
        self.connected_at = time.time()
        log_event({
            "event_type": "PEER_CONNECTED",
            "peer_id": self.peer_id,
        })

    def on_text_message(self, payload: str) -> ColorSelection | None:
        """
        Handle one inbound frame.

        Returns the accepted selection, or None if the frame was dropped.
        """
        try:
            event = decode_color_event(payload)
            selection = ColorSelection.of(event.family, event.depth)
        except (ColorProtocolError, InvalidSelection) as e:
            self.rejected += 1
            log_event({
                "event_type": "PEER_COLOR_REJECTED",
                "peer_id": self.peer_id,
                "error_type": type(e).__name__,
                "error": str(e),
                "payload_preview": payload[:LOG_PAYLOAD_PREVIEW_CHARS],
            }, level="WARNING")
            return None

        self.accepted += 1
        self.last_selection = selection
        log_event({
            "event_type": "PEER_COLOR_RECEIVED",
            "peer_id": self.peer_id,
            "family": selection.family.value,
            "depth": int(selection.depth),
            "hex": selection.hex,
        })
        return selection

    def on_disconnect(self, reason: str | None = None) -> None:
        log_event({
            "event_type": "PEER_DISCONNECTED",
            "peer_id": self.peer_id,
            "reason": reason,
            "accepted": self.accepted,
            "rejected": self.rejected,
        })
