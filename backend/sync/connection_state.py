"""
Connection lifecycle status for the color sync link.

Pure data owned by ConnectionManager. Drives user-visible feedback only;
it never gates selection updates.
"""
from __future__ import annotations

from enum import Enum


class ConnectionState(str, Enum):
    """
    Lifecycle of the single outbound sync connection.

    ERRORED is terminal for one attempt; only an explicit connect()
    leaves it (there is no automatic retry).
    """
    DISCONNECTED = "DISCONNECTED"  # No connection held
    CONNECTING = "CONNECTING"      # Handshake in flight
    CONNECTED = "CONNECTED"        # Handshake done, socket live
    ERRORED = "ERRORED"            # Handshake or transport failed
