"""
Single outbound color sync connection.

Core model (IMPORTANT):
- At most ONE connection is held at any time. connect() always tears the
  previous one down (task cancelled, socket closed, pending sends dropped)
  before dialing again.
- Every attempt carries a monotonic generation number. Any completion
  (handshake result, inbound frame, close, error) whose generation is no
  longer current is discarded; a socket it produced is closed.
- Errors are reported once (log + error notification) and never retried.
  The only way back to CONNECTED is another explicit connect().
- send() is fire-and-forget: no queueing, no acknowledgment, no raising.
  Without a live socket it silently does nothing.
- Inbound color frames are logged only. They do not touch state.

Everything runs on one asyncio event loop; no locks are needed because
the handle is only mutated between awaits.
"""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, Awaitable, Callable, Protocol

from websockets.asyncio.client import connect as ws_connect

from constants import (
    ENDPOINT_SCHEME_REWRITES,
    LOG_PAYLOAD_PREVIEW_CHARS,
    MSG_CONNECTED,
    MSG_CONNECT_FAILED,
    MSG_CONNECTION_LOST,
)
from observability.logger import log_event
from observability.metrics import discard_timer, start_timer, stop_timer
from protocol.color_event import (
    ColorProtocolError,
    UnknownEvent,
    decode_color_event,
    encode_color_event,
)
from sync.connection_state import ConnectionState
from sync.errors import PeerConnectionError
from sync.notifications import Notifier, Severity
from sync.selection import ColorSelection


# ---------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------

class PeerSocket(Protocol):
    """The slice of a websockets ClientConnection the manager relies on."""

    async def send(self, message: str) -> None:
        ...

    async def close(self) -> None:
        ...

    def __aiter__(self) -> AsyncIterator[str | bytes]:
        ...


Opener = Callable[[str], Awaitable[PeerSocket]]
StateListener = Callable[[ConnectionState, ConnectionState], None]


def websocket_opener(*, ping_interval_s: float | None = 20.0) -> Opener:
    """
    Build an opener that dials a real WebSocket.

    The handshake has no timeout: it waits for success or a transport
    failure.
    """
    async def _open(endpoint: str) -> PeerSocket:
        return await ws_connect(
            endpoint,
            open_timeout=None,
            ping_interval=ping_interval_s,
        )

    return _open


def normalize_endpoint(endpoint: str) -> str:
    """
    Trim whitespace and map http(s):// onto ws(s)://.

    No other validation: a bad address fails at dial time.
    """
    target = endpoint.strip()
    lowered = target.lower()
    for source_scheme, ws_scheme in ENDPOINT_SCHEME_REWRITES:
        if lowered.startswith(source_scheme):
            return ws_scheme + target[len(source_scheme):]
    return target


def _preview(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        return raw[:LOG_PAYLOAD_PREVIEW_CHARS].decode("utf-8", errors="replace")
    return raw[:LOG_PAYLOAD_PREVIEW_CHARS]


# ---------------------------------------------------------------------
# ConnectionManager
# ---------------------------------------------------------------------

class ConnectionManager:
    """
    Owns the one outbound sync connection and its lifecycle.

    Public interface:
    - connect(endpoint): replace any held connection, dial in background
    - disconnect(): idempotent teardown
    - send(selection): best-effort, fire-and-forget color frame
    - add_listener/remove_listener: observe (old_state, new_state)
    """

    def __init__(
        self,
        *,
        notifier: Notifier,
        opener: Opener | None = None,
    ) -> None:
        self._notifier = notifier
        self._opener: Opener = opener if opener is not None else websocket_opener()

        self._state = ConnectionState.DISCONNECTED
        self._generation = 0
        self._endpoint: str | None = None

        self._ws: PeerSocket | None = None
        self._task: asyncio.Task[None] | None = None
        self._send_tasks: set[asyncio.Task[None]] = set()

        self._listeners: list[StateListener] = []
        self._last_error: PeerConnectionError | None = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def endpoint(self) -> str | None:
        return self._endpoint

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def last_error(self) -> PeerConnectionError | None:
        return self._last_error

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED and self._ws is not None

    def snapshot(self) -> dict[str, Any]:
        return {
            "state": self._state.value,
            "endpoint": self._endpoint,
            "generation": self._generation,
            "last_error": self._last_error.to_dict() if self._last_error else None,
        }

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self, endpoint: str) -> None:
        """
        Replace any held connection with a new attempt to `endpoint`.

        Returns once the previous connection is gone and the new handshake
        is scheduled. The handshake outcome arrives later as a state change
        plus a notification; it is never raised here.
        """
        # A concurrent connect() may start a task while we await teardown.
        while self._task is not None or self._ws is not None:
            await self._teardown(reason="superseded")

        target = normalize_endpoint(endpoint)
        self._generation += 1
        generation = self._generation
        self._endpoint = target
        self._last_error = None

        log_event({
            "event_type": "CONNECT_REQUESTED",
            "endpoint": target,
            "generation": generation,
        })
        self._set_state(ConnectionState.CONNECTING)

        self._task = asyncio.create_task(
            self._run(generation, target),
            name=f"color-sync-{generation}",
        )

    async def disconnect(self) -> None:
        """
        Drop the held connection, if any.

        Safe to call repeatedly and with nothing connected.
        """
        await self._teardown(reason="disconnect_requested")

    async def _teardown(self, *, reason: str) -> None:
        task = self._task
        ws = self._ws
        pending_sends = list(self._send_tasks)

        self._task = None
        self._ws = None
        self._send_tasks.clear()

        had_connection = task is not None or ws is not None
        if had_connection:
            # Invalidate every completion belonging to the old attempt.
            self._generation += 1
            log_event({
                "event_type": "CONNECTION_TEARDOWN",
                "endpoint": self._endpoint,
                "reason": reason,
                "generation": self._generation,
                "dropped_sends": len(pending_sends),
            })
        generation = self._generation

        for send_task in pending_sends:
            send_task.cancel()

        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        if ws is not None:
            await self._close_quietly(ws)

        # A connect() that ran while we awaited owns the state now.
        if (
            self._generation != generation
            or self._task is not None
            or self._ws is not None
        ):
            log_event({
                "event_type": "STALE_TEARDOWN_IGNORED",
                "endpoint": self._endpoint,
                "reason": reason,
                "generation": generation,
                "current_generation": self._generation,
            }, level="DEBUG")
            return

        self._set_state(ConnectionState.DISCONNECTED)

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def send(self, selection: ColorSelection) -> bool:
        """
        Push one color frame if connected.

        Returns True if a write was scheduled, False if the call was a
        no-op. Never raises; the write outcome is only logged.
        """
        family, depth = selection.as_wire_args()
        ws = self._ws

        if ws is None or not self.is_connected:
            log_event({
                "event_type": "COLOR_SEND_SKIPPED",
                "state": self._state.value,
                "family": family,
                "depth": depth,
            }, level="DEBUG")
            return False

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log_event({
                "event_type": "COLOR_SEND_SKIPPED",
                "state": self._state.value,
                "reason": "no_running_loop",
                "family": family,
                "depth": depth,
            }, level="WARNING")
            return False

        task = loop.create_task(
            self._send(ws, encode_color_event(selection), family, depth),
        )
        self._send_tasks.add(task)
        task.add_done_callback(self._send_tasks.discard)
        return True

    async def _send(self, ws: PeerSocket, payload: str, family: str, depth: int) -> None:
        try:
            await ws.send(payload)
        except asyncio.CancelledError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            # The receive loop notices dead sockets; nothing to do here.
            log_event({
                "event_type": "COLOR_SEND_FAILED",
                "endpoint": self._endpoint,
                "family": family,
                "depth": depth,
                "exception": type(e).__name__,
                "message": str(e),
            }, level="WARNING")
            return

        log_event({
            "event_type": "COLOR_SENT",
            "endpoint": self._endpoint,
            "family": family,
            "depth": depth,
        }, level="DEBUG")

    # ------------------------------------------------------------------
    # Background connection task
    # ------------------------------------------------------------------

    async def _run(self, generation: int, endpoint: str) -> None:
        """
        Handshake, then receive until the socket ends.

        Runs as one task per attempt. Cancelled by _teardown().
        """
        timer_id = start_timer("connect_handshake")
        timer_details = {"endpoint": endpoint, "generation": generation}

        try:
            ws = await self._opener(endpoint)
        except asyncio.CancelledError:
            discard_timer(timer_id)
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            stop_timer(timer_id, outcome="failed", details=timer_details)
            self._fail(generation, endpoint, e, phase="handshake")
            return

        if generation != self._generation:
            discard_timer(timer_id)
            log_event({
                "event_type": "STALE_HANDSHAKE_DISCARDED",
                "endpoint": endpoint,
                "generation": generation,
                "current_generation": self._generation,
            })
            await self._close_quietly(ws)
            return

        stop_timer(timer_id, outcome="connected", details=timer_details)
        self._ws = ws
        self._set_state(ConnectionState.CONNECTED)
        self._notifier.notify(MSG_CONNECTED, Severity.SUCCESS)

        try:
            async for raw in ws:
                if generation != self._generation:
                    break
                self._handle_inbound(generation, raw)
            else:
                self._peer_closed(generation, endpoint)
        except asyncio.CancelledError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            self._fail(generation, endpoint, e, phase="transport")
        finally:
            await self._close_quietly(ws)

    def _handle_inbound(self, generation: int, raw: str | bytes) -> None:
        try:
            event = decode_color_event(raw)
        except UnknownEvent as e:
            log_event({
                "event_type": "INBOUND_EVENT_IGNORED",
                "generation": generation,
                "error": str(e),
            }, level="DEBUG")
            return
        except ColorProtocolError as e:
            log_event({
                "event_type": "COLOR_DECODE_ERROR",
                "generation": generation,
                "error_type": type(e).__name__,
                "error": str(e),
                "payload_preview": _preview(raw),
            }, level="WARNING")
            return

        log_event({
            "event_type": "COLOR_RECEIVED",
            "endpoint": self._endpoint,
            "generation": generation,
            "family": event.family,
            "depth": event.depth,
        })

    def _peer_closed(self, generation: int, endpoint: str) -> None:
        if generation != self._generation:
            return
        self._ws = None
        log_event({
            "event_type": "PEER_CLOSED",
            "endpoint": endpoint,
            "generation": generation,
        })
        self._set_state(ConnectionState.DISCONNECTED)

    def _fail(
        self,
        generation: int,
        endpoint: str,
        cause: Exception,
        *,
        phase: str,
    ) -> None:
        if generation != self._generation:
            log_event({
                "event_type": "STALE_ERROR_IGNORED",
                "endpoint": endpoint,
                "generation": generation,
                "phase": phase,
                "exception": type(cause).__name__,
            }, level="DEBUG")
            return

        error = PeerConnectionError(
            endpoint=endpoint,
            generation=generation,
            phase=phase,
            cause=cause,
        )
        self._ws = None
        self._last_error = error

        log_event({"event_type": "CONNECTION_ERROR", **error.to_dict()}, level="WARNING")
        self._set_state(ConnectionState.ERRORED)
        message = MSG_CONNECT_FAILED if phase == "handshake" else MSG_CONNECTION_LOST
        self._notifier.notify(message, Severity.ERROR)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_state(self, new_state: ConnectionState) -> None:
        old_state = self._state
        if old_state is new_state:
            return

        self._state = new_state
        log_event({
            "event_type": "CONNECTION_STATE_CHANGED",
            "from_state": old_state.value,
            "to_state": new_state.value,
            "endpoint": self._endpoint,
            "generation": self._generation,
        })

        for listener in list(self._listeners):
            try:
                listener(old_state, new_state)
            except Exception as e:  # pylint: disable=broad-exception-caught
                log_event({
                    "event_type": "STATE_LISTENER_ERROR",
                    "exception": type(e).__name__,
                    "message": str(e),
                }, level="ERROR")

    async def _close_quietly(self, ws: PeerSocket) -> None:
        try:
            await ws.close()
        except Exception as e:  # pylint: disable=broad-exception-caught
            log_event({
                "event_type": "SOCKET_CLOSE_FAILED",
                "endpoint": self._endpoint,
                "exception": type(e).__name__,
                "message": str(e),
            }, level="DEBUG")
