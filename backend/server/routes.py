"""
Route registration for the picker API.

Responsibilities:
- Define HTTP endpoints for palette, selection, preview colors, copy,
  connection control and notifications
- Define the /ws listener endpoint (receiving side of color sync)
- Pull the PickerSession from app.state
- Map domain input errors to HTTP 422
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect

from observability.logger import log_event
from palette.formats import CopyKind
from palette.tailwind import accent_for, depths, families, hex_for, label_for
from server.schemas import ColorRequest, ConnectRequest, PickRequest
from session.listener_gateway import ListenerGateway
from session.picker_session import ColorTarget, InvalidColor, PickerSession
from sync.selection import InvalidSelection


def _palette_listing() -> dict[str, Any]:
    return {
        "families": [
            {
                "name": family.value,
                "label": label_for(family),
                "accent": accent_for(family),
                "shades": [
                    {"depth": int(depth), "hex": hex_for(family, depth)}
                    for depth in depths(family)
                ],
            }
            for family in families()
        ]
    }


def register_routes(app: FastAPI) -> None:
    """Register all routes on the FastAPI app."""

    def session() -> PickerSession:
        return app.state.session

    # ------------------------------------------------------------------
    # Health / palette
    # ------------------------------------------------------------------

    @app.get("/health")
    async def health() -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        return {"status": "ok"}

    @app.get("/palette")
    async def palette() -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        return _palette_listing()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @app.get("/selection")
    async def get_selection() -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        return session().selection_view()

    @app.post("/selection")
    async def pick(body: PickRequest) -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        try:
            session().emitter.on_pick(body.family, body.depth)
        except InvalidSelection as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
        return session().selection_view()

    @app.post("/selection/apply/{target}")
    async def apply_selection(target: ColorTarget) -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        color = session().apply_selection(target)
        return {"target": target.value, "color": color}

    @app.post("/copy/{kind}")
    async def copy(kind: CopyKind) -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        return {"kind": kind.value, "text": session().copy(kind)}

    # ------------------------------------------------------------------
    # Preview colors
    # ------------------------------------------------------------------

    @app.get("/colors")
    async def get_colors() -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        return session().colors_view()

    @app.put("/colors/{target}")
    async def set_color(target: ColorTarget, body: ColorRequest) -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        try:
            session().set_color(target, body.value)
        except InvalidColor as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
        return session().colors_view()

    @app.post("/colors/{target}/reset")
    async def reset_color(target: ColorTarget) -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        session().reset_color(target)
        return session().colors_view()

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    @app.get("/connection")
    async def get_connection() -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        return session().manager.snapshot()

    @app.post("/connection")
    async def connect(body: ConnectRequest) -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        # Outcome arrives later via /connection and /notifications
        await session().manager.connect(body.endpoint)
        return session().manager.snapshot()

    @app.delete("/connection")
    async def disconnect() -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        await session().manager.disconnect()
        return session().manager.snapshot()

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    @app.get("/notifications")
    async def notifications() -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        return {"notifications": [n.to_dict() for n in session().drain_notifications()]}

    # ------------------------------------------------------------------
    # Listener
    # ------------------------------------------------------------------

    @app.websocket("/ws")
    async def listener_endpoint(ws: WebSocket) -> None: # pyright: ignore[reportUnusedFunction]
        """
        Receiving end of color sync.

        One connection = one peer = one gateway. Frames are logged, never
        acknowledged or relayed.
        """
        await ws.accept()

        gateway = ListenerGateway()
        gateway.on_connect()

        try:
            while True:
                msg = await ws.receive()

                if msg["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(code=msg.get("code", 1000))

                if msg.get("text") is not None:
                    gateway.on_text_message(msg["text"])

                elif msg.get("bytes") is not None:
                    log_event({
                        "event_type": "PEER_BINARY_IGNORED",
                        "peer_id": gateway.peer_id,
                        "payload_len": len(msg["bytes"]),
                    }, level="WARNING")

        except WebSocketDisconnect:
            gateway.on_disconnect(reason="peer_disconnect")

        except Exception as exc:  # pylint: disable=broad-exception-caught
            log_event({
                "event_type": "WS_FATAL_ERROR",
                "peer_id": gateway.peer_id,
                "exception": type(exc).__name__,
                "message": str(exc),
            }, level="ERROR")
            gateway.on_disconnect(reason="server_error")
