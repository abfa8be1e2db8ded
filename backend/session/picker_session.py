"""
Picker session container.

- Owns the connection manager, selection emitter and notification queue
- Owns the background/font preview colors (mutable, route-controlled)
- One session per process; created by the app factory
- NOT a state machine: connection lifecycle lives in ConnectionManager
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from config import AppConfig
from constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_FONT_COLOR,
    MSG_APPLIED,
    MSG_COPIED,
)
from observability.logger import log_event
from palette.formats import CopyKind, copy_payloads, copy_text, normalize_hex
from sync.connection_manager import ConnectionManager, Opener, websocket_opener
from sync.emitter import SelectionEmitter
from sync.notifications import Notification, NotificationQueue, Severity


class ColorTarget(str, Enum):
    BACKGROUND = "background"
    FONT = "font"


_DEFAULTS: dict[ColorTarget, str] = {
    ColorTarget.BACKGROUND: DEFAULT_BACKGROUND_COLOR,
    ColorTarget.FONT: DEFAULT_FONT_COLOR,
}


class InvalidColor(ValueError):
    """Raised when a preview color is not "#" + 6 hex digits."""


# ---------------------------------------------------------------------
# PickerSession
# ---------------------------------------------------------------------


@dataclass
class PickerSession:
    """Mutable runtime container for the picker."""

    config: AppConfig = field(default_factory=AppConfig)
    opener: Opener | None = None

    # ------------------------------------------------------------------
    # Preview colors
    # ------------------------------------------------------------------

    colors: dict[ColorTarget, str] = field(default_factory=lambda: dict(_DEFAULTS))

    # ------------------------------------------------------------------
    # Sync components (built in __post_init__)
    # ------------------------------------------------------------------

    notifications: NotificationQueue = field(init=False)
    manager: ConnectionManager = field(init=False)
    emitter: SelectionEmitter = field(init=False)

    def __post_init__(self) -> None:
        self.notifications = NotificationQueue()
        opener = self.opener or websocket_opener(
            ping_interval_s=self.config.ws_ping_interval_s,
        )
        self.manager = ConnectionManager(notifier=self.notifications, opener=opener)
        self.emitter = SelectionEmitter(manager=self.manager)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Dial the configured endpoint if auto-connect is enabled."""
        if self.config.auto_connect and self.config.default_endpoint.strip():
            await self.manager.connect(self.config.default_endpoint)

    async def close(self) -> None:
        """Always called on shutdown so no socket outlives the process."""
        await self.manager.disconnect()

    # ------------------------------------------------------------------
    # Preview colors
    # ------------------------------------------------------------------

    def set_color(self, target: ColorTarget, value: str) -> str:
        normalized = normalize_hex(value)
        if normalized is None:
            raise InvalidColor(f"Not a hex color: {value!r}")
        self.colors[target] = normalized
        return normalized

    def reset_color(self, target: ColorTarget) -> str:
        self.colors[target] = _DEFAULTS[target]
        return self.colors[target]

    def apply_selection(self, target: ColorTarget) -> str:
        """Use the current selection as the background or font color."""
        value = self.emitter.current.hex.upper()
        self.colors[target] = value
        self.notifications.notify(MSG_APPLIED, Severity.SUCCESS)
        log_event({
            "event_type": "SELECTION_APPLIED",
            "target": target.value,
            "color": value,
        })
        return value

    # ------------------------------------------------------------------
    # Copy
    # ------------------------------------------------------------------

    def copy(self, kind: CopyKind) -> str:
        """Text the client should put on its clipboard."""
        text = copy_text(kind, self.emitter.current)
        self.notifications.notify(MSG_COPIED, Severity.SUCCESS)
        return text

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def selection_view(self) -> dict[str, Any]:
        selection = self.emitter.current
        return {
            "family": selection.family.value,
            "depth": int(selection.depth),
            "hex": selection.hex.upper(),
            "copy": {p.kind.value: p.text for p in copy_payloads(selection)},
        }

    def colors_view(self) -> dict[str, str]:
        return {target.value: value for target, value in self.colors.items()}

    def drain_notifications(self) -> tuple[Notification, ...]:
        return self.notifications.drain()

    def snapshot(self) -> dict[str, Any]:
        return {
            "selection": self.selection_view(),
            "colors": self.colors_view(),
            "connection": self.manager.snapshot(),
        }
