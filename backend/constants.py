"""
BEHAVIOR-AS-CONSTANTS
---------------------
Single source of truth for the picker's behavioral constants.

Rules:
- If changing a value changes runtime behavior, it belongs here.
- No magic numbers or literals elsewhere in the codebase.
- Deployment settings (ports, log level) belong in config.py instead.
"""

from __future__ import annotations

import re
from typing import Final, Pattern, Tuple

# =============================================================================
# Wire Contract
# =============================================================================

# Event name carried in every sync frame, in both directions.
COLOR_EVENT_NAME: Final[str] = "color"

# JSON keys of a sync frame: {"event": "color", "args": [family, depth]}
FRAME_EVENT_KEY: Final[str] = "event"
FRAME_ARGS_KEY: Final[str] = "args"
COLOR_EVENT_ARG_COUNT: Final[int] = 2

# Longest inbound frame echoed back into diagnostic logs.
LOG_PAYLOAD_PREVIEW_CHARS: Final[int] = 100

# =============================================================================
# Palette Shape
# =============================================================================

# Shade used for family headings in the palette listing.
ACCENT_DEPTH: Final[int] = 500

DEFAULT_FAMILY: Final[str] = "slate"
DEFAULT_DEPTH: Final[int] = 50

# =============================================================================
# Hex Colors
# =============================================================================

HEX_COLOR_PATTERN: Final[Pattern[str]] = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)

# Suffix for the fully-opaque 8-digit hex copy payload.
OPAQUE_ALPHA_SUFFIX: Final[str] = "FF"

DEFAULT_BACKGROUND_COLOR: Final[str] = "#FFFFFF"
DEFAULT_FONT_COLOR: Final[str] = "#64748B"

# =============================================================================
# Endpoint Normalization
# =============================================================================

# Socket-style servers are usually typed in as http URLs.
ENDPOINT_SCHEME_REWRITES: Final[Tuple[Tuple[str, str], ...]] = (
    ("http://", "ws://"),
    ("https://", "wss://"),
)

# =============================================================================
# Notifications
# =============================================================================

MSG_CONNECTED: Final[str] = "Connected to server"
MSG_CONNECT_FAILED: Final[str] = "Failed to connect to server"
MSG_CONNECTION_LOST: Final[str] = "Connection to server lost"
MSG_APPLIED: Final[str] = "Color applied"
MSG_COPIED: Final[str] = "Copied"
