"""
JSON text framing for the color sync event.

Both directions carry the same frame:

    {"event": "color", "args": ["<family>", <depth>]}

- family: string
- depth: JSON number (integral; 500 and 500.0 both decode to 500)
- No acknowledgment, no sequence numbers, no schema version

Decoding checks shape and types only. Whether the pair exists in the
palette is the receiver's decision (see ColorSelection.of).

Usage example:

    payload = encode_color_event(selection)
    await ws.send(payload)

    try:
        event = decode_color_event(raw)
    except ColorProtocolError as e:
        log_event({"event_type": "COLOR_DECODE_ERROR", "error": str(e)})
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from constants import (
    COLOR_EVENT_ARG_COUNT,
    COLOR_EVENT_NAME,
    FRAME_ARGS_KEY,
    FRAME_EVENT_KEY,
)
from sync.selection import ColorSelection


# -------------------------
# Exceptions
# -------------------------

class ColorProtocolError(Exception):
    """Base class for color frame errors."""


class MalformedFrame(ColorProtocolError):
    """
    Raised when a frame is not a JSON object with "event" and "args".

    The frame cannot be interpreted at all and must be dropped.
    """


class UnknownEvent(ColorProtocolError):
    """Raised when a well-formed frame names an event other than "color"."""


class InvalidPayload(ColorProtocolError):
    """
    Raised when a color frame's args are not [string, number].

    Covers wrong arity, non-string family, non-numeric or fractional depth.
    """


# -------------------------
# Decoded frame
# -------------------------

@dataclass(frozen=True)
class ColorEvent:
    """A decoded color frame (not yet validated against the palette)."""
    family: str
    depth: int


# -------------------------
# Encode
# -------------------------

def encode_color_event(selection: ColorSelection) -> str:
    family, depth = selection.as_wire_args()
    return json.dumps(
        {FRAME_EVENT_KEY: COLOR_EVENT_NAME, FRAME_ARGS_KEY: [family, depth]},
        ensure_ascii=False,
        separators=(",", ":"),
    )


# -------------------------
# Decode
# -------------------------

def _coerce_depth(raw: Any) -> int:
    # bool is an int subclass in Python but not a number on the wire
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise InvalidPayload(f"depth must be a number, got {raw!r}")

    if isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidPayload(f"depth must be integral, got {raw!r}")
        return int(raw)

    return raw


def decode_color_event(payload: str | bytes) -> ColorEvent:
    """
    Decode one inbound frame.

    Raises:
        MalformedFrame, UnknownEvent or InvalidPayload.
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedFrame(f"not JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedFrame(f"frame must be an object, got {type(data).__name__}")

    event = data.get(FRAME_EVENT_KEY)
    if not isinstance(event, str):
        raise MalformedFrame(f"missing or non-string {FRAME_EVENT_KEY!r}")

    if event != COLOR_EVENT_NAME:
        raise UnknownEvent(f"unsupported event {event!r}")

    args = data.get(FRAME_ARGS_KEY)
    if not isinstance(args, list) or len(args) != COLOR_EVENT_ARG_COUNT:
        raise InvalidPayload(
            f"{FRAME_ARGS_KEY!r} must be a list of {COLOR_EVENT_ARG_COUNT} items"
        )

    family, raw_depth = args
    if not isinstance(family, str):
        raise InvalidPayload(f"family must be a string, got {family!r}")

    return ColorEvent(family=family, depth=_coerce_depth(raw_depth))
