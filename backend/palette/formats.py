"""
Textual encodings of a color for clipboard copy.

Pure functions only. The clipboard itself belongs to the client; this
module produces the literal text payloads the client copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from constants import HEX_COLOR_PATTERN, OPAQUE_ALPHA_SUFFIX
from sync.selection import ColorSelection


class CopyKind(str, Enum):
    """Copy targets, in the order the picker lists them."""

    TEXT_CLASS = "text"
    BG_CLASS = "bg"
    BORDER_CLASS = "border"
    HEX = "hex"
    HEX_ALPHA = "hex_alpha"
    RGB = "rgb"
    RGBA = "rgba"


@dataclass(frozen=True)
class CopyPayload:
    kind: CopyKind
    text: str


# -------------------------
# Hex helpers
# -------------------------

def is_hex_color(text: str) -> bool:
    """True for "#" followed by exactly six hex digits (any case)."""
    return HEX_COLOR_PATTERN.fullmatch(text) is not None


def normalize_hex(text: str) -> str | None:
    """
    Trim and upper-case a user-entered hex color.

    Returns None when the trimmed text is not a valid hex color.
    """
    candidate = text.strip()
    if not is_hex_color(candidate):
        return None
    return candidate.upper()


def _channels(hex_color: str) -> tuple[int, int, int]:
    digits = hex_color[1:]
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def hex_to_rgb(hex_color: str) -> str:
    r, g, b = _channels(hex_color)
    return f"rgb({r}, {g}, {b})"


def hex_to_rgba(hex_color: str) -> str:
    """Fully opaque rgba() string; palette colors carry no alpha."""
    r, g, b = _channels(hex_color)
    return f"rgba({r}, {g}, {b}, 1)"


# -------------------------
# Copy payloads
# -------------------------

def utility_class(prefix: str, selection: ColorSelection) -> str:
    return f"{prefix}-{selection.family.value}-{int(selection.depth)}"


def copy_text(kind: CopyKind, selection: ColorSelection) -> str:
    hex_upper = selection.hex.upper()

    if kind is CopyKind.TEXT_CLASS:
        return utility_class("text", selection)
    if kind is CopyKind.BG_CLASS:
        return utility_class("bg", selection)
    if kind is CopyKind.BORDER_CLASS:
        return utility_class("border", selection)
    if kind is CopyKind.HEX:
        return hex_upper
    if kind is CopyKind.HEX_ALPHA:
        return hex_upper + OPAQUE_ALPHA_SUFFIX
    if kind is CopyKind.RGB:
        return hex_to_rgb(selection.hex)
    return hex_to_rgba(selection.hex)


def copy_payloads(selection: ColorSelection) -> tuple[CopyPayload, ...]:
    return tuple(
        CopyPayload(kind=kind, text=copy_text(kind, selection))
        for kind in CopyKind
    )
