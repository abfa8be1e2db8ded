"""
Closed palette enumerations.

Rules:
- These enums define ONLY the identifiers of the fixed palette.
- Member order is the display order of the palette.
- Hex values and labels live in palette.tailwind.
"""

from __future__ import annotations

from enum import Enum


class ColorFamily(str, Enum):
    """Tailwind color family names, in palette order."""

    SLATE = "slate"
    GRAY = "gray"
    ZINC = "zinc"
    NEUTRAL = "neutral"
    STONE = "stone"
    RED = "red"
    ORANGE = "orange"
    AMBER = "amber"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    EMERALD = "emerald"
    TEAL = "teal"
    CYAN = "cyan"
    SKY = "sky"
    BLUE = "blue"
    INDIGO = "indigo"
    VIOLET = "violet"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    PINK = "pink"
    ROSE = "rose"


class DepthLevel(int, Enum):
    """Shade levels shared by every family, lightest first."""

    D50 = 50
    D100 = 100
    D200 = 200
    D300 = 300
    D400 = 400
    D500 = 500
    D600 = 600
    D700 = 700
    D800 = 800
    D900 = 900
    D950 = 950
