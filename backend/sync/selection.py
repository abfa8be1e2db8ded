"""
ColorSelection value type.

A selection is one palette entry: (family, depth). Immutable; a fresh
instance is produced on every pick.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from constants import DEFAULT_DEPTH, DEFAULT_FAMILY
from palette.enums import ColorFamily, DepthLevel
from palette.tailwind import hex_for


class InvalidSelection(ValueError):
    """Raised when a family/depth pair is not part of the palette."""


@dataclass(frozen=True)
class ColorSelection:
    """One palette entry picked by the user."""

    family: ColorFamily
    depth: DepthLevel

    @staticmethod
    def of(family: Any, depth: Any) -> ColorSelection:
        """
        Build a selection from raw values (strings, ints or enum members).

        Raises:
            InvalidSelection if either value is outside the palette.
        """
        try:
            fam = ColorFamily(family)
        except ValueError as e:
            raise InvalidSelection(f"Unknown color family: {family!r}") from e

        # bool is an int subclass; True must not alias depth 1
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise InvalidSelection(f"Depth must be an integer, got {depth!r}")

        try:
            dep = DepthLevel(depth)
        except ValueError as e:
            raise InvalidSelection(f"Unknown depth level: {depth!r}") from e

        return ColorSelection(family=fam, depth=dep)

    @staticmethod
    def default() -> ColorSelection:
        return ColorSelection.of(DEFAULT_FAMILY, DEFAULT_DEPTH)

    @property
    def hex(self) -> str:
        return hex_for(self.family, self.depth)

    def as_wire_args(self) -> tuple[str, int]:
        """Plain (family, depth) pair as carried in a color frame."""
        return self.family.value, int(self.depth)
