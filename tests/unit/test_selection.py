# pylint: disable=missing-module-docstring,missing-function-docstring

import dataclasses

import pytest

from palette.enums import ColorFamily, DepthLevel
from sync.selection import ColorSelection, InvalidSelection


def test_of_accepts_strings_ints_and_enum_members():
    a = ColorSelection.of("blue", 500)
    b = ColorSelection.of(ColorFamily.BLUE, DepthLevel.D500)

    assert a == b
    assert a.family is ColorFamily.BLUE
    assert a.depth is DepthLevel.D500


@pytest.mark.parametrize("family,depth", [
    ("magenta", 500),
    ("Blue", 500),
    ("blue", 550),
    ("blue", "500"),
    ("blue", 500.0),
    ("blue", True),
    (None, 500),
])
def test_of_rejects_values_outside_palette(family, depth):
    with pytest.raises(InvalidSelection):
        ColorSelection.of(family, depth)


def test_invalid_selection_is_a_value_error():
    assert issubclass(InvalidSelection, ValueError)


def test_default_is_slate_50():
    sel = ColorSelection.default()

    assert sel.as_wire_args() == ("slate", 50)
    assert sel.hex == "#f8fafc"


def test_selection_is_immutable():
    sel = ColorSelection.of("red", 100)

    with pytest.raises(dataclasses.FrozenInstanceError):
        sel.depth = DepthLevel.D200  # type: ignore[misc]


def test_wire_args_are_plain_types():
    family, depth = ColorSelection.of("teal", 700).as_wire_args()

    assert type(family) is str  # pylint: disable=unidiomatic-typecheck
    assert type(depth) is int  # pylint: disable=unidiomatic-typecheck
    assert (family, depth) == ("teal", 700)
