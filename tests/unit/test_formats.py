# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

from palette.formats import (
    CopyKind,
    copy_payloads,
    copy_text,
    hex_to_rgb,
    hex_to_rgba,
    is_hex_color,
    normalize_hex,
)
from sync.selection import ColorSelection


BLUE_500 = ColorSelection.of("blue", 500)


@pytest.mark.parametrize("kind,expected", [
    (CopyKind.TEXT_CLASS, "text-blue-500"),
    (CopyKind.BG_CLASS, "bg-blue-500"),
    (CopyKind.BORDER_CLASS, "border-blue-500"),
    (CopyKind.HEX, "#3B82F6"),
    (CopyKind.HEX_ALPHA, "#3B82F6FF"),
    (CopyKind.RGB, "rgb(59, 130, 246)"),
    (CopyKind.RGBA, "rgba(59, 130, 246, 1)"),
])
def test_copy_text(kind, expected):
    assert copy_text(kind, BLUE_500) == expected


def test_copy_payloads_cover_every_kind_in_order():
    payloads = copy_payloads(ColorSelection.of("slate", 950))

    assert [p.kind for p in payloads] == list(CopyKind)
    assert payloads[0].text == "text-slate-950"


def test_rgb_conversion_accepts_either_case():
    assert hex_to_rgb("#ffffff") == "rgb(255, 255, 255)"
    assert hex_to_rgba("#00FF7f") == "rgba(0, 255, 127, 1)"


@pytest.mark.parametrize("text", ["#FFFFFF", "#abcdef", "#0a0B0c"])
def test_is_hex_color_accepts(text):
    assert is_hex_color(text)


@pytest.mark.parametrize("text", ["FFFFFF", "#FFF", "#FFFFFFF", "#GGGGGG", "", "#FFFFFF\n"])
def test_is_hex_color_rejects(text):
    assert not is_hex_color(text)


def test_normalize_hex_trims_and_uppercases():
    assert normalize_hex("  #3b82f6 ") == "#3B82F6"
    assert normalize_hex("blue") is None
