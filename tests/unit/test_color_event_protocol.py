# pylint: disable=missing-module-docstring,missing-function-docstring

import json

import pytest

from protocol.color_event import (
    ColorEvent,
    InvalidPayload,
    MalformedFrame,
    UnknownEvent,
    decode_color_event,
    encode_color_event,
)
from sync.selection import ColorSelection


# ---------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------

def test_encode_produces_exact_frame():
    payload = encode_color_event(ColorSelection.of("blue", 500))

    assert payload == '{"event":"color","args":["blue",500]}'


def test_encode_carries_plain_values_not_enum_reprs():
    data = json.loads(encode_color_event(ColorSelection.of("slate", 950)))

    assert data["args"] == ["slate", 950]
    assert isinstance(data["args"][1], int)


# ---------------------------------------------------------------------
# Decode: accepted frames
# ---------------------------------------------------------------------

def test_decode_reads_own_encoding():
    event = decode_color_event(encode_color_event(ColorSelection.of("emerald", 300)))

    assert event == ColorEvent(family="emerald", depth=300)


def test_decode_accepts_bytes_and_integral_float():
    event = decode_color_event(b'{"event":"color","args":["red",500.0]}')

    assert event == ColorEvent(family="red", depth=500)
    assert isinstance(event.depth, int)


def test_decode_does_not_check_palette_membership():
    event = decode_color_event('{"event":"color","args":["magenta",123]}')

    assert event == ColorEvent(family="magenta", depth=123)


def test_decode_ignores_extra_keys():
    event = decode_color_event('{"event":"color","args":["sky",50],"id":7}')

    assert event.family == "sky"


# ---------------------------------------------------------------------
# Decode: malformed frames
# ---------------------------------------------------------------------

@pytest.mark.parametrize("payload", [
    "not json",
    b"\xff\xfe",
    "[1, 2]",
    '"color"',
    '{"args":["blue",500]}',
    '{"event":5,"args":["blue",500]}',
])
def test_decode_rejects_malformed(payload):
    with pytest.raises(MalformedFrame):
        decode_color_event(payload)


def test_decode_rejects_other_events():
    with pytest.raises(UnknownEvent):
        decode_color_event('{"event":"ping","args":[]}')


@pytest.mark.parametrize("payload", [
    '{"event":"color"}',
    '{"event":"color","args":"blue"}',
    '{"event":"color","args":["blue"]}',
    '{"event":"color","args":["blue",500,1]}',
    '{"event":"color","args":[5,500]}',
    '{"event":"color","args":["blue","500"]}',
    '{"event":"color","args":["blue",true]}',
    '{"event":"color","args":["blue",500.5]}',
    '{"event":"color","args":["blue",null]}',
])
def test_decode_rejects_invalid_args(payload):
    with pytest.raises(InvalidPayload):
        decode_color_event(payload)
