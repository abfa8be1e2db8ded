# pylint: disable=missing-module-docstring,missing-function-docstring

import asyncio

import pytest

from config import AppConfig
from palette.formats import CopyKind
from session.picker_session import ColorTarget, InvalidColor, PickerSession
from sync.connection_state import ConnectionState
from sync.notifications import Severity


class NullSocket:
    async def send(self, message: str) -> None:
        pass

    async def close(self) -> None:
        pass

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        await asyncio.Event().wait()
        raise StopAsyncIteration


def make_opener(dialed: list[str]):
    async def opener(endpoint: str) -> NullSocket:
        dialed.append(endpoint)
        return NullSocket()

    return opener


def test_defaults():
    session = PickerSession()

    assert session.colors_view() == {"background": "#FFFFFF", "font": "#64748B"}
    assert session.selection_view()["family"] == "slate"
    assert session.manager.state is ConnectionState.DISCONNECTED


def test_set_color_normalizes_and_rejects_bad_values():
    session = PickerSession()

    assert session.set_color(ColorTarget.BACKGROUND, " #abcdef ") == "#ABCDEF"
    assert session.colors[ColorTarget.BACKGROUND] == "#ABCDEF"

    with pytest.raises(InvalidColor):
        session.set_color(ColorTarget.FONT, "red")

    assert session.colors[ColorTarget.FONT] == "#64748B"


def test_reset_color_restores_default():
    session = PickerSession()
    session.set_color(ColorTarget.FONT, "#000000")

    assert session.reset_color(ColorTarget.FONT) == "#64748B"


def test_apply_selection_uses_current_shade_and_notifies(events):
    session = PickerSession()
    session.emitter.on_pick("blue", 500)

    assert session.apply_selection(ColorTarget.BACKGROUND) == "#3B82F6"
    assert session.colors_view()["background"] == "#3B82F6"

    notes = session.drain_notifications()
    assert [(n.severity, n.message) for n in notes] == [(Severity.SUCCESS, "Color applied")]
    assert events("SELECTION_APPLIED")[0]["target"] == "background"


def test_copy_returns_text_and_notifies():
    session = PickerSession()
    session.emitter.on_pick("rose", 600)

    assert session.copy(CopyKind.BG_CLASS) == "bg-rose-600"
    assert session.copy(CopyKind.HEX) == "#E11D48"
    assert [n.message for n in session.drain_notifications()] == ["Copied", "Copied"]


def test_selection_view_includes_every_copy_kind():
    session = PickerSession()
    session.emitter.on_pick("green", 300)

    view = session.selection_view()

    assert view["hex"] == "#86EFAC"
    assert set(view["copy"]) == {k.value for k in CopyKind}
    assert view["copy"]["text"] == "text-green-300"


def test_start_without_auto_connect_does_not_dial():
    dialed: list[str] = []

    async def scenario():
        session = PickerSession(
            config=AppConfig(default_endpoint="ws://peer.test", auto_connect=False),
            opener=make_opener(dialed),
        )
        await session.start()
        await asyncio.sleep(0)
        assert session.manager.state is ConnectionState.DISCONNECTED

    asyncio.run(scenario())
    assert dialed == []


def test_start_with_auto_connect_dials_and_close_disconnects():
    dialed: list[str] = []

    async def scenario():
        session = PickerSession(
            config=AppConfig(default_endpoint="http://peer.test", auto_connect=True),
            opener=make_opener(dialed),
        )
        await session.start()
        for _ in range(5):
            await asyncio.sleep(0)
        assert session.manager.state is ConnectionState.CONNECTED

        await session.close()
        assert session.manager.state is ConnectionState.DISCONNECTED

    asyncio.run(scenario())
    assert dialed == ["ws://peer.test"]


def test_snapshot_shape():
    snap = PickerSession().snapshot()

    assert set(snap) == {"selection", "colors", "connection"}
    assert snap["connection"]["state"] == "DISCONNECTED"
