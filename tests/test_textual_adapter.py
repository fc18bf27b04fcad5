from __future__ import annotations

from typing import List

from tinyvim.adapters.textual import TextualEditorAdapter, TextualUIHooks, normalize_key
from tinyvim.modes import KeyInput
from tinyvim.modes.mode_manager import create_default_manager
from tinyvim.state import EditorMode, EditorState
from tinyvim.view import Frame


class Recorder:
    def __init__(self) -> None:
        self.frames: List[Frame] = []
        self.exits: List[bool] = []
        self.events: List[tuple[str, object | None]] = []
        self.logs: List[str] = []

    def hooks(self) -> TextualUIHooks:
        return TextualUIHooks(
            update_frame=self.frames.append,
            request_exit=lambda: self.exits.append(True),
            handle_event=lambda name, payload: self.events.append((name, payload)),
            log=self.logs.append,
        )


def make_adapter(*lines: str) -> tuple[TextualEditorAdapter, Recorder]:
    recorder = Recorder()
    manager = create_default_manager(EditorState.from_lines(lines or ("",)))
    return TextualEditorAdapter(manager, recorder.hooks()), recorder


def test_normalize_key_maps_textual_names() -> None:
    assert normalize_key("escape") == KeyInput(key="ESC")
    assert normalize_key("enter") == KeyInput(key="ENTER")
    assert normalize_key("pagedown") == KeyInput(key="PAGEDOWN")
    assert normalize_key("ctrl+r") == KeyInput(key="r", modifiers=("ctrl",))
    assert normalize_key("dollar_sign", "$") == KeyInput.char("$")
    assert normalize_key("f1") is None


def test_adapter_pushes_frames_for_each_key() -> None:
    adapter, recorder = make_adapter("abc")
    initial = len(recorder.frames)

    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("X", character="X")
    adapter.handle_textual_key("escape")

    assert initial == 1
    assert len(recorder.frames) == 4
    assert recorder.frames[-1].lines[0].text == "Xabc"
    assert recorder.frames[-1].mode is EditorMode.NORMAL
    assert recorder.frames[2].lines[0].cursor_col == 1


def test_adapter_relays_mode_switch_events() -> None:
    adapter, recorder = make_adapter("abc")

    adapter.handle_textual_key("i", character="i")

    assert ("mode.switch", EditorMode.INSERT) in recorder.events
    assert recorder.logs


def test_adapter_requests_exit_on_quit() -> None:
    adapter, recorder = make_adapter("abc")

    adapter.handle_textual_key("q", character="q")

    assert recorder.exits == [True]


def test_adapter_ctrl_c_quits() -> None:
    adapter, recorder = make_adapter("abc")

    adapter.handle_textual_key("x", character="x")
    adapter.handle_textual_key("ctrl+c")

    assert recorder.exits == [True]


def test_adapter_drops_unknown_keys() -> None:
    adapter, recorder = make_adapter("abc")

    assert adapter.handle_textual_key("f5") is None
    assert len(recorder.frames) == 1


def test_resize_sets_viewport_height() -> None:
    adapter, recorder = make_adapter("abc")

    adapter.resize(30)

    assert adapter.state.cursor.height == 28
    assert len(recorder.frames[-1].lines) == 28
