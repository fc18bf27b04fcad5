from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from tinyvim.config import EditorConfig
from tinyvim.modes import KeyInput, ModeResult
from tinyvim.modes.mode_manager import ModeManager, create_default_manager
from tinyvim.state import EditorMode, EditorState

NAMED = {"ESC", "ENTER", "BACKSPACE", "TAB", "UP", "DOWN", "LEFT", "RIGHT", "PAGEUP", "PAGEDOWN"}


def make_manager(*lines: str, **state_kwargs: object) -> ModeManager:
    state = EditorState.from_lines(lines or ("",), **state_kwargs)
    return create_default_manager(state)


def to_key(name: str) -> KeyInput:
    if name in NAMED:
        return KeyInput(key=name)
    if name.startswith("ctrl+"):
        return KeyInput.ctrl(name[len("ctrl+"):])
    return KeyInput.char(name)


def press(manager: ModeManager, *keys: str) -> List[ModeResult]:
    return [manager.handle_key(to_key(key)) for key in keys]


def type_text(manager: ModeManager, text: str) -> None:
    press(manager, *text)


def test_insert_then_undo_restores_buffer_and_cursor() -> None:
    manager = make_manager("abc", "def")
    state = manager.state

    press(manager, "i", "X")
    assert state.buffer.snapshot() == ("Xabc", "def")
    assert state.cursor.position == (0, 1)
    assert state.mode is EditorMode.INSERT

    press(manager, "ESC")
    assert state.mode is EditorMode.NORMAL
    assert state.cursor.position == (0, 0)

    press(manager, "u")
    assert state.buffer.snapshot() == ("abc", "def")
    assert state.cursor.position == (0, 0)
    assert state.status == "Undo performed"


def test_redo_restores_state_live_at_undo() -> None:
    manager = make_manager("abc")
    state = manager.state

    press(manager, "i", "X", "ESC", "u", "ctrl+r")

    assert state.buffer.snapshot() == ("Xabc",)
    assert state.status == "Redo performed"


def test_new_edit_after_undo_clears_redo() -> None:
    manager = make_manager("abc")
    state = manager.state

    press(manager, "i", "X", "ESC", "u", "i", "Y", "ESC", "ctrl+r")

    assert state.buffer.snapshot() == ("Yabc",)
    assert state.status == "Nothing to redo"


def test_each_inserted_character_is_one_undo_step() -> None:
    manager = make_manager("")
    state = manager.state

    press(manager, "i", "a", "b", "c", "ESC")
    assert state.history.undo_depth == 3

    press(manager, "u", "u")
    assert state.buffer.snapshot() == ("a",)
    press(manager, "u", "u")
    assert state.buffer.snapshot() == ("",)
    assert state.status == "Nothing to undo"


def test_backspace_at_buffer_start_is_noop() -> None:
    manager = make_manager("abc")
    state = manager.state

    press(manager, "i", "BACKSPACE")

    assert state.buffer.snapshot() == ("abc",)
    assert state.history.undo_depth == 0
    assert state.modified is False


def test_backspace_at_line_start_joins_lines() -> None:
    manager = make_manager("ab", "cd")
    state = manager.state

    press(manager, "j", "i", "BACKSPACE")

    assert state.buffer.snapshot() == ("abcd",)
    assert state.cursor.position == (0, 2)


def test_enter_splits_line() -> None:
    manager = make_manager("hello")
    state = manager.state

    press(manager, "l", "l", "i", "ENTER")

    assert state.buffer.snapshot() == ("he", "llo")
    assert state.cursor.position == (1, 0)


def test_tab_pads_to_next_stop_in_one_step() -> None:
    manager = make_manager("ab")
    state = manager.state

    press(manager, "l", "i", "TAB")

    assert state.buffer.snapshot() == ("a   b",)
    assert state.cursor.position == (0, 4)
    assert state.history.undo_depth == 1


def test_escape_at_column_zero_stays_put() -> None:
    manager = make_manager("abc")
    state = manager.state

    press(manager, "i", "ESC")

    assert state.cursor.position == (0, 0)
    assert state.status == "Normal mode"


def test_insert_mode_types_command_letters() -> None:
    manager = make_manager("")
    state = manager.state

    press(manager, "i", "q", ":", "d")

    assert state.buffer.snapshot() == ("q:d",)
    assert state.quit_requested is False


def test_delete_char_is_not_undoable() -> None:
    manager = make_manager("abc")
    state = manager.state

    press(manager, "x")
    assert state.buffer.snapshot() == ("bc",)
    assert state.modified is True
    assert state.history.undo_depth == 0

    press(manager, "u")
    assert state.buffer.snapshot() == ("bc",)
    assert state.status == "Nothing to undo"


def test_delete_line_then_paste_below() -> None:
    manager = make_manager("one", "two", "three")
    state = manager.state

    press(manager, "d")
    assert state.buffer.snapshot() == ("two", "three")
    assert state.register.get() == "one"
    assert state.status == "Line deleted"

    press(manager, "p")
    assert state.buffer.snapshot() == ("two", "one", "three")
    assert state.cursor.position == (1, 0)
    assert state.status == "Line pasted from clipboard"


def test_delete_last_row_moves_cursor_up() -> None:
    manager = make_manager("a", "b")
    state = manager.state

    press(manager, "j", "d")

    assert state.buffer.snapshot() == ("a",)
    assert state.cursor.position == (0, 0)


def test_delete_sole_line_is_refused() -> None:
    manager = make_manager("only")
    state = manager.state

    press(manager, "d")

    assert state.buffer.snapshot() == ("only",)
    assert state.status == "Cannot delete the only line"
    assert state.history.undo_depth == 0


def test_yank_and_paste() -> None:
    manager = make_manager("a", "b")
    state = manager.state

    press(manager, "y")
    assert state.status == "Line yanked to clipboard"
    press(manager, "p")

    assert state.buffer.snapshot() == ("a", "a", "b")
    assert state.cursor.position == (1, 0)


def test_paste_with_empty_register_is_noop() -> None:
    manager = make_manager("a")
    state = manager.state

    press(manager, "p")

    assert state.buffer.snapshot() == ("a",)
    assert state.history.undo_depth == 0


def test_motions_and_jumps() -> None:
    lines = [f"line {n}" for n in range(50)]
    manager = make_manager(*lines)
    state = manager.state
    state.cursor.resize(10)

    press(manager, "PAGEDOWN")
    assert state.cursor.row == 10
    assert state.cursor.offset_row == 1

    press(manager, "G")
    assert state.cursor.row == 49
    assert state.cursor.offset_row == 40

    press(manager, "$")
    assert state.cursor.col == len("line 49")
    press(manager, "0")
    assert state.cursor.col == 0

    press(manager, "g")
    assert state.cursor.position == (0, 0)
    assert state.cursor.offset_row == 0


def test_unbound_key_is_not_consumed() -> None:
    manager = make_manager("abc")

    (result,) = press(manager, "z")

    assert result.consumed is False
    assert manager.state.buffer.snapshot() == ("abc",)


def test_colon_prefix_waits_then_falls_back() -> None:
    manager = make_manager("a", "b")
    state = manager.state

    (pending,) = press(manager, ":")
    assert pending.status == "pending"
    assert state.pending_keys == (":",)
    assert state.status == ":"

    press(manager, "j")
    assert state.pending_keys == ()
    assert state.cursor.row == 1


def test_quit_refused_with_unsaved_changes() -> None:
    manager = make_manager("abc")
    state = manager.state
    quits: List[object] = []
    state.bus.subscribe("editor.quit", quits.append)

    press(manager, "x", "q")
    assert state.quit_requested is False
    assert state.status == "Unsaved changes. Use :q! to force quit."

    press(manager, ":", "q", "!")
    assert state.quit_requested is True
    assert quits == [{"force": True}]

    (closed,) = press(manager, "x")
    assert closed.status == "closed"


def test_quit_when_clean() -> None:
    manager = make_manager("abc")

    press(manager, "q")

    assert manager.state.quit_requested is True


def test_ctrl_c_quits_unconditionally() -> None:
    manager = make_manager("abc")

    press(manager, "x", "ctrl+c")

    assert manager.state.quit_requested is True


def test_search_next_and_previous() -> None:
    manager = make_manager("hello world", "world peace")
    state = manager.state

    press(manager, "/")
    assert state.mode is EditorMode.SEARCH
    type_text(manager, "world")
    assert state.status == "/world"
    press(manager, "ENTER")
    assert state.mode is EditorMode.NORMAL
    assert state.search.term == "world"
    assert state.cursor.position == (0, 6)

    press(manager, "n")
    assert state.cursor.position == (1, 0)

    press(manager, "n")
    assert state.cursor.position == (1, 0)
    assert state.status == "Pattern not found: world"

    press(manager, "N")
    assert state.cursor.position == (0, 6)


def test_search_repeat_without_term() -> None:
    manager = make_manager("abc")

    press(manager, "n")

    assert manager.state.status == "No previous search term"


def test_search_prompt_backspace_and_escape() -> None:
    manager = make_manager("alpha beta")
    state = manager.state
    press(manager, "/", "b", "e", "ENTER")

    press(manager, "/", "a", "x", "BACKSPACE")
    assert state.status == "/a"

    press(manager, "ESC")
    assert state.mode is EditorMode.NORMAL
    assert state.status == "Normal mode"
    assert state.search.term == "be"
    assert state.search.draft == ""


def test_empty_search_prompt_clears_term() -> None:
    manager = make_manager("hello world", "world peace")
    state = manager.state

    press(manager, "/", *"world", "ENTER")
    press(manager, "/", "ENTER")

    assert state.search.term == ""
    assert state.cursor.position == (0, 6)
    assert state.status == "No previous search term"

    press(manager, ":", "s")
    assert state.mode is EditorMode.NORMAL


def test_search_backward_skips_match_spanning_cursor() -> None:
    manager = make_manager("hello world")
    state = manager.state

    press(manager, "/", *"world", "ENTER", "l", "l", "N")

    assert state.cursor.position == (0, 8)
    assert state.status == "Pattern not found: world"


def test_replace_all_through_prompt() -> None:
    manager = make_manager("foo bar foo")
    state = manager.state

    press(manager, "/", *"foo", "ENTER", ":", "s")
    assert state.mode is EditorMode.REPLACE
    assert state.status == "Replace with: "

    type_text(manager, "baz")
    assert state.status == "Replace with: baz"
    press(manager, "ENTER")

    assert state.mode is EditorMode.NORMAL
    assert state.buffer.snapshot() == ("baz bar baz",)
    assert state.status == "Replaced 2 occurrences"
    assert state.modified is True

    press(manager, "u")
    assert state.buffer.snapshot() == ("foo bar foo",)


def test_replace_needs_search_term() -> None:
    manager = make_manager("foo")
    state = manager.state

    press(manager, ":", "s")

    assert state.mode is EditorMode.NORMAL
    assert state.status == "No search term to replace"


def test_replace_escape_discards_replacement() -> None:
    manager = make_manager("foo")
    state = manager.state

    press(manager, "/", *"foo", "ENTER", ":", "s", "q", "ESC")

    assert state.mode is EditorMode.NORMAL
    assert state.buffer.snapshot() == ("foo",)
    assert state.search.replacement == ""
    assert state.status == "Normal mode"


def test_write_saves_to_filename(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    manager = make_manager("abc", filename=str(target))
    state = manager.state
    saved: List[object] = []
    state.bus.subscribe("editor.saved", saved.append)

    press(manager, "x", ":", "w")

    assert target.read_text(encoding="utf-8") == "bc\n"
    assert state.modified is False
    assert state.status == "File saved successfully"
    assert saved == [{"path": str(target)}]


def test_write_without_filename_uses_default_path(tmp_path: Path) -> None:
    target = tmp_path / "output.txt"
    manager = make_manager("abc", config=EditorConfig(default_save_path=str(target)))

    press(manager, ":", "w")

    assert target.read_text(encoding="utf-8") == "abc\n"


def test_write_failure_keeps_buffer_modified(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "notes.txt"
    manager = make_manager("abc", filename=str(target))
    state = manager.state

    press(manager, "x", ":", "x")

    assert state.status.startswith("Error saving file:")
    assert state.modified is True
    assert state.quit_requested is False


def test_write_and_quit(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    manager = make_manager("abc", filename=str(target))

    press(manager, ":", "x")

    assert target.exists()
    assert manager.state.quit_requested is True


def test_mode_switch_events_reach_bus() -> None:
    manager = make_manager("abc")
    switches: List[object] = []
    manager.state.bus.subscribe("mode.switch", switches.append)

    press(manager, "i", "ESC", "/", "ESC")

    assert switches == [
        EditorMode.INSERT,
        EditorMode.NORMAL,
        EditorMode.SEARCH,
        EditorMode.NORMAL,
    ]


def test_cursor_invariants_hold_across_session() -> None:
    manager = make_manager("short", "", "a much longer line", "xy")
    state = manager.state
    state.cursor.resize(2)
    keys = ["$", "j", "j", "l", "k", "G", "$", "i", "ENTER", "BACKSPACE", "ESC", "d", "p", "g", "x"]

    for key in keys * 2:
        press(manager, key)
        assert 0 <= state.cursor.row < state.buffer.line_count
        assert 0 <= state.cursor.col <= state.buffer.line_length(state.cursor.row)
        assert state.cursor.offset_row <= state.cursor.row
        assert state.cursor.row <= state.cursor.offset_row + state.cursor.height - 1


def test_manager_without_modes_rejects_keys() -> None:
    manager = ModeManager(EditorState.from_lines(["abc"]))

    with pytest.raises(RuntimeError):
        manager.handle_key(KeyInput.char("x"))
    with pytest.raises(KeyError):
        manager.switch_mode(EditorMode.INSERT)


def test_registering_a_mode_twice_fails() -> None:
    manager = make_manager("abc")

    with pytest.raises(ValueError):
        manager.register_mode(type(manager.active_mode), manager.keymap_resolver)
