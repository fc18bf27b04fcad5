"""Built-in Normal-mode key bindings."""

from __future__ import annotations

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

NORMAL = "normal"

# (binding id, keys, action id)
DEFAULT_BINDINGS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("normal.h", ("h",), "core.move_left"),
    ("normal.left", ("LEFT",), "core.move_left"),
    ("normal.l", ("l",), "core.move_right"),
    ("normal.right", ("RIGHT",), "core.move_right"),
    ("normal.k", ("k",), "core.move_up"),
    ("normal.up", ("UP",), "core.move_up"),
    ("normal.j", ("j",), "core.move_down"),
    ("normal.down", ("DOWN",), "core.move_down"),
    ("normal.pageup", ("PAGEUP",), "core.page_up"),
    ("normal.pagedown", ("PAGEDOWN",), "core.page_down"),
    ("normal.g", ("g",), "core.jump_top"),
    ("normal.G", ("G",), "core.jump_bottom"),
    ("normal.0", ("0",), "core.line_start"),
    ("normal.dollar", ("$",), "core.line_end"),
    ("normal.i", ("i",), "core.enter_insert"),
    ("normal.x", ("x",), "edit.delete_char"),
    ("normal.d", ("d",), "edit.delete_line"),
    ("normal.y", ("y",), "edit.yank_line"),
    ("normal.p", ("p",), "edit.paste_below"),
    ("normal.u", ("u",), "edit.undo"),
    ("normal.ctrl_r", ("ctrl+r",), "edit.redo"),
    ("normal.slash", ("/",), "core.enter_search"),
    ("normal.n", ("n",), "search.forward"),
    ("normal.N", ("N",), "search.backward"),
    ("normal.q", ("q",), "command.quit"),
    ("normal.ctrl_c", ("ctrl+c",), "command.force_quit"),
    ("normal.colon_w", (":", "w"), "command.write"),
    ("normal.colon_q_bang", (":", "q", "!"), "command.force_quit"),
    ("normal.colon_x", (":", "x"), "command.write_quit"),
    ("normal.colon_s", (":", "s"), "core.enter_replace"),
)


def default_actions() -> tuple[ActionRef, ...]:
    # Imported here: the actions import the mode types, which import keymaps.
    from tinyvim.actions import command, core, editing, search

    return (
        ActionRef("core.move_left", core.move_left, "Move left"),
        ActionRef("core.move_right", core.move_right, "Move right"),
        ActionRef("core.move_up", core.move_up, "Move up"),
        ActionRef("core.move_down", core.move_down, "Move down"),
        ActionRef("core.page_up", core.page_up, "Scroll up one screen"),
        ActionRef("core.page_down", core.page_down, "Scroll down one screen"),
        ActionRef("core.jump_top", core.jump_top, "Jump to first line"),
        ActionRef("core.jump_bottom", core.jump_bottom, "Jump to last line"),
        ActionRef("core.line_start", core.line_start, "Jump to line start"),
        ActionRef("core.line_end", core.line_end, "Jump to line end"),
        ActionRef("core.enter_insert", core.enter_insert_mode, "Enter insert mode"),
        ActionRef("core.enter_search", core.enter_search_mode, "Start a search"),
        ActionRef(
            "core.enter_replace", core.enter_replace_mode, "Replace the search term"
        ),
        ActionRef(
            "edit.delete_char",
            editing.delete_char_under_cursor,
            "Delete the character under the cursor",
        ),
        ActionRef("edit.delete_line", editing.delete_line, "Delete the current line"),
        ActionRef("edit.yank_line", editing.yank_line, "Yank the current line"),
        ActionRef("edit.paste_below", editing.paste_below, "Paste below the cursor"),
        ActionRef("edit.undo", editing.undo, "Undo"),
        ActionRef("edit.redo", editing.redo, "Redo"),
        ActionRef("search.forward", search.search_forward, "Next match"),
        ActionRef("search.backward", search.search_backward, "Previous match"),
        ActionRef("command.write", command.write_buffer, "Save the buffer"),
        ActionRef("command.quit", command.quit_editor, "Quit if unmodified"),
        ActionRef("command.force_quit", command.force_quit, "Quit unconditionally"),
        ActionRef("command.write_quit", command.write_and_quit, "Save and quit"),
    )


def default_bindings() -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=binding_id,
            mode=NORMAL,
            sequence=KeySequence.from_strings(*keys),
            action_id=action_id,
        )
        for binding_id, keys, action_id in DEFAULT_BINDINGS
    )


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register the built-in actions and Normal-mode bindings."""

    for action in default_actions():
        registry.register_action(action)
    for binding in default_bindings():
        registry.register_binding(binding)


__all__ = [
    "DEFAULT_BINDINGS",
    "default_actions",
    "default_bindings",
    "load_default_keymaps",
]
