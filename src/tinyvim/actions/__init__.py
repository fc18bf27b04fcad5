"""High-level editing verbs reused across modes."""

from .core import (
    enter_insert_mode,
    enter_replace_mode,
    enter_search_mode,
    jump_bottom,
    jump_top,
    line_end,
    line_start,
    move_down,
    move_left,
    move_right,
    move_up,
    page_down,
    page_up,
)
from .editing import (
    backspace,
    delete_char_under_cursor,
    delete_line,
    insert_character,
    insert_newline,
    insert_tab,
    paste_below,
    redo,
    undo,
    yank_line,
)
from .search import search_backward, search_forward, submit_replace, submit_search
from .command import force_quit, quit_editor, write_and_quit, write_buffer

__all__ = [
    "enter_insert_mode",
    "enter_search_mode",
    "enter_replace_mode",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "page_up",
    "page_down",
    "jump_top",
    "jump_bottom",
    "line_start",
    "line_end",
    "delete_char_under_cursor",
    "delete_line",
    "yank_line",
    "paste_below",
    "undo",
    "redo",
    "insert_character",
    "insert_newline",
    "backspace",
    "insert_tab",
    "search_forward",
    "search_backward",
    "submit_search",
    "submit_replace",
    "write_buffer",
    "quit_editor",
    "force_quit",
    "write_and_quit",
]
