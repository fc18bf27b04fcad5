"""Executable Textual app hosting the editor."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use tinyvim.adapters.textual.app"
    ) from exc

from tinyvim.config import EditorConfig
from tinyvim.modes.mode_manager import create_default_manager
from tinyvim.runtime import telemetry
from tinyvim.state import EditorState
from tinyvim.view import Frame, FrameLine

from .controller import TextualEditorAdapter, TextualUIHooks

GUTTER_STYLE = "dim"
MATCH_STYLE = "black on yellow"
CURSOR_STYLE = "reverse"
STATUS_STYLE = "bright_white on #5f00ff"


def render_line(line: FrameLine) -> Text:
    if line.is_filler:
        return Text(line.render(), style="blue")
    rendered = Text(line.gutter, style=GUTTER_STYLE)
    body = Text(line.text)
    for start, end in line.highlights:
        body.stylize(MATCH_STYLE, start, end)
    if line.cursor_col is not None:
        if line.cursor_col >= len(line.text):
            body.append(" ", style=CURSOR_STYLE)
        else:
            body.stylize(CURSOR_STYLE, line.cursor_col, line.cursor_col + 1)
    rendered.append_text(body)
    return rendered


def render_frame(frame: Frame) -> Text:
    return Text("\n").join(render_line(line) for line in frame.lines)


class EditorApp(App[int]):
    """Full-screen editor: a text area plus a one-line status bar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		overflow: hidden;
	}

	#status-line {
		height: 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(self, state: EditorState) -> None:
        super().__init__()
        self.state = state
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("tinyvim.adapters.textual")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        manager = create_default_manager(self.state)
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            request_exit=lambda: self.exit(0),
            log=self._logger.debug,
        )
        self.adapter = TextualEditorAdapter(manager, hooks)
        self.adapter.resize(self.size.height)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()
        event.prevent_default()

    def action_interrupt(self) -> None:
        if self.adapter:
            self.adapter.handle_textual_key("ctrl+c")

    def _update_frame(self, frame: Frame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_frame(frame))
        if self._status_widget:
            self._status_widget.update(Text(frame.status, style=STATUS_STYLE))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinyvim", description="A small modal text editor."
    )
    parser.add_argument("path", nargs="?", help="File to open (optional)")
    parser.add_argument(
        "--tab-size", type=int, default=None, help="Spaces per tab stop (default: 4)"
    )
    parser.add_argument(
        "--log-file", default=None, help="Write telemetry to this file"
    )
    parser.add_argument(
        "--log-level", default=None, help="Minimum log level (default: INFO)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(level=args.log_level, log_file=args.log_file)

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        print("tinyvim: a terminal is required", file=sys.stderr)
        return 1

    config = EditorConfig.from_env()
    if args.tab_size is not None:
        config = replace(config, tab_size=args.tab_size)
    state = EditorState.open(args.path, config=config)
    telemetry.record_event(
        "editor.start",
        data={"path": args.path or "", "lines": state.buffer.line_count},
    )
    EditorApp(state).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
