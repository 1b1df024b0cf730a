"""The interactive note browser and its command-line entry point."""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys

from rich import box
from rich.markdown import Markdown
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .config import CONFIG_FILE_NAME, Config, ConfigError, get_config_dir, load_config
from .notes import NEW_FOLDER_NAME, NoteTree
from .styles import Styles, _capture, _visible_width, _with_margin

VERSION = "dev"
CHAR_LIMIT = 50
HELP_TEXT = (
    "↑/k,↓/j: up/down • h/l: expand • enter: edit • n: new note • N: new folder"
    " • backspace: archive • tab: show sidebar • q: quit"
)

_KEY_NAMES = {
    "KEY_UP": "up", "KEY_DOWN": "down", "KEY_LEFT": "left", "KEY_RIGHT": "right",
    "KEY_ENTER": "enter", "KEY_ESCAPE": "esc", "KEY_BACKSPACE": "backspace",
    "KEY_TAB": "tab", "KEY_PGUP": "pgup", "KEY_PGDOWN": "pgdown",
    "\r": "enter", "\n": "enter", "\t": "tab", "\x1b": "esc", "\x7f": "backspace",
    "\x08": "backspace", "\x03": "ctrl+c", "\x15": "ctrl+u", "\x04": "ctrl+d",
}


def print_version() -> str:
    """Write the version line to stdout and return it."""
    line = f"note version {VERSION}"
    sys.stdout.write(line + "\n")
    return line


def print_config() -> None:
    """Print the config file; exit with status 1 if it cannot be read."""
    path = os.path.join(get_config_dir(), CONFIG_FILE_NAME)
    try:
        with open(path, encoding="utf-8") as handle:
            data = handle.read()
    except OSError as exc:
        print(f"Error reading config file: {exc}")
        raise SystemExit(1) from exc
    print(data)


def render_markdown(content: str, width: int) -> str:
    """Render markdown for the terminal, falling back to the raw text."""
    if width < 1:
        return content
    try:
        return _capture(Markdown(content), width)
    except Exception:
        return content


def help_text() -> str:
    return HELP_TEXT


class _Viewport:
    """A scrollable window over rendered lines."""

    def __init__(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.lines: list[str] = []
        self.offset = 0

    def set_content(self, text: str) -> None:
        self.lines = text.split("\n")
        self.scroll(0)

    def goto_top(self) -> None:
        self.offset = 0

    def scroll(self, delta: int) -> None:
        top = max(len(self.lines) - max(self.height, 0), 0)
        self.offset = min(max(self.offset + delta, 0), top)

    def handle_key(self, key: str) -> None:
        page, half = max(self.height, 1), max(self.height // 2, 1)
        steps = {
            "pgdown": page, " ": page, "f": page, "pgup": -page, "b": -page,
            "d": half, "ctrl+d": half, "u": -half, "ctrl+u": -half,
            "down": 1, "j": 1, "up": -1, "k": -1,
        }
        if key in steps:
            self.scroll(steps[key])

    def view(self) -> str:
        return "\n".join(self.lines[self.offset:self.offset + max(self.height, 0)])


def _join_horizontal(*blocks: str) -> str:
    """Place blocks side by side, aligned at the top."""
    split = [block.split("\n") for block in blocks]
    widths = [max(map(_visible_width, lines), default=0) for lines in split]
    rows = max(map(len, split), default=0)
    return "\n".join(
        "".join(
            (line := lines[row] if row < len(lines) else "") + " " * (width - _visible_width(line))
            for lines, width in zip(split, widths)
        )
        for row in range(rows)
    )


def _key_name(keystroke) -> str | None:
    if getattr(keystroke, "is_sequence", False) and keystroke.name:
        return _KEY_NAMES.get(keystroke.name)
    text = str(keystroke)
    if text in _KEY_NAMES:
        return _KEY_NAMES[text]
    return text if len(text) == 1 and text.isprintable() else None


class App:
    """State and behaviour of the note browser screen."""

    def __init__(self, cfg: Config, width: int = 80, height: int = 24) -> None:
        self.config = cfg
        self.styles = Styles(cfg)
        self.show_sidebar = True
        self.renaming = False
        self.rename_buffer = ""
        self.done = False
        self.pending_edit: str | None = None
        os.makedirs(cfg.notes_dir, exist_ok=True)
        self.tree = NoteTree(cfg.notes_dir, cfg.archive_dir)
        self._set_size(width, height, width - cfg.layout.padding.horizontal * 2)

    def _set_size(self, width: int, height: int, viewport_width: int) -> None:
        self.width, self.height = width, height
        self.viewport = _Viewport(viewport_width, self.config.calculate_heights(height).content)
        self.wrap_width = viewport_width - 4
        self._update_preview()

    def _update_preview(self) -> None:
        content = self.tree.read_current()
        if content is not None:
            self.viewport.set_content(render_markdown(content, self.wrap_width))
            self.viewport.goto_top()

    def resize(self, width: int, height: int) -> None:
        """Adapt the preview pane to a new terminal size."""
        layout = self.config.layout
        pad_h = layout.padding.horizontal
        if self.show_sidebar:
            viewport_width = width - (layout.sidebar_width + pad_h * 2) - pad_h * 4
        else:
            viewport_width = width - pad_h * 2
        self._set_size(width, height, viewport_width)

    def _start_renaming(self, value: str) -> None:
        self.renaming = True
        self.rename_buffer = value[:CHAR_LIMIT]

    def _handle_rename_key(self, key: str) -> None:
        if key == "enter":
            if self.rename_buffer:
                try:
                    self.tree.rename_current(self.rename_buffer)
                except OSError:
                    pass
            self.renaming = False
        elif key == "esc":
            self.renaming = False
        elif key == "backspace":
            self.rename_buffer = self.rename_buffer[:-1]
        elif len(key) == 1 and key.isprintable() and len(self.rename_buffer) < CHAR_LIMIT:
            self.rename_buffer += key

    def handle_key(self, key: str) -> None:
        """Apply one named key press ("up", "enter", "ctrl+c", "n", ...)."""
        if self.renaming:
            self._handle_rename_key(key)
            return
        if key in ("q", "ctrl+c"):
            self.done = True
            return
        if key == "tab":
            self.show_sidebar = not self.show_sidebar
            return
        if key == "N":
            try:
                path = self.tree.create_folder()
            except OSError:
                path = None
            self._start_renaming(os.path.basename(path) if path else NEW_FOLDER_NAME)
            return
        if key == "backspace":
            try:
                if self.tree.archive_current() is not None:
                    self._update_preview()
            except OSError:
                pass
            return
        if key == "enter":
            note = self.tree.current()
            if note is not None:
                if note.is_dir:
                    self._start_renaming(note.title)
                else:
                    self.pending_edit = note.path
                return
        elif key in ("up", "k"):
            if self.tree.move_up():
                self._update_preview()
        elif key in ("down", "j"):
            if self.tree.move_down():
                self._update_preview()
        elif key == "n":
            try:
                self.tree.create_note(self.config.create_empty)
                self._update_preview()
            except OSError:
                pass
        elif key in ("right", "l"):
            self.tree.expand()
        elif key in ("left", "h"):
            self.tree.collapse()
        self.viewport.handle_key(key)

    def _render_prompt(self) -> str:
        value = self.rename_buffer or Style(dim=True).render("Folder name")
        body = Text.from_ansi(f"Enter folder name:\n\n> {value}{Style(reverse=True).render(' ')}")
        panel = Panel(
            body,
            box=box.ROUNDED,
            border_style=Style(color=self.styles.highlight),
            padding=(1, 2),
            expand=False,
        )
        return _with_margin(_capture(panel, self.width), self.config.layout.header_gap, 0)

    def _render_footer(self) -> str:
        bar = self.styles.render_status_bar
        if self.renaming:
            return bar(self.width, "Enter to confirm • Esc to cancel")
        return bar(self.width, self.tree.status_text()) + "\n" + bar(self.width, HELP_TEXT)

    def view(self) -> str:
        """The whole screen as a string with ANSI styling."""
        layout = self.config.layout
        heights = self.config.calculate_heights(self.height)
        pad_h = layout.padding.horizontal
        parts = [self.styles.render_header(self.width, self.config.default_dimensions(), "note")]

        if self.renaming:
            parts.append(self._render_prompt())
        elif not self.tree.notes:
            message = Padding(Text("No notes found. Press 'n' to create one."), (pad_h, pad_h), expand=False)
            parts.append(_capture(message, self.width))
        else:
            content_width = self.width - pad_h * 2
            if self.show_sidebar:
                content_width = self.width - (layout.sidebar_width + pad_h * 2) - pad_h * 4
            content = self.styles.render_content(
                content_width, heights.content, layout.header_gap, self.viewport.view()
            )
            if self.show_sidebar:
                highlight = Style(color=self.styles.highlight)
                lines = "\n".join(
                    highlight.render(text) if selected else text
                    for text, selected in self.tree.sidebar_lines()
                )
                sidebar = self.styles.render_sidebar(
                    layout.sidebar_width, heights.content, layout.header_gap, lines
                )
                content = _join_horizontal(sidebar, content)
            parts.append(content)

        parts += ["\n", self._render_footer()]
        return "".join(parts)

    def _event_loop(self, term) -> None:
        dirty = True
        while not self.done and self.pending_edit is None:
            if (term.width, term.height) != (self.width, self.height):
                self.resize(term.width, term.height)
                dirty = True
            if dirty:
                sys.stdout.write(term.home + term.clear + self.view())
                sys.stdout.flush()
                dirty = False
            try:
                keystroke = term.inkey(timeout=0.25)
            except KeyboardInterrupt:
                self.done = True
                return
            name = _key_name(keystroke) if keystroke else None
            if name is not None:
                self.handle_key(name)
                dirty = True

    def run(self) -> None:
        """Drive the screen in the terminal until the user quits."""
        from blessed import Terminal

        term = Terminal()
        self.resize(term.width, term.height)
        while not self.done:
            with term.fullscreen(), term.cbreak(), term.hidden_cursor():
                self._event_loop(term)
            if self.pending_edit is not None:
                path, self.pending_edit = self.pending_edit, None
                try:
                    subprocess.run([self.config.resolve_editor(), path], check=False)
                except OSError:
                    pass
                self.tree.refresh()
                self._update_preview()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="note")
    parser.add_argument("-version", "--version", dest="version", action="store_true",
                        help="Print version information")
    parser.add_argument("-config", "--config", dest="config", action="store_true",
                        help="Print configuration file location and contents")
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return 0
    if args.config:
        print_config()
        return 0

    try:
        cfg = load_config()
    except (ConfigError, OSError) as exc:
        print(f"Failed to initialize model: {exc}", file=sys.stderr)
        return 1

    size = shutil.get_terminal_size()
    try:
        App(cfg, size.columns, size.lines).run()
    except Exception as exc:
        print(f"Error: {exc}")
        return 1
    return 0