"""Terminal styling for the header, sidebar, content pane and status bar."""

from __future__ import annotations

import io

from rich import box
from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .config import Config, Dimensions

HIGHLIGHT = "#9D8CFF"


def _capture(renderable: RenderableType, width: int) -> str:
    """Render ``renderable`` to an ANSI string at the given width."""
    console = Console(
        file=io.StringIO(),
        width=max(width, 1),
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
        emoji=False,
        markup=False,
    )
    with console.capture() as capture:
        console.print(renderable)
    return capture.get().removesuffix("\n")


def _visible_width(line: str) -> int:
    return Text.from_ansi(line).cell_len


def _with_margin(block: str, gap: int, width: int) -> str:
    """Put ``gap`` blank lines above ``block``."""
    return "\n".join([" " * max(width, 0)] * max(gap, 0) + [block])


class Styles:
    """Colours and paddings derived from the configuration."""

    def __init__(self, cfg: Config) -> None:
        self.highlight = HIGHLIGHT
        self.padding_h, self.padding_v = cfg.padding()
        self.dims = cfg.default_dimensions()

    def _bar(self, body: Text, width: int, height: int) -> str:
        pad = max(min(self.padding_h, (max(width, 1) - 1) // 2), 0)
        lines = _capture(Padding(body, (0, pad)), width).split("\n")
        lines += [" " * max(width, 0)] * (height - len(lines))
        return "\n".join(lines)

    def _panel(self, content: str, width: int, height: int, pad_v: int, pad_h: int) -> str:
        width, height = max(width, 1), max(height, 0)
        panel = Panel(
            Text.from_ansi(content.rstrip("\n")),
            box=box.ROUNDED,
            border_style=Style(color=self.highlight),
            width=width + 2,
            height=height + 2,
            padding=(min(pad_v, height // 2), max(min(pad_h, (width - 1) // 2), 0)),
        )
        return _capture(panel, width + 2)

    def render_header(self, width: int, dims: Dimensions, text: str) -> str:
        """Centred bold title line followed by the pen mark."""
        body = Text(justify="center", style=Style(bold=True, color="#FFFFFF"))
        body.append(text, style=Style(color=self.highlight))
        body.append(" ✍️")
        return self._bar(body, width, dims.header)

    def render_sidebar(self, width: int, height: int, header_gap: int, content: str) -> str:
        """Bordered, padded sidebar block with a top margin."""
        block = self._panel(content, width, height, self.padding_v, self.padding_h)
        return _with_margin(block, header_gap, max(width, 1) + 2)

    def render_content(self, width: int, height: int, header_gap: int, content: str) -> str:
        """Bordered content pane with a top margin."""
        block = self._panel(content, width, height, 0, 0)
        return _with_margin(block, header_gap, max(width, 1) + 2)

    def render_status_bar(self, width: int, text: str) -> str:
        """Grey status line spanning the full width."""
        return self._bar(Text(text, style=Style(color="#626262")), width, self.dims.status)