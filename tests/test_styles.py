from rich.text import Text

from notebrowse.config import Config
from notebrowse.styles import Styles


def make_config(**layout):
    cfg = Config(config_dir="cfg", notes_dir="notes", archive_dir="archive")
    for key, value in layout.items():
        setattr(cfg.layout, key, value)
    return cfg


def plain(rendered):
    return Text.from_ansi(rendered).plain


def widths(rendered):
    return [Text.from_ansi(line).cell_len for line in rendered.split("\n")]


def test_highlight_colour():
    assert Styles(make_config()).highlight == "#9D8CFF"


def test_padding_taken_from_config():
    cfg = make_config()
    styles = Styles(cfg)
    assert (styles.padding_h, styles.padding_v) == cfg.padding()


def test_header_contains_title_and_height():
    cfg = make_config()
    styles = Styles(cfg)
    dims = cfg.default_dimensions()
    rendered = styles.render_header(60, dims, "note")
    assert "note" in plain(rendered)
    assert len(rendered.split("\n")) >= dims.header


def test_header_text_is_centred():
    cfg = make_config()
    styles = Styles(cfg)
    line = plain(styles.render_header(60, cfg.default_dimensions(), "note")).split("\n")[0]
    index = line.index("note")
    assert index > 10


def test_status_bar_fills_width():
    cfg = make_config()
    styles = Styles(cfg)
    rendered = styles.render_status_bar(50, "hello")
    assert "hello" in plain(rendered)
    assert len(rendered.split("\n")) == cfg.default_dimensions().status
    assert widths(rendered) == [50] * len(rendered.split("\n"))


def test_status_bar_wraps_long_text():
    styles = Styles(make_config())
    text = "word " * 40
    rendered = styles.render_status_bar(30, text)
    assert len(rendered.split("\n")) > 1
    assert all(w == 30 for w in widths(rendered))


def test_sidebar_shape():
    cfg = make_config()
    styles = Styles(cfg)
    gap = cfg.layout.header_gap
    rendered = styles.render_sidebar(20, 8, gap, "first\nsecond\n")
    lines = rendered.split("\n")
    assert len(lines) == 8 + 2 + gap
    assert all(w == 22 for w in widths(rendered))
    assert all(line.strip() == "" for line in lines[:gap])
    text = plain(rendered)
    assert "first" in text and "second" in text


def test_sidebar_crops_overflow():
    styles = Styles(make_config())
    content = "\n".join(f"row{i}" for i in range(30))
    rendered = styles.render_sidebar(20, 5, 0, content)
    assert len(rendered.split("\n")) == 5 + 2
    assert "row29" not in plain(rendered)


def test_content_pane_shape():
    styles = Styles(make_config())
    rendered = styles.render_content(40, 6, 2, "body")
    lines = rendered.split("\n")
    assert len(lines) == 6 + 2 + 2
    assert all(w == 42 for w in widths(rendered))
    assert "body" in plain(rendered)


def test_tiny_panel_is_only_border():
    styles = Styles(make_config())
    rendered = styles.render_content(1, 0, 0, "x")
    assert len(rendered.split("\n")) == 0 + 2