"""Configuration: XDG locations, defaults, YAML persistence and layout maths."""

from __future__ import annotations

import copy
import os
from dataclasses import asdict, dataclass, field, fields, is_dataclass, replace
from typing import Any, NamedTuple

import yaml

CONFIG_FILE_NAME = "config.yaml"
APP_NAME = "note"
VI_PATH = "/usr/bin/vi"
ED_PATH = "/bin/ed"
BORDER_SIZE = 2


class ConfigError(Exception):
    """Raised when the configuration cannot be created, read or parsed."""


@dataclass
class Padding:
    horizontal: int = 2
    vertical: int = 1


@dataclass
class Heights:
    header: int = 1
    footer: int = 1
    status: int = 1
    help: int = 1


@dataclass
class Layout:
    sidebar_width: int = 30
    padding: Padding = field(default_factory=Padding)
    heights: Heights = field(default_factory=Heights)
    header_gap: int = 1


@dataclass
class Theme:
    light: str = "default"
    dark: str = "default"


@dataclass(frozen=True)
class Dimensions:
    header: int
    footer: int
    status: int
    header_gap: int


class ContentHeights(NamedTuple):
    content: int
    header: int
    footer: int


@dataclass
class Config:
    config_dir: str
    notes_dir: str
    archive_dir: str
    editor: str = ""
    layout: Layout = field(default_factory=Layout)
    theme: Theme = field(default_factory=Theme)
    create_empty: bool = False

    def calculate_heights(self, total_height: int) -> ContentHeights:
        """Split the terminal height into content, header and footer rows."""
        heights = self.layout.heights
        footer = heights.status + heights.help
        content = (
            total_height - heights.header - footer - BORDER_SIZE - self.layout.header_gap
        )
        return ContentHeights(max(content, 0), heights.header, footer)

    def padding(self) -> tuple[int, int]:
        """Return the (horizontal, vertical) padding."""
        return self.layout.padding.horizontal, self.layout.padding.vertical

    def default_dimensions(self) -> Dimensions:
        heights = self.layout.heights
        return Dimensions(
            header=heights.header,
            footer=heights.footer,
            status=heights.status,
            header_gap=self.layout.header_gap,
        )

    def resolve_editor(self) -> str:
        """Pick the editor: config, NOTE_EDITOR, VISUAL, EDITOR, vi, then ed."""
        if self.editor:
            return self.editor
        for variable in ("NOTE_EDITOR", "VISUAL", "EDITOR"):
            value = os.environ.get(variable, "")
            if value:
                return value
        if os.path.exists(VI_PATH):
            return VI_PATH
        return ED_PATH


def _home_dir() -> str:
    return os.path.expanduser("~")


def get_config_home() -> str:
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg and os.path.isabs(xdg):
        return xdg
    return os.path.join(_home_dir(), ".config")


def get_data_home() -> str:
    xdg = os.environ.get("XDG_DATA_HOME", "")
    if xdg and os.path.isabs(xdg):
        return xdg
    return os.path.join(_home_dir(), ".local", "share")


def get_config_dir() -> str:
    return os.path.join(get_config_home(), APP_NAME)


def default_config() -> Config:
    data_home = get_data_home()
    return Config(
        config_dir=get_config_dir(),
        notes_dir=os.path.join(data_home, APP_NAME),
        archive_dir=os.path.join(data_home, APP_NAME, "archive"),
    )


def config_to_dict(cfg: Config) -> dict[str, Any]:
    """Return the configuration as a plain mapping keyed like the YAML file."""
    return asdict(cfg)


def _coerce(value: Any, target: type, where: str) -> Any:
    if target is bool:
        if isinstance(value, bool):
            return value
        raise ConfigError(f"{where}: expected a boolean, got {value!r}")
    if target is int:
        if isinstance(value, bool):
            raise ConfigError(f"{where}: expected an integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise ConfigError(f"{where}: expected an integer, got {value!r}")
    if target is str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        raise ConfigError(f"{where}: expected a string, got {value!r}")
    raise ConfigError(f"{where}: unsupported field type {target.__name__}")


def _overlay(obj: Any, data: Any, where: str) -> Any:
    if data is None:
        return obj
    if not isinstance(data, dict):
        raise ConfigError(f"{where or 'config'}: expected a mapping, got {data!r}")
    changes = {}
    for f in fields(obj):
        if f.name not in data or data[f.name] is None:
            continue
        current = getattr(obj, f.name)
        key = f"{where}.{f.name}" if where else f.name
        if is_dataclass(current):
            changes[f.name] = _overlay(current, data[f.name], key)
        else:
            changes[f.name] = _coerce(data[f.name], type(current), key)
    return replace(obj, **changes)


def config_from_dict(data: Any, base: Config) -> Config:
    """Overlay the values found in ``data`` on a copy of ``base``."""
    return _overlay(copy.deepcopy(base), data, "")


def _dump(cfg: Config) -> str:
    return yaml.safe_dump(config_to_dict(cfg), sort_keys=False, allow_unicode=True)


def load_config() -> Config:
    """Create the directories and config file if needed, then load it."""
    cfg = default_config()
    for directory in (cfg.config_dir, cfg.notes_dir, cfg.archive_dir):
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"failed to create directory {directory}: {exc}") from exc

    config_path = os.path.join(cfg.config_dir, CONFIG_FILE_NAME)
    if not os.path.exists(config_path):
        cfg.editor = cfg.resolve_editor()
        try:
            with open(config_path, "w", encoding="utf-8") as handle:
                handle.write(_dump(cfg))
        except OSError as exc:
            raise ConfigError(f"failed to write default config: {exc}") from exc
        return cfg

    with open(config_path, encoding="utf-8") as handle:
        text = handle.read()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to parse {config_path}: {exc}") from exc
    return config_from_dict(data, cfg)


def save_config(cfg: Config) -> None:
    config_path = os.path.join(cfg.config_dir, CONFIG_FILE_NAME)
    with open(config_path, "w", encoding="utf-8") as handle:
        handle.write(_dump(cfg))