"""Persistent render settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from chessimage_renderer import DEFAULT_SQUARE_SIZE, DEFAULT_THEME_NAME, list_themes


CONFIG_VERSION = 1
MAX_SQUARE_SIZE = 512


@dataclass
class RenderConfig:
    theme: str = DEFAULT_THEME_NAME
    square_size: int = DEFAULT_SQUARE_SIZE
    show_coordinates: bool = True


@dataclass
class OutputConfig:
    directory: str = "."
    filename: str = "board.png"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ChessImage"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ChessImage"
    return Path.home() / ".config" / "chessimage"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    if str(cfg.render.theme).lower() not in list_themes():
        cfg.render.theme = DEFAULT_THEME_NAME
    else:
        cfg.render.theme = str(cfg.render.theme).lower()
    try:
        size = int(cfg.render.square_size)
    except (TypeError, ValueError):
        size = DEFAULT_SQUARE_SIZE
    cfg.render.square_size = max(1, min(MAX_SQUARE_SIZE, size))
    if not isinstance(cfg.render.show_coordinates, bool):
        cfg.render.show_coordinates = RenderConfig().show_coordinates


def _normalize_output(cfg: AppConfig) -> None:
    if not isinstance(cfg.output.directory, str):
        cfg.output.directory = OutputConfig().directory
    if not isinstance(cfg.output.filename, str) or not cfg.output.filename:
        cfg.output.filename = OutputConfig().filename
    if not cfg.output.directory:
        cfg.output.directory = "."
    if not str(cfg.output.filename).lower().endswith(".png"):
        cfg.output.filename = f"{cfg.output.filename}.png"


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        version = int(raw.get("config_version", CONFIG_VERSION))
    except (TypeError, ValueError):
        version = CONFIG_VERSION

    cfg = AppConfig(
        config_version=version,
        render=_merge(RenderConfig, raw.get("render", {})),
        output=_merge(OutputConfig, raw.get("output", {})),
    )

    _normalize_render(cfg)
    _normalize_output(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
