"""Render settings schema and tolerant JSON loading."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1


@dataclass
class RenderConfig:
    width: int = 256
    height: int = 256


@dataclass
class OutputConfig:
    path: str = "image.png"


@dataclass
class LoggingConfig:
    enabled: bool = False
    directory: str | None = None
    keep_log_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _normalize_render(cfg: AppConfig) -> None:
    # Sizes below 2x2 are left for the renderer to reject.
    cfg.render.width = _as_int(cfg.render.width, RenderConfig.width)
    cfg.render.height = _as_int(cfg.render.height, RenderConfig.height)


def _normalize_output(cfg: AppConfig) -> None:
    if not isinstance(cfg.output.path, str) or not cfg.output.path:
        cfg.output.path = OutputConfig.path


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_log_files = max(1, _as_int(cfg.logging.keep_log_files, LoggingConfig.keep_log_files))
    cfg.logging.enabled = _as_bool(cfg.logging.enabled, LoggingConfig.enabled)
    cfg.logging.console = _as_bool(cfg.logging.console, LoggingConfig.console)
    if not isinstance(cfg.logging.directory, str) or not cfg.logging.directory:
        cfg.logging.directory = None


def load_config(path: Path | None = None) -> AppConfig:
    if path is None or not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_as_int(raw.get("config_version"), CONFIG_VERSION),
        render=_merge(RenderConfig, raw.get("render", {})),
        output=_merge(OutputConfig, raw.get("output", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_render(cfg)
    _normalize_output(cfg)
    _normalize_logging(cfg)
    return cfg

