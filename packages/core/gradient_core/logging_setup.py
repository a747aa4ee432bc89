"""Structured local logging setup."""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import platform
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "gradient"


def _data_root() -> Path:
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "GradientRender"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "GradientRender"
    return Path.home() / ".local" / "state" / "gradient-render"


def log_dir(directory: Path | None = None) -> Path:
    path = directory or (_data_root() / "logs")
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(
    keep_files: int = 7,
    console: bool = False,
    directory: Path | None = None,
    enabled: bool = False,
) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    # Console output goes to stderr; stdout is reserved for the run result.
    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    if not enabled:
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return logger

    try:
        path = log_dir(directory) / "gradient.log"
        handler = logging.handlers.TimedRotatingFileHandler(
            filename=str(path),
            when="midnight",
            backupCount=max(1, keep_files),
            encoding="utf-8",
        )
    except OSError:
        # An unusable log directory must not stop the render.
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return logger
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
