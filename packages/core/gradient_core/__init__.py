"""Core services for render settings and logging."""

from .config import AppConfig, LoggingConfig, OutputConfig, RenderConfig, load_config
from .logging_setup import JsonFormatter, configure_logging, get_logger

__all__ = [
    "AppConfig",
    "JsonFormatter",
    "LoggingConfig",
    "OutputConfig",
    "RenderConfig",
    "configure_logging",
    "get_logger",
    "load_config",
]
