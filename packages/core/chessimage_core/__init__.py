"""Core app services for settings and logging."""

from .config import AppConfig, OutputConfig, RenderConfig, config_path, load_config, save_config
from .logging_setup import JsonFormatter, configure_logging, get_logger

__all__ = [
    "AppConfig",
    "JsonFormatter",
    "OutputConfig",
    "RenderConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
]
