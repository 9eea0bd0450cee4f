"""Configuration for gdtfkit."""

from gdtfkit.core.config.loader import (
    apply_logging_config,
    detect_format,
    load_app_config,
    load_config,
)
from gdtfkit.core.config.models import AppConfig, LoggingConfig, ParserConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ParserConfig",
    "apply_logging_config",
    "detect_format",
    "load_app_config",
    "load_config",
]
