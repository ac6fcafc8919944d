"""Configuration management for hotascurve."""

from hotascurve.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    save_config,
)
from hotascurve.core.config.models import (
    AppConfig,
    EditorConfig,
    LoggingConfig,
    RuntimeConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "save_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "EditorConfig",
    "LoggingConfig",
    "RuntimeConfig",
]
