"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hotascurve.core.config.models import AppConfig
from hotascurve.core.utils import logging as logging_utils

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "HOTASCURVE_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("curve.json")
        'json'
        >>> detect_format("curve.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Format is auto-detected from the file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(content).__name__}")
    return content


def save_config(data: dict[str, Any], path: str | Path) -> None:
    """Write a configuration dictionary as JSON or YAML, by file extension."""
    path = Path(path)
    fmt = detect_format(path)

    with path.open("w", encoding="utf-8") as f:
        if fmt == "json":
            json.dump(data, f, indent=2)
            f.write("\n")
        else:
            yaml.safe_dump(data, f, sort_keys=False)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files fall back to defaults. ``HOTASCURVE_LOG_LEVEL`` overrides
    the configured log level.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to AppConfig.default_path().

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug(f"No config at {path}, using defaults")
        config = AppConfig()

    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_level:
        logger.debug(f"Log level overridden by {LOG_LEVEL_ENV_VAR}={env_level}")
        config.logging = config.logging.model_validate(
            {**config.logging.model_dump(), "level": env_level.upper()}
        )

    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    logging_utils.configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
