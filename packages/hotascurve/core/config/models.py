"""Configuration models for hotascurve."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class ConfigBase(BaseModel):
    """Base class for file-backed configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from hotascurve.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stdout when unset")


class RuntimeConfig(BaseModel):
    """Axis polling configuration."""

    poll_rate_hz: float = Field(
        default=500.0, gt=0.0, le=10000.0, description="Evaluations per second per axis"
    )


class EditorConfig(BaseModel):
    """Curve editor defaults."""

    model_config = ConfigDict(frozen=True)

    s_curve_curvature: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Curvature applied when the S-curve preset is picked"
    )
    exponential_curvature: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Curvature applied when the exponential preset is picked",
    )
    render_samples: int = Field(
        default=101, ge=2, le=10001, description="Samples used to draw the curve line"
    )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = LoggingConfig()
    runtime: RuntimeConfig = RuntimeConfig()
    editor: EditorConfig = EditorConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("hotascurve.yaml")
