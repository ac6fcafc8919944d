"""Tests for the config loader."""

import json
from pathlib import Path

from pydantic import ValidationError
import pytest
import yaml

import hotascurve.core.config.loader as config_loader
from hotascurve.core.config.models import AppConfig, EditorConfig, RuntimeConfig


@pytest.fixture
def sample_config_data():
    """Sample application configuration."""
    return {
        "logging": {"level": "DEBUG", "structured": True},
        "runtime": {"poll_rate_hz": 250},
        "editor": {"s_curve_curvature": 0.7},
    }


def test_detect_format_json():
    """Test format detection for JSON files."""
    assert config_loader.detect_format("curve.json") == "json"
    assert config_loader.detect_format(Path("curve.JSON")) == "json"


def test_detect_format_yaml():
    """Test format detection for YAML files."""
    assert config_loader.detect_format("curve.yaml") == "yaml"
    assert config_loader.detect_format("curve.yml") == "yaml"


def test_detect_format_invalid():
    """Test format detection for invalid extensions."""
    with pytest.raises(ValueError) as exc_info:
        config_loader.detect_format("curve.txt")

    assert "Unsupported config format" in str(exc_info.value)


def test_load_config_json(tmp_path, sample_config_data):
    """Test loading JSON config."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["runtime"]["poll_rate_hz"] == 250


def test_load_config_yaml(tmp_path, sample_config_data):
    """Test loading YAML config."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["logging"]["level"] == "DEBUG"


def test_load_config_empty_yaml(tmp_path):
    """Empty YAML files load as an empty mapping."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert config_loader.load_config(config_file) == {}


def test_load_config_missing_file(tmp_path):
    """Missing files raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        config_loader.load_config(tmp_path / "missing.yaml")


def test_load_config_invalid_json(tmp_path):
    """Broken JSON is reported as ValueError."""
    config_file = tmp_path / "bad.json"
    config_file.write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        config_loader.load_config(config_file)


def test_load_config_invalid_yaml(tmp_path):
    """Broken YAML is reported as ValueError."""
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("key: [unclosed")

    with pytest.raises(ValueError, match="Invalid YAML"):
        config_loader.load_config(config_file)


def test_load_config_non_mapping(tmp_path):
    """Top-level lists are rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 1\n- 2\n")

    with pytest.raises(ValueError, match="Expected a mapping"):
        config_loader.load_config(config_file)


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_save_config_round_trip(tmp_path, sample_config_data, suffix):
    """Saved configs load back unchanged."""
    config_file = tmp_path / f"config{suffix}"
    config_loader.save_config(sample_config_data, config_file)

    assert config_loader.load_config(config_file) == sample_config_data


def test_load_app_config(tmp_path, sample_config_data, monkeypatch):
    """App config is validated into typed sections."""
    monkeypatch.delenv(config_loader.LOG_LEVEL_ENV_VAR, raising=False)
    config_file = tmp_path / "hotascurve.yaml"
    config_file.write_text(yaml.safe_dump(sample_config_data))

    config = config_loader.load_app_config(config_file)

    assert config.logging.level == "DEBUG"
    assert config.logging.structured is True
    assert config.runtime.poll_rate_hz == 250.0
    assert config.editor.s_curve_curvature == 0.7
    assert config.editor.exponential_curvature == 0.3


def test_load_app_config_missing_file_uses_defaults(tmp_path, monkeypatch):
    """A missing app config falls back to defaults."""
    monkeypatch.delenv(config_loader.LOG_LEVEL_ENV_VAR, raising=False)

    config = config_loader.load_app_config(tmp_path / "absent.yaml")

    assert config == AppConfig()
    assert config.runtime.poll_rate_hz == 500.0
    assert config.editor.render_samples == 101


def test_load_app_config_env_override(tmp_path, monkeypatch):
    """The environment variable overrides the configured level."""
    monkeypatch.setenv(config_loader.LOG_LEVEL_ENV_VAR, "warning")

    config = config_loader.load_app_config(tmp_path / "absent.yaml")

    assert config.logging.level == "WARNING"


def test_load_app_config_invalid_level(tmp_path, monkeypatch):
    """Unknown log levels fail validation."""
    monkeypatch.delenv(config_loader.LOG_LEVEL_ENV_VAR, raising=False)
    config_file = tmp_path / "hotascurve.json"
    config_file.write_text(json.dumps({"logging": {"level": "LOUD"}}))

    with pytest.raises(ValidationError):
        config_loader.load_app_config(config_file)


def test_app_config_load_or_default(tmp_path, sample_config_data):
    """ConfigBase.load_or_default reads an explicit path."""
    config_file = tmp_path / "app.json"
    config_file.write_text(json.dumps(sample_config_data))

    assert AppConfig.load_or_default(config_file).runtime.poll_rate_hz == 250.0


def test_runtime_rate_must_be_positive():
    """Zero polling rate is rejected."""
    with pytest.raises(ValidationError):
        RuntimeConfig(poll_rate_hz=0)


def test_editor_curvature_bounds():
    """Preset curvatures stay within [0, 1]."""
    with pytest.raises(ValidationError):
        EditorConfig(exponential_curvature=1.5)
