"""Tests for the hotascurve command-line interface."""

import json

import pytest
from rich.console import Console

import hotascurve.cli.main as cli
from hotascurve.core.curves.models import CurveParameters, ExponentialShape
from hotascurve.core.curves.records import save_curve_file


@pytest.fixture(autouse=True)
def quiet_cli(tmp_path, monkeypatch):
    """Keep the CLI away from real config files and the root logger."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "configure_logging", lambda config: None)
    monkeypatch.setattr(cli, "console", Console(width=200))


@pytest.fixture
def curve_file(tmp_path):
    """Exponential curve saved as YAML."""
    path = tmp_path / "pitch.yaml"
    save_curve_file(
        CurveParameters(shape=ExponentialShape(curvature=0.3), deadzone=0.05), path
    )
    return path


def test_sample_prints_table(curve_file, capsys):
    """sample prints one row per input and a summary line."""
    assert cli.main(["sample", str(curve_file), "--samples", "5"]) == 0

    out = capsys.readouterr().out
    assert "pitch.yaml" in out
    assert "0.500" in out
    assert "deadzone=0.050" in out


def test_sample_uses_configured_resolution(curve_file, tmp_path, capsys):
    """Without --samples the editor render resolution is used."""
    config = tmp_path / "app.json"
    config.write_text(json.dumps({"editor": {"render_samples": 3}}))

    assert cli.main(["--config", str(config), "sample", str(curve_file)]) == 0

    out = capsys.readouterr().out
    assert "0.500" in out
    assert "0.250" not in out


def test_sample_missing_file(tmp_path, capsys):
    """Unreadable curve files exit with status 1."""
    assert cli.main(["sample", str(tmp_path / "missing.yaml")]) == 1
    assert "Could not load curve" in capsys.readouterr().out


def test_sample_rejects_tiny_resolution(curve_file):
    """--samples below 2 is a usage error."""
    with pytest.raises(SystemExit):
        cli.main(["sample", str(curve_file), "--samples", "1"])


def test_check_valid(curve_file, capsys):
    """Valid curves pass the check."""
    assert cli.main(["check", str(curve_file)]) == 0
    assert "valid exponential curve" in capsys.readouterr().out


def test_check_invalid(tmp_path, capsys):
    """Curves that break an invariant fail the check with details."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"shape": "linear", "deadzone": 0.45, "saturation": 0.5}))

    assert cli.main(["check", str(path)]) == 1
    assert "invalid curve" in capsys.readouterr().out


def test_check_bad_points(tmp_path, capsys):
    """Free-form curves with unpinned endpoints fail the check."""
    path = tmp_path / "bad.yaml"
    path.write_text("shape: free_form\ncontrol_points: [[0.1, 0.0], [1.0, 1.0]]\n")

    assert cli.main(["check", str(path)]) == 1
    assert "x=0" in capsys.readouterr().out


def test_command_required():
    """A subcommand must be given."""
    with pytest.raises(SystemExit):
        cli.main([])
