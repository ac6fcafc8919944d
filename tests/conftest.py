"""Shared pytest fixtures for hotascurve tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hotascurve.core.config.loader import LOG_LEVEL_ENV_VAR


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def clean_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's log level override out of the tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
