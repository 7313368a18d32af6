"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from sprint_tasks.config import Config


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: requests against a live Jira site (local only)")


# Shared fixtures


@pytest.fixture
def config() -> Config:
    """A complete config for board 7."""
    return Config(
        domain="acme.atlassian.net",
        email="dev@acme.io",
        api_token="old-token",
        board_id="7",
        project_key="ACME",
    )


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config file location inside a not-yet-created directory."""
    return tmp_path / "sprint-tasks" / "config.json"


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep log files out of the real config directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("SPRINT_TASKS_LOG_DIR", str(log_dir))
    monkeypatch.delenv("SPRINT_TASKS_CONFIG", raising=False)
    return log_dir
