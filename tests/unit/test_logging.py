"""Unit tests for sprint-tasks logging configuration."""

import logging
from pathlib import Path

import pytest

from sprint_tasks.logging import get_logger, sanitize_for_log, setup_logging, truncate_output


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(log_dir=log_dir)

        assert log_dir.exists()

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        """Log messages are written to the file."""
        logger = setup_logging(log_dir=tmp_path)
        logger.info("test message 123")

        content = (tmp_path / "sprint-tasks.log").read_text()
        assert "test message 123" in content
        assert " | INFO" in content

    def test_component_loggers_share_file(self, tmp_path: Path) -> None:
        """Loggers below sprint_tasks write to the same file."""
        setup_logging(log_dir=tmp_path)
        logging.getLogger("sprint_tasks.jira.client").info("client log")
        logging.getLogger("sprint_tasks.workflow.session").info("session log")

        content = (tmp_path / "sprint-tasks.log").read_text()
        assert "sprint_tasks.jira.client" in content
        assert "session log" in content

    def test_env_dir_used_by_default(self, isolated_logs: Path) -> None:
        """SPRINT_TASKS_LOG_DIR picks the directory when none is passed."""
        setup_logging()

        assert (isolated_logs / "sprint-tasks.log").exists()

    def test_env_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPRINT_TASKS_LOG_LEVEL", "WARNING")

        logger = setup_logging(log_dir=tmp_path)

        assert logger.level == logging.WARNING

    def test_no_duplicate_handlers(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path, console=True)
        logger = setup_logging(log_dir=tmp_path, console=True)

        assert len(logger.handlers) == 2

    def test_unusable_log_dir_warns_and_continues(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A log directory that cannot be created leaves logging file-less."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")

        logger = setup_logging(log_dir=blocker / "logs")
        logger.warning("still fine")

        assert "Warning: Could not open log file" in capsys.readouterr().err
        assert [type(h) for h in logger.handlers] == [logging.NullHandler]


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        assert get_logger("cli").name == "sprint_tasks.cli"

    def test_keeps_prefixed_name(self) -> None:
        assert get_logger("sprint_tasks.cli").name == "sprint_tasks.cli"


@pytest.mark.unit
class TestTruncateOutput:
    """Tests for truncate_output function."""

    def test_short_output_unchanged(self) -> None:
        assert truncate_output("short") == "short"

    def test_long_output_truncated(self) -> None:
        result = truncate_output("x" * 100, max_length=10)

        assert result.startswith("x" * 10)
        assert "[truncated, 90 more chars]" in result


@pytest.mark.unit
class TestSanitizeForLog:
    """Tests for sanitize_for_log function."""

    def test_redacts_basic_auth(self) -> None:
        assert sanitize_for_log("Authorization: Basic ZGV2OnRvaw==") == (
            "Authorization: Basic [REDACTED]"
        )

    def test_redacts_atlassian_token(self) -> None:
        result = sanitize_for_log("token ATATT3xFfGF0T_abc-123=XYZ leaked")

        assert "ATATT3x" not in result
        assert "[ATLASSIAN_TOKEN]" in result

    def test_plain_text_unchanged(self) -> None:
        assert sanitize_for_log("Sprint 42 resolved") == "Sprint 42 resolved"
