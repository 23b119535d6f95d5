"""Tests for logging helpers."""

import logging
from pathlib import Path

import pytest

from custom_reports.models.report import ReportInterval
from custom_reports.utils.logging_config import LogContext, get_logger, setup_logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_names_are_not_prefixed_twice(self) -> None:
        assert get_logger("custom_reports.cli").name == "custom_reports.cli"
        assert get_logger("custom_reports").name == "custom_reports"

    def test_other_names_nest_under_package(self) -> None:
        assert get_logger("plugins").name == "custom_reports.plugins"
        assert get_logger("custom_reportsx").name == "custom_reports.custom_reportsx"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_handlers_replaced_on_each_call(self, tmp_path: Path) -> None:
        log_file = tmp_path / "reports.log"

        setup_logging("DEBUG", str(log_file), console_output=True)
        logger = setup_logging("WARNING", str(log_file), console_output=False)

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        logger.warning("written")
        logger.handlers[0].flush()
        assert "written" in log_file.read_text(encoding="utf-8")


class TestLogContext:
    """Tests for LogContext."""

    def test_masks_sensitive_context(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="custom_reports")
        logger = get_logger("tests")

        with LogContext(logger, "fetch", payee="Corner Grocer", interval=ReportInterval.WEEKLY):
            pass

        assert "payee=***" in caplog.text
        assert "Corner Grocer" not in caplog.text
        assert "interval=Weekly" in caplog.text
        assert "Completed fetch" in caplog.text

    def test_failures_are_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="custom_reports")
        context = LogContext(get_logger("tests"), "fetch")

        with pytest.raises(RuntimeError):
            with context:
                raise RuntimeError("query failed")

        assert context.elapsed is not None
        assert "fetch failed" in caplog.text
        assert "RuntimeError: query failed" in caplog.text
