"""Tests for structured logging."""

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from regionlayout import InvalidArgumentException, InvalidOperationException
from regionlayout.logging import LogContext, get_logger, setup_logging


@pytest.fixture
def restore_logging():
    """Reconfigure default console logging after a test changes it."""
    yield
    setup_logging(level="INFO")


class TestSetupLogging:
    """Test logging configuration."""

    def test_json_file_output(self, tmp_path, restore_logging) -> None:
        """Structured logs are written as JSON lines."""
        log_file = tmp_path / "logs" / "layout.log"
        setup_logging(level="DEBUG", log_file=log_file, structured=True, console=False)

        get_logger("regionlayout.test").info("region_added", region_id="header")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["event"] == "region_added"
        assert record["region_id"] == "header"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filter(self, tmp_path, restore_logging) -> None:
        """Events below the configured level are dropped."""
        log_file = tmp_path / "layout.log"
        setup_logging(level="WARNING", log_file=log_file, console=False)

        get_logger("regionlayout.test").debug("hidden")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hidden" not in log_file.read_text(encoding="utf-8")

    def test_console_disabled_by_env(self, monkeypatch, restore_logging) -> None:
        """The environment switch removes console handlers."""
        monkeypatch.setenv("REGIONLAYOUT_DISABLE_CONSOLE_LOGGING", "1")
        setup_logging(level="INFO")

        handlers = logging.getLogger().handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
        assert not any(type(handler) is logging.StreamHandler for handler in handlers)


class TestLayoutLogging:
    """Test events logged by the registry."""

    def test_region_lifecycle_events(self, layout) -> None:
        """Add, adjust and remove each log an event."""
        with capture_logs() as logs:
            layout.add_region(id="header", vertical="top", height=10)
            layout.adjust_region(id="header", width=10)
            layout.remove_region("header")

        events = [entry["event"] for entry in logs]
        assert events == ["region_added", "region_adjusted", "region_removed"]
        assert logs[0]["region_id"] == "header"
        assert logs[0]["references"] == ["stage"]

    def test_rejection_logged(self, layout) -> None:
        """Rejected operations log a warning before raising."""
        with capture_logs() as logs:
            with pytest.raises(InvalidOperationException):
                layout.remove_region("stage")

        assert logs[-1]["event"] == "region_rejected"
        assert logs[-1]["log_level"] == "warning"
        assert logs[-1]["operation"] == "remove"
        assert logs[-1]["error_code"] == "INVALID_OPERATION"
        assert logs[-1]["region_id"] == "stage"

    def test_malformed_option_logged(self, layout) -> None:
        """Option validation failures log the offending argument."""
        with capture_logs() as logs:
            with pytest.raises(InvalidArgumentException):
                layout.add_region(id="box", width=-1)

        assert logs[-1]["event"] == "region_rejected"
        assert logs[-1]["operation"] == "add"
        assert logs[-1]["argument"] == "width"
        assert logs[-1]["model"] == "RegionSpec"

    def test_log_context(self) -> None:
        """LogContext binds values for the duration of a block."""
        with capture_logs() as logs:
            with LogContext(structlog.get_logger("test"), pass_id=3) as log:
                log.info("inside")

        assert logs == [{"event": "inside", "log_level": "info", "pass_id": 3}]
