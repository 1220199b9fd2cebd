"""Unit tests for logging configuration and the JSONL formatter."""
from __future__ import annotations

import json
import logging
import sys
from logging.handlers import QueueHandler

import pytest

from stats_service.infra.logging import config as log_config
from stats_service.infra.logging.formatters import JSONFormatter


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after reconfiguring logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    log_config.shutdown()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("stats_service.test", logging.WARNING, __file__, 1, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestJSONFormatter:
    """Test suite for JSONFormatter."""

    def test_formats_single_json_line(self):
        """A record renders as one JSON object with standard keys."""
        output = JSONFormatter(static={"service": "stats-service"}).format(_record("hello"))

        data = json.loads(output)
        assert "\n" not in output
        assert data["level"] == "WARNING"
        assert data["logger"] == "stats_service.test"
        assert data["message"] == "hello"
        assert data["service"] == "stats-service"
        assert data["timestamp"].endswith("Z")

    def test_includes_extra_fields(self):
        """Fields passed via extra= are included."""
        data = json.loads(JSONFormatter().format(_record("x", stat_name="num_queries")))

        assert data["stat_name"] == "num_queries"

    def test_exception_kept_on_one_line(self):
        """Tracebacks are escaped to keep JSONL valid."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        output = JSONFormatter().format(record)

        assert "\n" not in output
        assert "ValueError: boom" in json.loads(output)["exception"]


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_root_gets_queue_handler(self):
        """The root logger receives a single QueueHandler."""
        log_config.configure_logging(log_level="DEBUG", console_enabled=False)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert sum(isinstance(h, QueueHandler) for h in root.handlers) == 1

    def test_reconfigure_does_not_duplicate(self):
        """Configuring twice keeps one QueueHandler."""
        log_config.configure_logging(console_enabled=False)
        log_config.configure_logging(console_enabled=False)

        root = logging.getLogger()
        assert sum(isinstance(h, QueueHandler) for h in root.handlers) == 1

    def test_file_handler_writes_jsonl(self, tmp_path):
        """File logging writes JSON lines to the configured path."""
        path = tmp_path / "logs" / "stats.jsonl"
        log_config.configure_logging(file_path=path, console_enabled=False)

        logging.getLogger("stats_service.test").warning("written", extra={"status_code": 200})
        log_config.shutdown()

        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["status_code"] == 200
