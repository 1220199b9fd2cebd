"""Unit tests for the per-request stats handler."""
from __future__ import annotations

import json

import pytest

from stats_service.features.stats.handler import HandlerState, StatsRequestHandler
from stats_service.features.stats.service import StatsService


@pytest.fixture
def handler(registry, monitor_config, formatter_options) -> StatsRequestHandler:
    return StatsRequestHandler(registry, monitor_config, **formatter_options)


@pytest.mark.unit
class TestStatsRequestHandler:
    """Test suite for the handler state machine."""

    def test_full_cycle_json(self, handler):
        """onRequest, onBody and onEOM produce a single JSON response."""
        handler.on_request("GET", {"format": "json", "stats": "num_queries,unknown_metric"})
        handler.on_body(b"ignored")

        response = handler.on_eom()

        assert response.status_code == 200
        assert json.loads(response.body) == [
            {"num_queries": 42},
            {"unknown_metric": "metric not found"},
        ]
        assert handler.state is HandlerState.RESPONDED
        assert handler.failures == 1

    def test_unsupported_method_deferred_to_eom(self, handler, registry):
        """The 405 is only produced at end of message and no stats are read."""
        handler.on_request("POST", {"stats": "num_queries"})
        assert handler.state is HandlerState.PARSED

        handler.on_body(b"payload")
        response = handler.on_eom()

        assert response.status_code == 405
        assert response.body == ""
        assert registry.calls == []

    def test_monitor_cycle(self, handler):
        """Monitor output uses the injected clock."""
        handler.on_request("GET", {"format": "monitor", "stats": "num_queries"})

        payload = json.loads(handler.on_eom().body)

        assert payload[0]["timestamp"] == 1_700_000_100
        assert payload[0]["value"] == 42

    def test_responding_is_terminal(self, handler):
        """A second on_eom is rejected."""
        handler.on_request("GET", {})
        handler.on_eom()

        with pytest.raises(RuntimeError):
            handler.on_eom()

    def test_eom_before_request_is_rejected(self, handler):
        """on_eom requires a parsed request."""
        with pytest.raises(RuntimeError):
            handler.on_eom()

    def test_request_only_once(self, handler):
        """on_request cannot be replayed."""
        handler.on_request("GET", {})

        with pytest.raises(RuntimeError):
            handler.on_request("GET", {})

    def test_on_error_marks_failed(self, handler, caplog):
        """A transport error is logged and ends the handler."""
        handler.on_request("GET", {})

        handler.on_error("connection reset")

        assert handler.state is HandlerState.FAILED
        assert "connection reset" in caplog.text
        with pytest.raises(RuntimeError):
            handler.on_eom()


@pytest.mark.unit
class TestStatsService:
    """Test suite for StatsService."""

    def test_handle_plain_all(self, registry, monitor_config):
        """handle runs a complete cycle for all stats."""
        service = StatsService(registry, monitor_config)

        response = service.handle("GET", {})

        assert response.status_code == 200
        assert response.body == "num_queries=42\nslow_queries=3\n"

    def test_each_request_gets_a_new_handler(self, registry, monitor_config):
        """Handlers are never reused between requests."""
        service = StatsService(registry, monitor_config)

        assert service.new_handler() is not service.new_handler()

    def test_handle_non_get(self, registry, monitor_config):
        """Non-GET requests never touch the registry."""
        service = StatsService(registry, monitor_config)

        response = service.handle("DELETE", {"stats": "num_queries"}, body=b"x")

        assert response.status_code == 405
        assert registry.calls == []
