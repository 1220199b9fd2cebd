"""Tests for core exceptions."""

from stats_service.core import exceptions as exc


def test_app_exception_defaults_title() -> None:
    error = exc.AppException(status_code=400, detail="bad")
    assert error.title == "Bad Request"
    assert error.extra == {}


def test_stats_read_error_fields() -> None:
    error = exc.StatsReadError("Stat not found: x", stat_name="x")
    assert error.status_code == 404
    assert error.type == "stat-read-error"
    assert error.detail == "Stat not found: x"
    assert error.extra == {"stat_name": "x"}
    assert str(error) == "Stat not found: x"


def test_host_validation_error_fields() -> None:
    error = exc.HostValidationError("Bad host or ip: ?", host="?")
    assert error.status_code == 422
    assert error.host == "?"
    assert error.extra["host"] == "?"
