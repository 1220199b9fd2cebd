"""Pytest configuration and shared fixtures.

Organization:
    - Registry Fixtures: in-memory and recording registries
    - Formatter Fixtures: monitor identity, fixed clock and hostname
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

# Keep settings independent of the developer's environment
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_CONSOLE_ENABLED", "false")

from stats_service.core.exceptions import StatsReadError  # noqa: E402
from stats_service.features.stats.registry import InMemoryStatsRegistry  # noqa: E402
from stats_service.features.stats.schemas import MonitorConfig  # noqa: E402

FIXED_NOW = 1_700_000_123


class RecordingStatsRegistry:
    """Registry double that records reads and fails with configured messages."""

    def __init__(
        self,
        values: dict[str, int] | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        self.values = dict(values or {})
        self.errors = dict(errors or {})
        self.calls: list[tuple[str, str | None]] = []

    def read_all(self) -> list[tuple[str, int]]:
        self.calls.append(("read_all", None))
        return list(self.values.items())

    def read_value(self, name: str) -> int:
        self.calls.append(("read_value", name))
        if name in self.errors:
            raise StatsReadError(self.errors[name], stat_name=name)
        if name not in self.values:
            raise StatsReadError(f"Stat not found: {name}", stat_name=name)
        return self.values[name]


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def registry() -> RecordingStatsRegistry:
    """Registry with num_queries=42 where unknown_metric fails."""
    return RecordingStatsRegistry(
        values={"num_queries": 42, "slow_queries": 3},
        errors={"unknown_metric": "metric not found"},
    )


@pytest.fixture
def memory_registry() -> InMemoryStatsRegistry:
    """Thread-safe in-memory registry with a few values."""
    return InMemoryStatsRegistry({"num_queries": 42, "slow_queries": 3})


# ============================================================================
# Formatter Fixtures
# ============================================================================


@pytest.fixture
def monitor_config() -> MonitorConfig:
    """Monitor identity with an explicit local IP."""
    return MonitorConfig(local_ip="10.0.0.1", port=9669, role="storaged")


@pytest.fixture
def formatter_options() -> dict[str, object]:
    """Deterministic clock and hostname for the monitor format."""
    return {
        "clock": lambda: FIXED_NOW,
        "hostname_resolver": lambda: "stats-host",
    }


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(registry: RecordingStatsRegistry):
    """Create a FastAPI application serving the recording registry."""
    from stats_service.app.main import create_app

    return create_app(stats_registry=registry)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app through ASGITransport."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def _clear_settings_caches():
    """Reload settings for every test."""
    from stats_service.core.settings import clear_all_caches

    clear_all_caches()
    yield
    clear_all_caches()
