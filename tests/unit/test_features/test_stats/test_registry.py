"""Unit tests for stats registries."""
from __future__ import annotations

import threading

import pytest
from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

from stats_service.core.exceptions import StatsReadError
from stats_service.features.stats.registry import (
    InMemoryStatsRegistry,
    PrometheusStatsRegistry,
    StatsRegistry,
)


@pytest.mark.unit
class TestInMemoryStatsRegistry:
    """Test suite for InMemoryStatsRegistry."""

    def test_reads_values(self, memory_registry):
        """Known values are returned; read_all keeps insertion order."""
        assert memory_registry.read_value("num_queries") == 42
        assert memory_registry.read_all() == [("num_queries", 42), ("slow_queries", 3)]

    def test_unknown_name_raises(self, memory_registry):
        """Unknown names fail with a descriptive StatsReadError."""
        with pytest.raises(StatsReadError) as exc_info:
            memory_registry.read_value("missing")

        assert exc_info.value.detail == "Stat not found: missing"
        assert exc_info.value.stat_name == "missing"

    def test_set_increment_remove(self):
        """Writers update values for later reads."""
        registry = InMemoryStatsRegistry()

        registry.set_value("a", 5)
        assert registry.increment("a", 2) == 7
        assert registry.increment("b") == 1
        registry.remove("b")

        assert registry.read_all() == [("a", 7)]

    def test_empty_name_rejected(self):
        """Stat names must be non-empty."""
        registry = InMemoryStatsRegistry()

        with pytest.raises(ValueError):
            registry.set_value("", 1)
        with pytest.raises(ValueError):
            registry.increment("")

    def test_concurrent_increments(self):
        """Increments from many threads are not lost."""
        registry = InMemoryStatsRegistry()

        def worker() -> None:
            for _ in range(1000):
                registry.increment("hits")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.read_value("hits") == 8000

    def test_satisfies_protocol(self, memory_registry):
        """The in-memory registry implements the read contract."""
        assert isinstance(memory_registry, StatsRegistry)


@pytest.mark.unit
class TestPrometheusStatsRegistry:
    """Test suite for PrometheusStatsRegistry."""

    @pytest.fixture
    def prom_registry(self) -> CollectorRegistry:
        registry = CollectorRegistry()
        Gauge("queue_depth", "Queue depth", registry=registry).set(7.9)
        counter = Counter("requests", "Requests", ["format"], registry=registry)
        counter.labels(format="json").inc(3)
        Histogram("latency_seconds", "Latency", registry=registry).observe(0.2)
        return registry

    def test_reads_counters_and_gauges(self, prom_registry):
        """Counters and gauges are exposed, truncated to integers."""
        stats = dict(PrometheusStatsRegistry(prom_registry).read_all())

        assert stats == {
            "queue_depth": 7,
            'requests_total{format="json"}': 3,
        }

    def test_read_value(self, prom_registry):
        """Single reads use the same sample names as read_all."""
        registry = PrometheusStatsRegistry(prom_registry)

        assert registry.read_value("queue_depth") == 7
        assert registry.read_value('requests_total{format="json"}') == 3

    def test_histograms_are_not_stats(self, prom_registry):
        """Histogram samples are not readable."""
        with pytest.raises(StatsReadError, match="latency_seconds_count"):
            PrometheusStatsRegistry(prom_registry).read_value("latency_seconds_count")

    def test_non_finite_values_skipped(self):
        """NaN gauges cannot be represented as integers and are skipped."""
        registry = CollectorRegistry()
        Gauge("broken", "Broken", registry=registry).set(float("nan"))

        assert PrometheusStatsRegistry(registry).read_all() == []

    def test_gauges_named_created_are_kept(self):
        """Only counter _created samples are dropped."""
        registry = CollectorRegistry()
        Gauge("jobs_created", "Jobs created", registry=registry).set(5)
        Counter("tasks", "Tasks", registry=registry).inc(2)

        stats = dict(PrometheusStatsRegistry(registry).read_all())

        assert stats == {"jobs_created": 5, "tasks_total": 2}
