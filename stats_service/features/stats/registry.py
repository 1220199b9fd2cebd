"""Stats registries: the read contract and its implementations.

The request pipeline only reads from a registry. ``InMemoryStatsRegistry``
is a simple thread-safe store for embedders; ``PrometheusStatsRegistry``
exposes the counters and gauges of a ``prometheus_client`` registry.
"""

from __future__ import annotations

import math
import threading
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from stats_service.core.exceptions import StatsReadError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from prometheus_client import CollectorRegistry
    from prometheus_client.samples import Sample


def _not_found(name: str) -> StatsReadError:
    return StatsReadError(f"Stat not found: {name}", stat_name=name)


@runtime_checkable
class StatsRegistry(Protocol):
    """Read contract of a stats registry.

    Implementations must allow concurrent reads from in-flight requests.
    """

    def read_all(self) -> list[tuple[str, int]]:
        """Return every known (name, value) pair in registry order."""
        ...

    def read_value(self, name: str) -> int:
        """Return the value of one metric.

        Raises:
            StatsReadError: If the metric cannot be read.
        """
        ...


class InMemoryStatsRegistry:
    """Thread-safe in-process name to integer store.

    Example:
        >>> registry = InMemoryStatsRegistry({"num_queries": 42})
        >>> registry.increment("num_queries")
        43
        >>> registry.read_value("num_queries")
        43
    """

    def __init__(self, initial: Mapping[str, int] | None = None) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, int] = dict(initial or {})

    def set_value(self, name: str, value: int) -> None:
        if not name:
            msg = "Stat name must not be empty"
            raise ValueError(msg)
        with self._lock:
            self._values[name] = int(value)

    def increment(self, name: str, amount: int = 1) -> int:
        if not name:
            msg = "Stat name must not be empty"
            raise ValueError(msg)
        with self._lock:
            value = self._values.get(name, 0) + int(amount)
            self._values[name] = value
            return value

    def remove(self, name: str) -> None:
        with self._lock:
            self._values.pop(name, None)

    def read_all(self) -> list[tuple[str, int]]:
        with self._lock:
            return list(self._values.items())

    def read_value(self, name: str) -> int:
        with self._lock:
            try:
                return self._values[name]
            except KeyError:
                raise _not_found(name) from None


def sample_key(sample: Sample) -> str:
    """Name a Prometheus sample, appending sorted labels when present.

    >>> from prometheus_client.samples import Sample
    >>> sample_key(Sample("stats_requests_total", {"status": "200", "format": "json"}, 3.0))
    'stats_requests_total{format="json",status="200"}'
    """
    if not sample.labels:
        return sample.name
    labels = ",".join(f'{key}="{value}"' for key, value in sorted(sample.labels.items()))
    return f"{sample.name}{{{labels}}}"


class PrometheusStatsRegistry:
    """Expose counter and gauge samples of a Prometheus registry as stats.

    Counter ``_created`` samples and non-finite gauge values are skipped;
    float values are truncated to integers.
    """

    _TYPES = frozenset({"counter", "gauge"})

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    def _samples(self) -> Iterable[tuple[str, int]]:
        for metric in self._registry.collect():
            if metric.type not in self._TYPES:
                continue
            for sample in metric.samples:
                if metric.type == "counter" and sample.name.endswith("_created"):
                    continue
                if not math.isfinite(sample.value):
                    continue
                yield sample_key(sample), int(sample.value)

    def read_all(self) -> list[tuple[str, int]]:
        return list(self._samples())

    def read_value(self, name: str) -> int:
        for key, value in self._samples():
            if key == name:
                return value
        raise _not_found(name)
