"""Value types for the stats request pipeline.

Every object here is request scoped and immutable: a query parsed from the
request, the per-metric outcomes read from a registry, and the entries of
the monitor-agent payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# Monitor payload constants shared by every entry
MONITOR_STEP = 60
MONITOR_COUNTER_TYPE = "GAUGE"
MONITOR_METRIC = "pv"
MONITOR_TAG_PREFIX = "project=nebula,city=jd"


class OutputFormat(StrEnum):
    """Body representation selected by the ``format`` query parameter."""

    PLAIN = "plain"
    JSON = "json"
    MONITOR = "monitor"


@dataclass(frozen=True, slots=True)
class StatsQuery:
    """Parsed stats request.

    Attributes:
        output_format: Requested body representation.
        requested_names: Metric names in request order. Empty means all.
    """

    output_format: OutputFormat = OutputFormat.PLAIN
    requested_names: tuple[str, ...] = ()

    @property
    def wants_all(self) -> bool:
        """True when every known metric should be returned."""
        return not self.requested_names


@dataclass(frozen=True, slots=True)
class UnsupportedMethod:
    """Parse outcome for any request method other than GET."""

    method: str


ParseOutcome = StatsQuery | UnsupportedMethod


@dataclass(frozen=True, slots=True)
class StatValue:
    """A metric that resolved to an integer value."""

    value: int


@dataclass(frozen=True, slots=True)
class StatError:
    """A metric that failed to resolve, with its failure description."""

    message: str


StatOutcome = StatValue | StatError


@dataclass(frozen=True, slots=True)
class StatResult:
    """One resolved metric: its name and value-or-error outcome."""

    name: str
    outcome: StatOutcome

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, StatValue)


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Process identity used by the monitor payload.

    Attributes:
        local_ip: Configured address override. Empty means use the hostname.
        port: Port reported in the endpoint.
        role: Module name reported in the tags.
    """

    local_ip: str
    port: int
    role: str


@dataclass(frozen=True, slots=True)
class StatsResponse:
    """Final status and body for one stats request."""

    status_code: int
    reason: str
    body: str = ""
    output_format: OutputFormat | None = None
    headers: dict[str, str] = field(default_factory=dict)


class MonitorEntry(BaseModel):
    """One data point of the monitor-agent payload.

    Example:
        ```json
        {
            "endpoint": "10.0.0.1:9669",
            "step": 60,
            "counterType": "GAUGE",
            "timestamp": 1700000100,
            "metric": "pv",
            "value": 42,
            "tags": "project=nebula,city=jd,ip_port=10.0.0.1:9669,module=storaged,type=num_queries"
        }
        ```
    """

    endpoint: str = Field(description="Reporting process as host:port")
    step: int = Field(default=MONITOR_STEP, description="Reporting interval in seconds")
    counter_type: str = Field(
        default=MONITOR_COUNTER_TYPE,
        alias="counterType",
        description="Agent counter type",
    )
    timestamp: int = Field(description="Epoch seconds floored to the minute")
    metric: str = Field(default=MONITOR_METRIC, description="Agent metric label")
    value: int = Field(description="Metric value")
    tags: str = Field(description="Comma separated key=value tags")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
