"""Render resolved stats into plain text, pretty JSON or the monitor payload.

All functions are pure apart from the clock and hostname lookup used by
the monitor format, both of which can be injected.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Sequence
from typing import assert_never

from pydantic import TypeAdapter

from stats_service.core.exceptions import HostValidationError
from stats_service.core.validators.network import (
    HostAddr,
    get_hostname,
    validate_host_or_ip,
)
from stats_service.features.stats.schemas import (
    MONITOR_STEP,
    MONITOR_TAG_PREFIX,
    MonitorConfig,
    MonitorEntry,
    OutputFormat,
    StatError,
    StatOutcome,
    StatResult,
    StatValue,
)

logger = logging.getLogger(__name__)

_MONITOR_PAYLOAD = TypeAdapter(list[MonitorEntry])


def outcome_value(outcome: StatOutcome) -> int | str:
    """Return the integer value or the error text of an outcome."""
    match outcome:
        case StatValue(value=value):
            return value
        case StatError(message=message):
            return message
        case _:
            assert_never(outcome)


def format_plain(results: Sequence[StatResult]) -> str:
    """Render one ``name=value`` line per result."""
    return "".join(f"{r.name}={outcome_value(r.outcome)}\n" for r in results)


def format_json(results: Sequence[StatResult]) -> str:
    """Render a pretty JSON array of single-key objects.

    Integers stay JSON numbers and errors become JSON strings.
    """
    return json.dumps(
        [{r.name: outcome_value(r.outcome)} for r in results],
        indent=2,
        ensure_ascii=False,
    )


def report_timestamp(now: float) -> int:
    """Floor an epoch time to the start of its reporting window."""
    seconds = int(now)
    return seconds - seconds % MONITOR_STEP


def monitor_tags(endpoint: str, role: str) -> str:
    """Build the tag prefix shared by every monitor entry."""
    return f"{MONITOR_TAG_PREFIX},ip_port={endpoint},module={role}"


def format_monitor(
    results: Sequence[StatResult],
    config: MonitorConfig,
    *,
    clock: Callable[[], float] = time.time,
    hostname_resolver: Callable[[], str] = get_hostname,
    host_validator: Callable[[str], str] = validate_host_or_ip,
) -> str:
    """Render the compact monitor-agent JSON payload.

    Failed metrics are left out. When ``config.local_ip`` is set but fails
    validation, the validation message is returned as the whole body
    instead of a JSON array.

    Args:
        results: Resolved stats.
        config: Process identity used for endpoint and tags.
        clock: Returns the current epoch time.
        hostname_resolver: Returns the machine host name when no local IP is set.
        host_validator: Validates the configured local IP.

    Returns:
        The serialized payload, or the host validation message.
    """
    timestamp = report_timestamp(clock())

    if config.local_ip:
        try:
            hostname = host_validator(config.local_ip)
        except HostValidationError as e:
            logger.warning(
                "Configured local_ip is not usable for monitor payload",
                extra={"local_ip": config.local_ip, "detail": e.detail},
            )
            return e.detail
    else:
        hostname = hostname_resolver()

    endpoint = str(HostAddr(hostname, config.port))
    tag_prefix = monitor_tags(endpoint, config.role)

    entries = [
        MonitorEntry(
            endpoint=endpoint,
            timestamp=timestamp,
            value=r.outcome.value,
            tags=f"{tag_prefix},type={r.name}",
        )
        for r in results
        if isinstance(r.outcome, StatValue)
    ]
    return _MONITOR_PAYLOAD.dump_json(entries, by_alias=True).decode()


def render(
    results: Sequence[StatResult],
    output_format: OutputFormat,
    monitor_config: MonitorConfig,
    **monitor_options: Callable[..., object],
) -> str:
    """Render results in the requested output format.

    Args:
        results: Resolved stats. Not modified.
        output_format: Target representation.
        monitor_config: Process identity, used only by the monitor format.
        **monitor_options: Injectables forwarded to format_monitor.

    Returns:
        Response body.
    """
    match output_format:
        case OutputFormat.JSON:
            return format_json(results)
        case OutputFormat.MONITOR:
            return format_monitor(results, monitor_config, **monitor_options)
        case OutputFormat.PLAIN:
            return format_plain(results)
        case _:
            assert_never(output_format)
