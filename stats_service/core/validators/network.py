"""Host and IP validation for advertised endpoints."""

from __future__ import annotations

import ipaddress
import re
import socket
from dataclasses import dataclass

from stats_service.core.exceptions import HostValidationError

# RFC 1123 hostname: dot-separated labels, 1-63 chars each, 253 total
_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


@dataclass(frozen=True, slots=True)
class HostAddr:
    """A host/port pair rendered as ``host:port``."""

    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


def is_ip_address(value: str) -> bool:
    """Return True when value is an IPv4 or IPv6 literal."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_valid_hostname(value: str) -> bool:
    """Return True when value is a syntactically valid RFC 1123 hostname."""
    if not value or len(value) > 253:
        return False
    labels = value[:-1].split(".") if value.endswith(".") else value.split(".")
    return all(_HOSTNAME_LABEL.match(label) for label in labels)


def validate_host_or_ip(value: str) -> str:
    """Validate a host name or IP address.

    IP literals are accepted as-is. Host names must be well formed and
    resolvable through the system resolver.

    Args:
        value: Host name or IP address.

    Returns:
        The validated value.

    Raises:
        HostValidationError: If the value is empty, malformed or unresolvable.
    """
    if not value:
        msg = "local_ip is empty, need to config it through config file."
        raise HostValidationError(msg, host=value)

    if is_ip_address(value):
        return value

    if not is_valid_hostname(value):
        msg = f"Bad host or ip: {value}"
        raise HostValidationError(msg, host=value)

    try:
        socket.getaddrinfo(value, None)
    except (socket.gaierror, UnicodeError) as e:
        msg = f"Bad host or ip: {value}"
        raise HostValidationError(msg, host=value) from e

    return value


def get_hostname() -> str:
    """Return this machine's host name."""
    return socket.gethostname()


__all__ = [
    "HostAddr",
    "get_hostname",
    "is_ip_address",
    "is_valid_hostname",
    "validate_host_or_ip",
]
