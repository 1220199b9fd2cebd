"""Reusable validators."""

from __future__ import annotations

from .network import (
    HostAddr,
    get_hostname,
    is_ip_address,
    is_valid_hostname,
    validate_host_or_ip,
)

__all__ = [
    "HostAddr",
    "get_hostname",
    "is_ip_address",
    "is_valid_hostname",
    "validate_host_or_ip",
]
