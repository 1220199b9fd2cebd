"""Modular Pydantic Settings v2 configuration.

Import settings via cached loaders:
    from stats_service.core.settings import get_monitor_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (optional, local/dev)
    3. Environment variables (production)
    4. .env file (development only)
"""

from __future__ import annotations

from .app import AppSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_logging_settings,
    get_monitor_settings,
)
from .logs import LoggingSettings
from .monitor import MonitorSettings

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "MonitorSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_logging_settings",
    "get_monitor_settings",
]
