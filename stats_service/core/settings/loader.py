"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the
process.

Testing:
    In tests, clear the caches to force a reload:
    clear_all_caches()

    Or override with custom values:
    settings = MonitorSettings(local_ip="10.0.0.1", role="storaged")
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .logs import LoggingSettings
from .monitor import MonitorSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached application settings.

    Returns:
        Validated and frozen AppSettings instance.
    """
    return AppSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_monitor_settings() -> MonitorSettings:
    """Get cached monitor payload settings.

    Returns:
        Validated and frozen MonitorSettings instance.
    """
    return MonitorSettings()


def clear_all_caches() -> None:
    """Clear every settings cache (useful in tests)."""
    get_app_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_monitor_settings.cache_clear()
