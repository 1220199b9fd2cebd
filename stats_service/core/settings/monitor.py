"""Monitor-agent payload settings.

These values identify this process inside the push-style payload served by
``GET /stats?format=monitor``: the address reported as ``endpoint`` and the
``module`` tag.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_monitor_yaml_source


class MonitorSettings(BaseSettings):
    """Monitor payload identity settings.

    Environment variables use MONITOR_ prefix.
    Example: MONITOR_LOCAL_IP=10.0.0.1, MONITOR_PORT=9669, MONITOR_ROLE=storaged
    """

    local_ip: str = Field(
        default="",
        max_length=255,
        description="Address reported as endpoint host. Empty uses the machine hostname.",
    )
    port: int | None = Field(
        default=None,
        ge=1,
        le=65535,
        description="Port reported in the endpoint. None falls back to APP_PORT.",
    )
    role: str = Field(
        default="stats-service",
        min_length=1,
        max_length=100,
        description="Process role reported as the module tag (e.g. graphd, storaged)",
    )

    model_config = SettingsConfigDict(
        env_prefix="MONITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_monitor_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
