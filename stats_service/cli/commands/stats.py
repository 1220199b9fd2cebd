"""Commands that query a running stats endpoint."""

import sys

import click
import httpx

from stats_service.cli.utils import error
from stats_service.core.settings import get_app_settings


def _default_url() -> str:
    settings = get_app_settings()
    host = "127.0.0.1" if settings.host == "0.0.0.0" else settings.host
    return f"http://{host}:{settings.port}{settings.stats_path}"


@click.command(name="fetch")
@click.option("--url", default=None, help="Stats endpoint URL (default: from settings)")
@click.option(
    "--format",
    "output_format",
    default=None,
    type=click.Choice(["plain", "json", "monitor"]),
    help="Output format (default: plain)",
)
@click.option("--stats", "stat_names", default=None, help="Comma separated stat names")
@click.option("--timeout", default=5.0, type=float, show_default=True, help="Request timeout in seconds")
def fetch(url: str | None, output_format: str | None, stat_names: str | None, timeout: float) -> None:
    """Fetch stats from a running service and print the body."""
    params: dict[str, str] = {}
    if output_format and output_format != "plain":
        params["format"] = output_format
    if stat_names:
        params["stats"] = stat_names

    try:
        response = httpx.get(url or _default_url(), params=params, timeout=timeout)
    except httpx.HTTPError as e:
        error(f"Request failed: {e}")
        sys.exit(1)

    if response.status_code != httpx.codes.OK:
        error(f"Stats endpoint returned {response.status_code} {response.reason_phrase}")
        sys.exit(1)

    click.echo(response.text, nl=not response.text.endswith("\n"))
