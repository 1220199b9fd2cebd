"""Main CLI entry point for stats-service commands."""

import click

from stats_service.cli.commands import server, stats
from stats_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="1.0.0", prog_name="stats-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Stats Service CLI.

    \b
    Commands:
      serve   Run the HTTP server
      fetch   Query a running stats endpoint
    """
    ctx.ensure_object(dict)


cli.add_command(server.serve)
cli.add_command(stats.fetch)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
