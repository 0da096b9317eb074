"""Entry point for running the modpaths CLI.

This module defines a top-level Click group that aggregates all subcommands
defined in the ``modpaths.interfaces.cli`` package. Executing
``python -m modpaths.interfaces.cli`` will invoke this group.
"""

import logging

import click

from modpaths.infrastructure.observability import configure_logging

from .legacy import legacy
from .paths import get_cmd, packages, show


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--app-id",
    default=None,
    help="Identifier of the application being modded.",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to config.json (reads the app_id key).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context, app_id: str | None, config_path: str | None, verbose: bool
) -> None:
    """modpaths command-line interface."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["app_id"] = app_id
    ctx.obj["config_path"] = config_path


cli.add_command(show)
cli.add_command(get_cmd, name="get")
cli.add_command(packages)
cli.add_command(legacy)


if __name__ == "__main__":
    cli()
