"""Path inspection commands.

Print the paths the agent derives for an application identifier, either all
of them or a single slot, and resolve the versioned mod packages directory.
"""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.table import Table

from modpaths.interfaces.cli.context import get_cli_context
from modpaths.services.dto import PathSnapshotDTO
from modpaths.services.path_registry import substitute_game_version

console = Console()


@click.command()
@click.option("--json-output", is_flag=True, help="Output the paths as JSON.")
@click.pass_context
def show(ctx: click.Context, json_output: bool) -> None:
    """Show every path derived for the application identifier."""

    cli_context = get_cli_context(ctx)
    snapshot = PathSnapshotDTO.from_registry(cli_context.registry)

    if json_output:
        click.echo(json.dumps(snapshot.model_dump(mode="json"), indent=2))
        return

    table = Table(title=f"Paths for {snapshot.app_id}")
    table.add_column("Slot", style="cyan", no_wrap=True)
    table.add_column("Path", overflow="fold")
    for name, value in snapshot.paths.items():
        table.add_row(name, value)
    console.print(table)


@click.command("get")
@click.argument("slot")
@click.pass_context
def get_cmd(ctx: click.Context, slot: str) -> None:
    """Print the path stored in SLOT (e.g. late_mods_dir)."""

    cli_context = get_cli_context(ctx)
    try:
        value = cli_context.registry.get(slot)
    except KeyError:
        raise click.BadParameter(f"Unknown path slot: {slot}", param_hint="SLOT")
    click.echo(value)


@click.command()
@click.argument("game_version")
@click.pass_context
def packages(ctx: click.Context, game_version: str) -> None:
    """Print the mod packages directory for GAME_VERSION."""

    cli_context = get_cli_context(ctx)
    click.echo(
        substitute_game_version(cli_context.registry.mod_packages_dir, game_version)
    )
