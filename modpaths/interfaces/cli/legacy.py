"""List directories left behind by older agent builds."""

from __future__ import annotations

import json

import click

from modpaths.services.dto import LegacyPathsDTO
from modpaths.services.path_registry import PathRegistry


@click.command()
@click.option("--json-output", is_flag=True, help="Output the list as JSON.")
def legacy(json_output: bool) -> None:
    """Show legacy paths that should be removed when found."""

    if json_output:
        payload = LegacyPathsDTO(legacy_dirs=list(PathRegistry.legacy_dirs))
        click.echo(json.dumps(payload.model_dump(mode="json"), indent=2))
        return

    for path in PathRegistry.legacy_dirs:
        click.echo(path)
