"""Shared helpers for composing CLI command contexts.

This module centralises the CLI wiring: resolving the application identifier
from options, environment or ``config.json`` and building an initialized
registry for the command to read from.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from modpaths.infrastructure.config import get_default_app_id
from modpaths.services.path_registry import PathRegistry


@dataclass(frozen=True)
class CLIContext:
    """Container for the resolved identifier and its path registry."""

    app_id: str
    config_path: Path | None
    registry: PathRegistry


def build_cli_context(
    app_id: str | None = None, config_path: str | Path | None = None
) -> CLIContext:
    """Build a CLI context with a registry bound to the resolved identifier.

    Each context owns its registry, so one process can serve commands for
    different identifiers.
    """

    resolved_config = Path(config_path).expanduser() if config_path is not None else None
    resolved_app_id = app_id or get_default_app_id(resolved_config)
    registry = PathRegistry()
    registry.initialize(resolved_app_id)
    return CLIContext(
        app_id=resolved_app_id, config_path=resolved_config, registry=registry
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the context for the current invocation, building it on first use."""

    ctx.ensure_object(dict)
    cli_context = ctx.obj.get("cli_context")
    if cli_context is None:
        cli_context = build_cli_context(
            ctx.obj.get("app_id"), ctx.obj.get("config_path")
        )
        ctx.obj["cli_context"] = cli_context
    return cli_context
