"""
CLI commands for the raw config files and the resolved file layout.
"""

from __future__ import annotations

import json
import sys
from typing import IO

import click

from zshdeck.ui.cli.common import get_paths, json_option, report, scope_from, scope_option


@click.group()
def config() -> None:
    """Config files — show, write, reload hint, resolved paths."""


@config.command()
@json_option
@click.pass_context
def paths(ctx: click.Context, as_json: bool) -> None:
    """Show which files zshdeck reads and writes."""
    layout = get_paths(ctx)
    data = layout.model_dump(mode="json")

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    for key, value in data.items():
        if isinstance(value, list):
            click.echo(f"   {key}:")
            for item in value:
                click.echo(f"     • {item}")
        else:
            click.echo(f"   {key}: {value if value is not None else '(none)'}")


@config.command()
@scope_option
@click.pass_context
def show(ctx: click.Context, local: bool) -> None:
    """Print the raw config file."""
    from zshdeck.core.services.config_ops import get_config

    result = get_config(get_paths(ctx), scope_from(local))
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if not result["exists"]:
        click.secho(f"{result['path']} does not exist yet", fg="yellow")
        return
    click.echo(result["content"], nl=False)


@config.command()
@click.argument("source", type=click.File("r"), default="-")
@scope_option
@click.pass_context
def write(ctx: click.Context, source: IO[str], local: bool) -> None:
    """Replace the config file with SOURCE (default: stdin)."""
    from zshdeck.core.services.config_ops import update_config

    result = update_config(get_paths(ctx), source.read(), scope_from(local))
    report(result)
    click.echo(f"   {result['hint']}")


@config.command()
def reload() -> None:
    """Explain how to reload zsh."""
    from zshdeck.core.services.config_ops import reload_hint

    click.echo(reload_hint())
