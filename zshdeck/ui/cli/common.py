"""
Helpers shared by the CLI command groups.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import Scope


def get_paths(ctx: click.Context) -> ShellPaths:
    """Resolve the file layout once per invocation and cache it on the context."""
    root = ctx.find_root()
    root.ensure_object(dict)
    paths = root.obj.get("paths")
    if paths is None:
        from zshdeck.core.config.loader import ConfigError, load_paths

        config_path: Path | None = root.obj.get("config_path")
        home: Path | None = root.obj.get("home")
        try:
            paths = load_paths(config_path, home=home)
        except ConfigError as e:
            click.secho(f"❌ {e}", fg="red")
            sys.exit(1)
        root.obj["paths"] = paths
    return paths


scope_option = click.option(
    "--local",
    "local",
    is_flag=True,
    help="Use the local (machine-specific) file instead of the shared one.",
)

json_option = click.option(
    "--json-output", "--json", "as_json", is_flag=True, help="Output as JSON."
)


def scope_from(local: bool) -> Scope:
    return Scope.from_flag(local)


def echo_json(result: dict) -> None:
    """Print a service result as JSON; exit 1 if it is a failure."""
    click.echo(json.dumps(result, indent=2))
    if "error" in result:
        sys.exit(1)


def report(result: dict, *, as_json: bool = False) -> None:
    """Print a mutation result and exit 1 on failure."""
    if as_json:
        echo_json(result)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    click.secho(f"✅ {result.get('message', 'Done')}", fg="green")
