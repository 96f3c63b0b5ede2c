"""
CLI commands for oh-my-zsh plugins.

Thin wrappers over ``zshdeck.core.services.plugin_ops``.
"""

from __future__ import annotations

import sys

import click

from zshdeck.ui.cli.common import echo_json, get_paths, json_option, report


@click.group()
def plugins() -> None:
    """Plugins — list, browse the catalog, enable, disable."""


def _print_plugin(p: dict, verbose: bool) -> None:
    marker = "✓" if p["installed"] else "✗"
    color = "green" if p["installed"] else "yellow"
    click.secho(f"   {marker} {p['name']}", fg=color, nl=False)
    if p.get("description"):
        click.echo(f"  — {p['description']}")
    else:
        click.echo()
    if verbose:
        if p.get("repository"):
            click.echo(f"       {p['repository']}")
        if p.get("install_hint") and not p["installed"]:
            for line in p["install_hint"].splitlines():
                click.echo(f"       │ {line}")


@plugins.command("list")
@json_option
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List enabled plugins."""
    from zshdeck.core.services.plugin_ops import list_enabled

    result = list_enabled(get_paths(ctx))

    if as_json:
        echo_json(result)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if not result["exists"]:
        click.secho(f"{result['path']} does not exist", fg="yellow")
        return
    if not result["marker"]:
        click.secho(f"No plugins=( ... ) list in {result['path']}", fg="yellow")
        return

    click.secho(f"🔌 {len(result['plugins'])} plugins enabled", fg="cyan", bold=True)
    for p in result["plugins"]:
        _print_plugin(p, ctx.obj.get("verbose", False))


@plugins.command()
@json_option
@click.pass_context
def available(ctx: click.Context, as_json: bool) -> None:
    """List catalog plugins that are not enabled yet."""
    from zshdeck.core.services.plugin_ops import list_catalog_unused

    result = list_catalog_unused(get_paths(ctx))

    if as_json:
        echo_json(result)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if not result["plugins"]:
        click.secho("Every catalog plugin is already enabled.", fg="green")
        return

    click.secho(f"📦 {len(result['plugins'])} plugins available", fg="cyan", bold=True)
    for p in result["plugins"]:
        _print_plugin(p, True)


@plugins.command()
@click.argument("name")
@click.pass_context
def enable(ctx: click.Context, name: str) -> None:
    """Enable plugin NAME."""
    from zshdeck.core.services.plugin_ops import enable_plugin

    report(enable_plugin(get_paths(ctx), name))


@plugins.command()
@click.argument("name")
@click.pass_context
def disable(ctx: click.Context, name: str) -> None:
    """Disable plugin NAME."""
    from zshdeck.core.services.plugin_ops import disable_plugin

    report(disable_plugin(get_paths(ctx), name))
