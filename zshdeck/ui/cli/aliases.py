"""
CLI commands for aliases.

Thin wrappers over ``zshdeck.core.services.alias_ops``.
"""

from __future__ import annotations

import sys

import click

from zshdeck.ui.cli.common import (
    echo_json,
    get_paths,
    json_option,
    report,
    scope_from,
    scope_option,
)


@click.group()
def aliases() -> None:
    """Aliases — list, add, update, delete."""


@aliases.command("list")
@scope_option
@click.option("--secrets", is_flag=True, help="List aliases from the secrets file.")
@json_option
@click.pass_context
def list_cmd(ctx: click.Context, local: bool, secrets: bool, as_json: bool) -> None:
    """List aliases."""
    from zshdeck.core.services.alias_ops import list_aliases, list_secrets_aliases

    paths = get_paths(ctx)
    if secrets:
        result = list_secrets_aliases(paths)
    else:
        result = list_aliases(paths, scope_from(local))

    if as_json:
        echo_json(result)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    records = result["aliases"]
    if not records:
        click.secho(f"No aliases in {result['path']}", fg="yellow")
        return

    width = max(len(a["name"]) for a in records)
    click.secho(f"🔗 {len(records)} aliases ({result['scope']})", fg="cyan", bold=True)
    for a in records:
        click.echo(f"   {a['name']:<{width}}  {a['value']}")


@aliases.command()
@click.argument("name")
@click.argument("value")
@scope_option
@click.pass_context
def add(ctx: click.Context, name: str, value: str, local: bool) -> None:
    """Add alias NAME for VALUE."""
    from zshdeck.core.services.alias_ops import add_alias

    report(add_alias(get_paths(ctx), name, value, scope_from(local)))


@aliases.command()
@click.argument("name")
@click.argument("value")
@click.option("--rename", "new_name", default=None, metavar="NEW_NAME", help="Rename the alias.")
@scope_option
@click.pass_context
def update(ctx: click.Context, name: str, value: str, new_name: str | None, local: bool) -> None:
    """Change the value of alias NAME."""
    from zshdeck.core.services.alias_ops import update_alias

    report(update_alias(get_paths(ctx), name, new_name, value, scope_from(local)))


@aliases.command()
@click.argument("name")
@scope_option
@click.pass_context
def delete(ctx: click.Context, name: str, local: bool) -> None:
    """Delete alias NAME."""
    from zshdeck.core.services.alias_ops import delete_alias

    report(delete_alias(get_paths(ctx), name, scope_from(local)))
