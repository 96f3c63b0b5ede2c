"""
CLI commands for shell functions.

Thin wrappers over ``zshdeck.core.services.function_ops``.  Function
bodies are read from a file argument, or stdin when it is omitted.
"""

from __future__ import annotations

import sys
from typing import IO

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
def functions() -> None:
    """Functions — list, add, update, delete, format."""


@functions.command("list")
@scope_option
@click.option("--names", "names_only", is_flag=True, help="Print names only.")
@json_option
@click.pass_context
def list_cmd(ctx: click.Context, local: bool, names_only: bool, as_json: bool) -> None:
    """List function definitions."""
    from zshdeck.core.services.function_ops import list_functions

    result = list_functions(get_paths(ctx), scope_from(local))

    if as_json:
        echo_json(result)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    records = result["functions"]
    if not records:
        click.secho(f"No functions in {result['path']}", fg="yellow")
        return

    if names_only:
        for f in records:
            click.echo(f["name"])
        return

    click.secho(f"ƒ {len(records)} functions ({result['scope']})", fg="cyan", bold=True)
    for f in records:
        click.echo()
        click.secho(f"   {f['name']}()", fg="white", bold=True)
        for line in f["body"].splitlines():
            click.echo(f"     │ {line}")
    click.echo()


@functions.command()
@click.argument("name")
@click.argument("body_file", type=click.File("r"), default="-")
@scope_option
@click.pass_context
def add(ctx: click.Context, name: str, body_file: IO[str], local: bool) -> None:
    """Add function NAME with the body read from BODY_FILE (default: stdin)."""
    from zshdeck.core.services.function_ops import add_function

    report(add_function(get_paths(ctx), name, body_file.read(), scope_from(local)))


@functions.command()
@click.argument("name")
@click.argument("body_file", type=click.File("r"), default="-")
@click.option("--rename", "new_name", default=None, metavar="NEW_NAME", help="Rename the function.")
@scope_option
@click.pass_context
def update(
    ctx: click.Context,
    name: str,
    body_file: IO[str],
    new_name: str | None,
    local: bool,
) -> None:
    """Replace the body of function NAME."""
    from zshdeck.core.services.function_ops import update_function

    result = update_function(
        get_paths(ctx), name, body_file.read(), scope_from(local), new_name=new_name,
    )
    report(result)


@functions.command()
@click.argument("name")
@scope_option
@click.pass_context
def delete(ctx: click.Context, name: str, local: bool) -> None:
    """Delete function NAME."""
    from zshdeck.core.services.function_ops import delete_function

    report(delete_function(get_paths(ctx), name, scope_from(local)))


@functions.command("fmt")
@scope_option
@click.confirmation_option(
    prompt="Text outside function blocks will be dropped. Continue?",
)
@click.pass_context
def fmt(ctx: click.Context, local: bool) -> None:
    """Rewrite the function file in canonical form."""
    from zshdeck.core.services.function_ops import format_functions

    result = format_functions(get_paths(ctx), scope_from(local))
    report(result)
    if result.get("discarded_lines"):
        click.secho(f"   Dropped {result['discarded_lines']} line(s)", fg="yellow")
