"""
CLI commands for versioning the zsh config directory with git.

Thin wrappers over ``zshdeck.core.services.git_ops``.
"""

from __future__ import annotations

import sys

import click

from zshdeck.ui.cli.common import echo_json, get_paths, json_option


@click.group()
def git() -> None:
    """Git — status, log, diff, commit, pull, push, init."""


def _fail_on_error(result: dict) -> None:
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)


@git.command()
@json_option
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show branch, clean state and changed files."""
    from zshdeck.core.services.git_ops import git_status

    result = git_status(get_paths(ctx))

    if as_json:
        echo_json(result)
        return

    _fail_on_error(result)

    state = "clean" if result["clean"] else "dirty"
    click.secho(f"🌿 {result['branch']}", fg="cyan", bold=True, nl=False)
    click.secho(f"  {state}", fg="green" if result["clean"] else "yellow")

    if result["ahead"] or result["behind"]:
        click.echo(f"   ↑ ahead {result['ahead']}  ↓ behind {result['behind']}")
    for fname in result["modified"]:
        click.secho(f"   M {fname}", fg="yellow")
    for fname in result["untracked"]:
        click.secho(f"   ? {fname}", fg="red")


@git.command()
@click.option("-n", "count", default=10, type=int, help="Number of commits.")
@json_option
@click.pass_context
def log(ctx: click.Context, count: int, as_json: bool) -> None:
    """Show recent commits."""
    from zshdeck.core.services.git_ops import git_log

    result = git_log(get_paths(ctx), n=count)

    if as_json:
        echo_json(result)
        return

    _fail_on_error(result)

    if not result["commits"]:
        click.secho("No commits found.", fg="yellow")
        return
    for c in result["commits"]:
        click.secho(f"  {c['hash'][:7]}", fg="yellow", nl=False)
        click.echo(f"  {c['message'][:70]}")
        click.echo(f"           {c['author']} — {c['date'][:10]}")


@git.command()
@click.pass_context
def diff(ctx: click.Context) -> None:
    """Show unstaged changes."""
    from zshdeck.core.services.git_ops import git_diff

    result = git_diff(get_paths(ctx))
    _fail_on_error(result)
    click.echo(result["diff"], nl=False)


@git.command()
@click.argument("message")
@click.pass_context
def commit(ctx: click.Context, message: str) -> None:
    """Stage everything and commit with MESSAGE."""
    from zshdeck.core.services.git_ops import git_commit

    result = git_commit(get_paths(ctx), message)
    _fail_on_error(result)
    click.secho(f"✅ Committed: {result['hash']}", fg="green", bold=True)


@git.command()
@click.option("--no-rebase", is_flag=True, help="Merge instead of rebasing.")
@click.pass_context
def pull(ctx: click.Context, no_rebase: bool) -> None:
    """Pull from the remote."""
    from zshdeck.core.services.git_ops import git_pull

    result = git_pull(get_paths(ctx), rebase=not no_rebase)
    _fail_on_error(result)
    click.secho("✅ Pulled", fg="green")
    if result.get("output"):
        click.echo(f"   {result['output'][:200]}")


@git.command()
@click.pass_context
def push(ctx: click.Context) -> None:
    """Push to the remote."""
    from zshdeck.core.services.git_ops import git_push

    result = git_push(get_paths(ctx))
    _fail_on_error(result)
    click.secho("✅ Pushed", fg="green")


@git.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Initialize a repository in the config directory."""
    from zshdeck.core.services.git_ops import git_init

    result = git_init(get_paths(ctx))
    _fail_on_error(result)
    click.secho("✅ Initialized", fg="green")
