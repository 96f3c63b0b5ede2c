"""
zshdeck — CLI entrypoint.

Usage:
    zshdeck --help
    zshdeck aliases list --local
    zshdeck plugins enable fzf
    python -m zshdeck.main web
"""

from __future__ import annotations

from pathlib import Path

import click

from zshdeck import __version__
from zshdeck.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="zshdeck")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to zshdeck.yml (default: $ZSHDECK_CONFIG or ~/.config/zshdeck/zshdeck.yml).",
)
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="ZSHDECK_HOME",
    help="Home directory the default file layout is resolved against.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: Path | None,
    home: Path | None,
) -> None:
    """zshdeck — manage zsh aliases, functions and plugins."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path
    ctx.obj["home"] = home

    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", "-p", default=8765, type=int, help="Port number.")
@click.pass_context
def web(ctx: click.Context, host: str, port: int) -> None:
    """Serve the local JSON API for a front-end."""
    from zshdeck.ui.cli.common import get_paths
    from zshdeck.ui.web.server import create_app, run_server

    app = create_app(get_paths(ctx))

    click.echo()
    click.secho("⚡ zshdeck API", bold=True)
    click.echo(f"   Listening: http://{host}:{port}/api")
    if ctx.obj.get("debug"):
        click.secho("   Logging: DEBUG (all output)", fg="yellow")
    click.echo()

    run_server(app, host=host, port=port, debug=ctx.obj.get("debug", False))


# ── Register sub-command groups from zshdeck/ui/cli/ ───────────────

from zshdeck.ui.cli.aliases import aliases  # noqa: E402
from zshdeck.ui.cli.config import config  # noqa: E402
from zshdeck.ui.cli.functions import functions  # noqa: E402
from zshdeck.ui.cli.git import git  # noqa: E402
from zshdeck.ui.cli.plugins import plugins  # noqa: E402

cli.add_command(aliases)
cli.add_command(functions)
cli.add_command(plugins)
cli.add_command(config)
cli.add_command(git)


if __name__ == "__main__":
    cli()
