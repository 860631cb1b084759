from __future__ import annotations

import os
from pathlib import Path

import typer

from gitrelease import __version__
from gitrelease.cli.commands.help_cmd import help_cmd
from gitrelease.cli.commands.history import issues, next_version, previous, version
from gitrelease.cli.commands.workflow import create, deploy, prepare, revert, send
from gitrelease.cli.context import REPO_ENV, VERBOSE_ENV
from gitrelease.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Semantic-version releases on top of git-flow.",
)


# Commands
app.command("help")(help_cmd)
app.command()(prepare)
app.command()(version)
app.command()(previous)
app.command("next")(next_version)
app.command()(create)
app.command(context_settings={"allow_extra_args": True})(issues)
app.command()(send)
app.command()(revert)
app.command()(deploy)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Repository directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo each git command."),
) -> None:
    if repo is not None:
        try:
            root = repo.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --repo: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        os.environ[REPO_ENV] = str(root)

    if verbose:
        os.environ[VERBOSE_ENV] = "1"


def main() -> None:
    app()
