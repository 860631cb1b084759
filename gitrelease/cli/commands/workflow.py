"""Commands that change the repository: prepare, create, send, revert, deploy."""

from __future__ import annotations

import typer

from gitrelease.cli.commands._helpers import exit_on_error
from gitrelease.cli.context import build_context
from gitrelease.release.semver import DEFAULT_BUMP


def prepare() -> None:
    """Update master, develop and tags from origin."""
    ctx = build_context()
    exit_on_error(ctx.service.prepare(), ctx)


def create(
    target: str = typer.Argument(
        DEFAULT_BUMP, help="major | minor | patch, or a literal version"
    ),
) -> None:
    """Create a release with git-flow."""
    ctx = build_context()
    exit_on_error(ctx.service.create(target), ctx)


def send() -> None:
    """Push develop, master and tags to origin."""
    ctx = build_context()
    exit_on_error(ctx.service.send(), ctx)


def revert() -> None:
    """Undo the latest local release (hard reset of develop and master)."""
    ctx = build_context()
    version = exit_on_error(ctx.service.revert(), ctx)
    ctx.console.success(f"release {version} reverted")


def deploy(
    target: str = typer.Argument(
        DEFAULT_BUMP, help="major | minor | patch, or a literal version"
    ),
    send: bool = typer.Option(False, "--send", help="Push the release when done"),
) -> None:
    """Run prepare, issues and create, then send if requested."""
    ctx = build_context()
    exit_on_error(ctx.service.deploy(target, send=send), ctx)
