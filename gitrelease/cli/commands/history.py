"""Read-only commands: version, previous, next, issues."""

from __future__ import annotations

import typer

from gitrelease.cli.commands._helpers import exit_on_error, exit_with_code
from gitrelease.cli.context import build_context
from gitrelease.core.errors import ErrorCode
from gitrelease.release.semver import BUMP_KINDS, DEFAULT_BUMP, parse_bump


def version(
    amount: int = typer.Argument(1, min=0, help="Number of versions to show, newest first"),
) -> None:
    """Show the current release version (and older ones)."""
    ctx = build_context()
    for v in exit_on_error(ctx.service.versions(amount), ctx):
        ctx.console.print(str(v))


def previous(
    offset: int = typer.Argument(1, min=0, help="How many releases back from the latest"),
) -> None:
    """Show a previous release version."""
    ctx = build_context()
    found = exit_on_error(ctx.service.previous(offset), ctx)
    if found is not None:
        ctx.console.print(str(found))


def next_version(
    kind: str = typer.Argument(DEFAULT_BUMP, help="major | minor | patch"),
) -> None:
    """Show the version the next release would get (0.0.0 before the first one)."""
    ctx = build_context()
    bump = parse_bump(kind)
    if bump is None:
        ctx.console.error(f"unknown release kind: {kind} (expected {' | '.join(BUMP_KINDS)})")
        exit_with_code(int(ErrorCode.USER_ERROR))
    ctx.console.print(str(exit_on_error(ctx.service.next_version(bump), ctx)))


def issues(
    point_a: str | None = typer.Argument(
        None, help="Range point (default: develop), or 'previous'"
    ),
    point_b: str | None = typer.Argument(
        None, help="Range point (default: current version), or offset after 'previous'"
    ),
) -> None:
    """List ticket ids referenced by commit subjects in a range."""
    ctx = build_context()
    exit_on_error(ctx.service.report_issues(point_a, point_b), ctx)
