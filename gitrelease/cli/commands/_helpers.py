"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from gitrelease.core.errors import ErrorCode
from gitrelease.core.result import Err, Result
from gitrelease.output.console import Style
from gitrelease.release.errors import ReleaseError

if TYPE_CHECKING:
    from gitrelease.cli.context import CLIContext


T = TypeVar("T")


def release_error_exit_code(error: ReleaseError) -> int:
    """Exit code for a release error.

    Git failures exit with git's own status so scripts see what git said.
    """
    if error.kind == "git_failed":
        if error.returncode is not None and error.returncode > 0:
            return error.returncode
        return int(ErrorCode.GIT_ERROR)
    return int(ErrorCode.USER_ERROR)


def exit_on_error(result: Result[T, ReleaseError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit."""
    if isinstance(result, Err):
        error = result.error
        ctx.console.error(error.message)
        if error.hint:
            ctx.console.print(f"hint: {error.hint}", Style.DIM)
        raise typer.Exit(code=release_error_exit_code(error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)
