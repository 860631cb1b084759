from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from gitrelease.core.config import CONFIG_FILE_NAME, ReleaseConfig, load_config_or_default
from gitrelease.core.errors import ErrorCode
from gitrelease.core.result import Err
from gitrelease.git.repository import Repository
from gitrelease.output.console import ConsoleProtocol, RichConsole
from gitrelease.release.service import ReleaseService

REPO_ENV = "GIT_RELEASE_REPO"
VERBOSE_ENV = "GIT_RELEASE_VERBOSE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo: Repository
    config: ReleaseConfig
    console: ConsoleProtocol

    @property
    def service(self) -> ReleaseService:
        return ReleaseService(repo=self.repo, console=self.console, config=self.config)


def repo_root() -> Path:
    env = os.environ.get(REPO_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def build_context() -> CLIContext:
    root = repo_root()
    if not root.is_dir():
        typer.echo(f"error: repository path is not a directory: {root}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    console = RichConsole(verbose=os.environ.get(VERBOSE_ENV) == "1")

    config_result = load_config_or_default(root / CONFIG_FILE_NAME)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        repo=Repository(root, echo=console.command),
        config=config_result.value,
        console=console,
    )
