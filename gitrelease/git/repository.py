"""Git repository abstraction.

`Repository` is the only place that knows git command lines. Queries
capture output for parsing; side-effecting steps stream their output so the
user sees git's own diagnostics, and `git flow release finish` can open the
tag message editor.

Usage:
    repo = Repository(Path("."))

    match repo.checkout("develop"):
        case Ok(_):
            ...
        case Err(e):
            print(f"{e.command}: {e.message}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from gitrelease.core.result import Err, Ok, Result
from gitrelease.platform.process import ProcessError
from gitrelease.platform.process import run as run_process
from gitrelease.platform.process import run_silent

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed (without the leading `git`)
        message: Error message
        returncode: Process return code, -1 if git could not be started
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git operations needed by the release workflow.

    Attributes:
        path: Path to the repository (any directory inside the work tree)
    """

    def __init__(self, path: Path, *, echo: Callable[[str], None] | None = None) -> None:
        """Initialize repository.

        Args:
            path: Repository directory
            echo: Called with each git command line before it runs
        """
        self.path = path
        self._echo = echo

    # -- queries ---------------------------------------------------------

    def log_decorations(self) -> Result[str, GitError]:
        """Ref decorations of every commit, newest first, one line per commit.

        Lines look like `HEAD -> develop, tag: 1.1.0, origin/develop` and are
        empty for undecorated commits.
        """
        return self._query(["log", "--format=%D"])

    def log_subjects(self, revision_range: str) -> Result[str, GitError]:
        """Subject lines of the commits in `revision_range`, one per line."""
        return self._query(["log", "--format=%s", revision_range])

    def has_branch(self, name: str) -> bool:
        """Check if a local branch exists."""
        result = self._query(["rev-parse", "--verify", "--quiet", f"refs/heads/{name}"])
        return isinstance(result, Ok)

    # -- side effects ----------------------------------------------------

    def checkout(self, branch: str) -> Result[None, GitError]:
        return self._step(["checkout", branch])

    def pull(self, remote: str, branch: str) -> Result[None, GitError]:
        return self._step(["pull", remote, branch])

    def fetch_tags(self, remote: str) -> Result[None, GitError]:
        """Bring every tag from `remote` into the local repository."""
        return self._step(["fetch", remote, "--tags"])

    def push(self, remote: str, branch: str) -> Result[None, GitError]:
        return self._step(["push", remote, branch])

    def push_tags(self, remote: str) -> Result[None, GitError]:
        return self._step(["push", remote, "--tags"])

    def reset_hard(self, ref: str) -> Result[None, GitError]:
        """Reset the current branch and work tree to `ref`, discarding local work."""
        return self._step(["reset", "--hard", ref])

    def delete_branch(self, name: str) -> Result[None, GitError]:
        return self._step(["branch", "-D", name])

    def delete_tag(self, name: str) -> Result[None, GitError]:
        return self._step(["tag", "-d", name])

    def release_start(self, version: str) -> Result[None, GitError]:
        return self._step(["flow", "release", "start", version])

    def release_finish(self, version: str) -> Result[None, GitError]:
        return self._step(["flow", "release", "finish", version])

    # -- plumbing --------------------------------------------------------

    def _announce(self, args: list[str]) -> None:
        if self._echo is not None:
            self._echo(" ".join(["git", *args]))

    def _query(self, args: list[str]) -> Result[str, GitError]:
        self._announce(args)
        result = run_process(["git", "-C", str(self.path), *args], cwd=self.path)
        match result:
            case Err(e):
                return Err(_git_error(args, e))
            case Ok(stdout):
                return Ok(stdout)

    def _step(self, args: list[str]) -> Result[None, GitError]:
        self._announce(args)
        result = run_silent(["git", "-C", str(self.path), *args], cwd=self.path)
        match result:
            case Err(e):
                return Err(_git_error(args, e))
            case Ok(_):
                return Ok(None)


def _git_error(args: list[str], error: ProcessError) -> GitError:
    command = " ".join(args)
    message = error.stderr.strip() or error.stdout.strip() or f"git {command} failed"
    return GitError(command=command, message=message, returncode=error.returncode)
