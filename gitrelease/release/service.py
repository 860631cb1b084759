"""Release workflow orchestration.

Each command is a fixed sequence of git steps. A sequence stops at the first
failing step and reports git's error; nothing is retried or rolled back, so
the repository is left exactly where git stopped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import Protocol

from gitrelease.core.config import ReleaseConfig
from gitrelease.core.result import Err, Ok, Result
from gitrelease.git.repository import GitError
from gitrelease.output.console import ConsoleProtocol, Style
from gitrelease.release.errors import ReleaseError
from gitrelease.release.history import ReleaseHistory
from gitrelease.release.issues import extract_issues, issue_regex
from gitrelease.release.ranges import RangeSelection, resolve_range
from gitrelease.release.semver import (
    DEFAULT_BUMP,
    BumpKind,
    Version,
    next_version,
    parse_bump,
    parse_version,
)

Step = Callable[[], Result[None, GitError]]


class VersionControl(Protocol):
    """The git operations the workflow relies on (see `Repository`)."""

    def log_decorations(self) -> Result[str, GitError]: ...

    def log_subjects(self, revision_range: str) -> Result[str, GitError]: ...

    def has_branch(self, name: str) -> bool: ...

    def checkout(self, branch: str) -> Result[None, GitError]: ...

    def pull(self, remote: str, branch: str) -> Result[None, GitError]: ...

    def fetch_tags(self, remote: str) -> Result[None, GitError]: ...

    def push(self, remote: str, branch: str) -> Result[None, GitError]: ...

    def push_tags(self, remote: str) -> Result[None, GitError]: ...

    def reset_hard(self, ref: str) -> Result[None, GitError]: ...

    def delete_branch(self, name: str) -> Result[None, GitError]: ...

    def delete_tag(self, name: str) -> Result[None, GitError]: ...

    def release_start(self, version: str) -> Result[None, GitError]: ...

    def release_finish(self, version: str) -> Result[None, GitError]: ...


@dataclass(frozen=True, slots=True)
class IssueReport:
    # None when `previous <n>` points past the oldest release
    selection: RangeSelection | None
    issues: tuple[str, ...] = ()


class ReleaseService:
    """Commands of the git-flow release workflow."""

    def __init__(
        self,
        *,
        repo: VersionControl,
        console: ConsoleProtocol,
        config: ReleaseConfig,
    ) -> None:
        self._repo = repo
        self._console = console
        self._config = config
        self._history = ReleaseHistory(repo)

    # -- queries ---------------------------------------------------------

    def versions(self, amount: int = 1) -> Result[tuple[Version, ...], ReleaseError]:
        return self._history.list_versions(amount).map_err(ReleaseError.from_git)

    def previous(self, offset: int = 1) -> Result[Version | None, ReleaseError]:
        return self._history.previous(offset).map_err(ReleaseError.from_git)

    def next_version(self, kind: BumpKind = DEFAULT_BUMP) -> Result[Version, ReleaseError]:
        current = self._history.current()
        if isinstance(current, Err):
            return Err(ReleaseError.from_git(current.error))
        return Ok(next_version(current.value, kind))

    def resolve_target(self, kind_or_version: str) -> Result[str, ReleaseError]:
        """Version to release: a bump of the current one, or a literal string.

        Literal versions are used verbatim. A non-semantic one still works
        for git-flow but later `version`/`next` calls will not see it.
        """
        kind = parse_bump(kind_or_version)
        if kind is None:
            if parse_version(kind_or_version) is None:
                self._console.warning(
                    f"'{kind_or_version}' is not a semantic version; "
                    "version/next will ignore this release"
                )
            return Ok(kind_or_version)
        return self.next_version(kind).map(str)

    def issues(
        self, point_a: str | None = None, point_b: str | None = None
    ) -> Result[IssueReport, ReleaseError]:
        selection = resolve_range(self._history, point_a, point_b, config=self._config)
        if isinstance(selection, Err):
            return selection
        if selection.value is None:
            return Ok(IssueReport(selection=None))

        subjects = self._repo.log_subjects(selection.value.log_range)
        if isinstance(subjects, Err):
            return Err(ReleaseError.from_git(subjects.error))

        pattern = issue_regex(self._config.issue_prefix, self._config.issue_pattern)
        found = extract_issues(subjects.value.splitlines(), pattern)
        return Ok(IssueReport(selection=selection.value, issues=found))

    def report_issues(
        self, point_a: str | None = None, point_b: str | None = None
    ) -> Result[IssueReport, ReleaseError]:
        """Print the range header followed by one ticket id per line.

        Nothing is printed when there is no release to report on.
        """
        result = self.issues(point_a, point_b)
        if isinstance(result, Err):
            return result

        selection = result.value.selection
        if selection is not None:
            self._console.print(selection.header)
            self._console.newline()
            for issue in result.value.issues:
                self._console.print(issue)
        return result

    # -- workflow --------------------------------------------------------

    def prepare(self) -> Result[None, ReleaseError]:
        """Bring master, develop and tags up to date with the remote."""
        cfg = self._config
        self._console.header("Prepare")
        return self._run_steps(
            [
                partial(self._repo.checkout, cfg.master),
                partial(self._repo.pull, cfg.remote, cfg.master),
                partial(self._repo.checkout, cfg.develop),
                partial(self._repo.pull, cfg.remote, cfg.develop),
                partial(self._repo.fetch_tags, cfg.remote),
            ]
        )

    def create(self, kind_or_version: str = DEFAULT_BUMP) -> Result[str, ReleaseError]:
        """Start and finish a git-flow release; returns the released version."""
        target = self.resolve_target(kind_or_version)
        if isinstance(target, Err):
            return target
        version = target.value

        self._console.header(f"Create release version: {version}")
        steps = self._run_steps(
            [
                partial(self._repo.release_start, version),
                partial(self._repo.release_finish, version),
            ]
        )
        if isinstance(steps, Err):
            return steps

        self._console.print("Review the release then execute:")
        self._console.print("git-release send", Style.BOLD)
        return Ok(version)

    def send(self) -> Result[None, ReleaseError]:
        """Push develop, then master and tags, and return to develop."""
        cfg = self._config
        self._console.header("Send")
        result = self._run_steps(
            [
                partial(self._repo.checkout, cfg.develop),
                partial(self._repo.pull, cfg.remote, cfg.develop),
                partial(self._repo.push, cfg.remote, cfg.develop),
                partial(self._repo.checkout, cfg.master),
                partial(self._repo.pull, cfg.remote, cfg.master),
                partial(self._repo.push_tags, cfg.remote),
                partial(self._repo.push, cfg.remote, cfg.master),
                partial(self._repo.checkout, cfg.develop),
            ]
        )
        if isinstance(result, Ok):
            self._console.success(f"pushed {cfg.develop}, {cfg.master} and tags to {cfg.remote}")
        return result

    def revert(self) -> Result[str, ReleaseError]:
        """Undo the latest local release; returns the removed version.

        Hard-resets develop and master to the remote, so any unpushed local
        commit on either branch is lost.
        """
        current = self._history.current()
        if isinstance(current, Err):
            return Err(ReleaseError.from_git(current.error))
        if current.value is None:
            return Err(
                ReleaseError(
                    kind="nothing_to_revert",
                    message="no release tag found",
                )
            )

        version = str(current.value)
        cfg = self._config
        self._console.header(f"Revert release {version}")
        self._console.warning(
            f"resetting {cfg.develop} and {cfg.master} to {cfg.remote}; unpushed work is lost"
        )

        steps: list[Step] = [
            partial(self._repo.checkout, cfg.develop),
            partial(self._repo.reset_hard, f"{cfg.remote}/{cfg.develop}"),
            partial(self._repo.checkout, cfg.master),
            partial(self._repo.reset_hard, f"{cfg.remote}/{cfg.master}"),
        ]
        branch = cfg.release_branch(version)
        # git flow release finish normally removes the branch already
        if self._repo.has_branch(branch):
            steps.append(partial(self._repo.delete_branch, branch))
        steps.append(partial(self._repo.delete_tag, version))

        result = self._run_steps(steps)
        if isinstance(result, Err):
            return result

        prepared = self.prepare()
        if isinstance(prepared, Err):
            return prepared
        return Ok(version)

    def deploy(
        self, kind_or_version: str = DEFAULT_BUMP, *, send: bool = False
    ) -> Result[str, ReleaseError]:
        """prepare -> issues -> create -> optional send."""
        prepared = self.prepare()
        if isinstance(prepared, Err):
            return prepared

        self._console.header("Issues")
        report = self.report_issues()
        if isinstance(report, Err):
            return report

        created = self.create(kind_or_version)
        if isinstance(created, Err) or not send:
            return created

        sent = self.send()
        if isinstance(sent, Err):
            return sent
        return created

    def _run_steps(self, steps: Iterable[Step]) -> Result[None, ReleaseError]:
        for step in steps:
            result = step()
            if isinstance(result, Err):
                return Err(ReleaseError.from_git(result.error))
        return Ok(None)
