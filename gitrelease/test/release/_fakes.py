from __future__ import annotations

from dataclasses import dataclass, field

from gitrelease.core.result import Err, Ok, Result
from gitrelease.git.repository import GitError


def decorations(*tags: str) -> str:
    """`git log --format=%D` output with one tagged commit per tag, newest first."""
    lines = ["HEAD -> develop, origin/develop", ""]
    for tag in tags:
        lines.append(f"tag: {tag}")
        lines.append("")
    return "\n".join(lines) + "\n"


@dataclass
class FakeRepository:
    """In-memory stand-in for Repository.

    Side-effecting calls are recorded as git command lines (without `git`);
    any command listed in `failing` returns an error with exit code 128.
    """

    log: str = ""
    subjects: dict[str, str] = field(default_factory=dict)
    branches: set[str] = field(default_factory=set)
    failing: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)
    log_fails: bool = False

    def log_decorations(self) -> Result[str, GitError]:
        if self.log_fails:
            return Err(GitError(command="log --format=%D", message="fatal: bad default revision"))
        return Ok(self.log)

    def log_subjects(self, revision_range: str) -> Result[str, GitError]:
        self.calls.append(f"log --format=%s {revision_range}")
        return Ok(self.subjects.get(revision_range, ""))

    def has_branch(self, name: str) -> bool:
        return name in self.branches

    def checkout(self, branch: str) -> Result[None, GitError]:
        return self._step(f"checkout {branch}")

    def pull(self, remote: str, branch: str) -> Result[None, GitError]:
        return self._step(f"pull {remote} {branch}")

    def fetch_tags(self, remote: str) -> Result[None, GitError]:
        return self._step(f"fetch {remote} --tags")

    def push(self, remote: str, branch: str) -> Result[None, GitError]:
        return self._step(f"push {remote} {branch}")

    def push_tags(self, remote: str) -> Result[None, GitError]:
        return self._step(f"push {remote} --tags")

    def reset_hard(self, ref: str) -> Result[None, GitError]:
        return self._step(f"reset --hard {ref}")

    def delete_branch(self, name: str) -> Result[None, GitError]:
        return self._step(f"branch -D {name}")

    def delete_tag(self, name: str) -> Result[None, GitError]:
        return self._step(f"tag -d {name}")

    def release_start(self, version: str) -> Result[None, GitError]:
        return self._step(f"flow release start {version}")

    def release_finish(self, version: str) -> Result[None, GitError]:
        return self._step(f"flow release finish {version}")

    def _step(self, command: str) -> Result[None, GitError]:
        self.calls.append(command)
        if command in self.failing:
            return Err(GitError(command=command, message="fatal: simulated failure", returncode=128))
        return Ok(None)
