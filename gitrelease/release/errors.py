"""Error payload for release commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from gitrelease.git.repository import GitError

ReleaseErrorKind = Literal[
    "invalid_input",
    "nothing_to_revert",
    "git_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    # git's exit status when the error comes from a git command
    returncode: int | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message

    @classmethod
    def from_git(cls, error: GitError) -> ReleaseError:
        return cls(
            kind="git_failed",
            message=f"git {error.command}: {error.message}",
            returncode=error.returncode,
        )
