"""Release history read from tag decorations in the commit log.

Nothing is cached: tags may change between two commands, so every call
reads the log again.
"""

from __future__ import annotations

import re
from typing import Protocol

from gitrelease.core.result import Err, Ok, Result
from gitrelease.git.repository import GitError
from gitrelease.release.semver import VERSION_PATTERN, Version, parse_version

# `%D` lists refs separated by ", "; the lookahead rejects tags that only
# start with a version (e.g. 1.0.0-rc1).
_TAG_RE = re.compile(rf"tag: ({VERSION_PATTERN})(?=,|\s*$)")


class DecoratedLog(Protocol):
    def log_decorations(self) -> Result[str, GitError]: ...


def parse_tagged_versions(decorations: str) -> list[Version]:
    """Versions of every release tag in `git log --format=%D` output, in log order."""
    versions: list[Version] = []
    for line in decorations.splitlines():
        for match in _TAG_RE.finditer(line):
            version = parse_version(match.group(1))
            if version is not None:
                versions.append(version)
    return versions


class ReleaseHistory:
    """Released versions, newest first."""

    def __init__(self, repo: DecoratedLog) -> None:
        self._repo = repo

    def list_versions(self, count: int = 1) -> Result[tuple[Version, ...], GitError]:
        """Return up to `count` most recent versions."""
        if count < 1:
            return Ok(())
        result = self._repo.log_decorations()
        if isinstance(result, Err):
            return result
        return Ok(tuple(parse_tagged_versions(result.value)[:count]))

    def current(self) -> Result[Version | None, GitError]:
        """The latest released version, None before the first release."""
        return self.list_versions(1).map(lambda versions: versions[0] if versions else None)

    def previous(self, offset: int = 1) -> Result[Version | None, GitError]:
        """The version `offset` releases behind the latest one.

        `previous(0)` is the latest release. None when history is not that deep.
        """
        if offset < 0:
            return Ok(None)
        wanted = offset + 1
        return self.list_versions(wanted).map(
            lambda versions: versions[-1] if len(versions) == wanted else None
        )
