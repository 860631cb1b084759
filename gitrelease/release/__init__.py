"""Release domain: versions, history, ticket ids, workflow."""

from gitrelease.release.errors import ReleaseError
from gitrelease.release.history import ReleaseHistory
from gitrelease.release.issues import extract_issues, issue_regex
from gitrelease.release.ranges import RangeSelection, resolve_range
from gitrelease.release.semver import BumpKind, Version, next_version, parse_version
from gitrelease.release.service import IssueReport, ReleaseService, VersionControl

__all__ = [
    "BumpKind",
    "IssueReport",
    "RangeSelection",
    "ReleaseError",
    "ReleaseHistory",
    "ReleaseService",
    "Version",
    "VersionControl",
    "extract_issues",
    "issue_regex",
    "next_version",
    "parse_version",
    "resolve_range",
]
