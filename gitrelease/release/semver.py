from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, get_args


BumpKind = Literal["major", "minor", "patch"]
DEFAULT_BUMP: BumpKind = "minor"
BUMP_KINDS: tuple[BumpKind, ...] = get_args(BumpKind)

# Matches the tag names released by this tool: N.N or N.N.N
VERSION_PATTERN = r"[0-9]+\.[0-9]+(?:\.[0-9]+)?"
_VERSION_RE = re.compile(rf"^{VERSION_PATTERN}$")


@dataclass(frozen=True, slots=True)
class Version:
    """A release version; `patch` is None for two-component versions."""

    major: int
    minor: int
    patch: int | None = None

    def __str__(self) -> str:
        if self.patch is None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump(self, kind: BumpKind) -> Version:
        match kind:
            case "major":
                return Version(self.major + 1, 0, 0)
            case "minor":
                return Version(self.major, self.minor + 1, 0)
            case "patch":
                # A two-component version gets its first patch, not an increment.
                if self.patch is None:
                    return Version(self.major, self.minor, 1)
                return Version(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


INITIAL_VERSION = Version(0, 0, 0)


def parse_version(text: str) -> Version | None:
    """Parse `N.N` or `N.N.N`; anything else is reported as absent."""
    s = text.strip()
    if not _VERSION_RE.match(s):
        return None
    parts = [int(p) for p in s.split(".")]
    if len(parts) == 2:
        return Version(parts[0], parts[1])
    return Version(parts[0], parts[1], parts[2])


def parse_bump(text: str) -> BumpKind | None:
    for kind in BUMP_KINDS:
        if text == kind:
            return kind
    return None


def next_version(current: Version | None, kind: BumpKind = DEFAULT_BUMP) -> Version:
    """Version that follows `current`; 0.0.0 when nothing has been released."""
    if current is None:
        return INITIAL_VERSION
    return current.bump(kind)
