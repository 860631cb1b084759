"""Ticket ids referenced from commit subjects.

With the default prefix the strict pattern is `tkt[-_]?[0-9]+`. The legacy
pattern (`tkt` followed by anything up to whitespace, `:`, `-`, `'` or `)`)
is kept only as an opt-in mode for repositories whose history relies on it.
Separators are preserved, so `TKT-42` and `tkt_42` are two different ids.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from gitrelease.core.config import IssuePatternMode


def issue_regex(prefix: str, mode: IssuePatternMode = "strict") -> re.Pattern[str]:
    escaped = re.escape(prefix)
    if mode == "legacy":
        return re.compile(rf"{escaped}[^:\s\-')]+", re.IGNORECASE)
    return re.compile(rf"{escaped}[-_]?[0-9]+", re.IGNORECASE)


def extract_issues(subjects: Iterable[str], pattern: re.Pattern[str]) -> tuple[str, ...]:
    """Unique, lower-cased, sorted ids found in `subjects`."""
    found: set[str] = set()
    for subject in subjects:
        found.update(m.group(0).lower() for m in pattern.finditer(subject))
    return tuple(sorted(found))
