"""Resolution of the two points bounding an `issues` query.

Points are commits, branches or tags. The literal `previous` switches to
release addressing: the second argument then becomes a backward offset and
the range spans one whole release, e.g. `previous 0` is the latest release
and `previous 1` the one before it. An offset past the oldest release selects
nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from gitrelease.core.config import ReleaseConfig
from gitrelease.core.result import Err, Ok, Result
from gitrelease.release.errors import ReleaseError
from gitrelease.release.history import ReleaseHistory

PREVIOUS_POINT = "previous"


@dataclass(frozen=True, slots=True)
class RangeSelection:
    """Commits reachable from `ref_a` but not from `ref_b`.

    `ref_b` is None when there is no older boundary (nothing released before
    `ref_a`), in which case the whole history of `ref_a` is selected.
    """

    ref_a: str
    ref_b: str | None = None

    @property
    def log_range(self) -> str:
        if self.ref_b is None:
            return self.ref_a
        return f"{self.ref_b}..{self.ref_a}"

    @property
    def header(self) -> str:
        if self.ref_b is None:
            return self.ref_a
        return f"{self.ref_b}/{self.ref_a}"


def resolve_range(
    history: ReleaseHistory,
    point_a: str | None = None,
    point_b: str | None = None,
    *,
    config: ReleaseConfig,
) -> Result[RangeSelection | None, ReleaseError]:
    """Turn CLI points into concrete refs.

    Defaults are the develop branch and the current release. The endpoints
    are not reordered; `git log B..A` is directional and callers pass the
    newer point first. None means there is no such release to look at.
    """
    if point_a == PREVIOUS_POINT:
        return _resolve_previous(history, point_b)

    ref_a = point_a or config.develop
    if point_b:
        return Ok(RangeSelection(ref_a=ref_a, ref_b=point_b))

    current = history.current()
    if isinstance(current, Err):
        return Err(ReleaseError.from_git(current.error))
    ref_b = str(current.value) if current.value is not None else None
    return Ok(RangeSelection(ref_a=ref_a, ref_b=ref_b))


def _resolve_previous(
    history: ReleaseHistory, offset_arg: str | None
) -> Result[RangeSelection | None, ReleaseError]:
    offset = _parse_offset(offset_arg)
    if offset is None:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"invalid release offset: {offset_arg!r}",
                hint="use a non-negative integer, e.g. `issues previous 1`",
            )
        )

    versions = history.list_versions(offset + 2)
    if isinstance(versions, Err):
        return Err(ReleaseError.from_git(versions.error))

    found = versions.value
    if len(found) <= offset:
        return Ok(None)

    newer = str(found[offset])
    older = str(found[offset + 1]) if len(found) > offset + 1 else None
    return Ok(RangeSelection(ref_a=newer, ref_b=older))


def _parse_offset(text: str | None) -> int | None:
    if text is None or text == "":
        return 0
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
