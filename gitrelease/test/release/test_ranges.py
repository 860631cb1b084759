from __future__ import annotations

import pytest

from gitrelease.core.config import ReleaseConfig
from gitrelease.core.result import Err, Ok
from gitrelease.release.history import ReleaseHistory
from gitrelease.release.ranges import RangeSelection, resolve_range

from ._fakes import FakeRepository, decorations

CONFIG = ReleaseConfig()


def _history(*tags: str) -> ReleaseHistory:
    return ReleaseHistory(FakeRepository(log=decorations(*tags)))


class TestRangeSelection:
    def test_log_range_is_directional(self) -> None:
        selection = RangeSelection(ref_a="develop", ref_b="1.1.0")
        assert selection.log_range == "1.1.0..develop"
        assert selection.header == "1.1.0/develop"

    def test_open_range(self) -> None:
        selection = RangeSelection(ref_a="1.0.0")
        assert selection.log_range == "1.0.0"
        assert selection.header == "1.0.0"


class TestResolveRange:
    def test_defaults_to_develop_and_current_version(self) -> None:
        result = resolve_range(_history("1.1.0", "1.0.0"), config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="develop", ref_b="1.1.0"))

    def test_default_without_release_covers_all_of_develop(self) -> None:
        assert resolve_range(_history(), config=CONFIG) == Ok(RangeSelection(ref_a="develop"))

    def test_explicit_points_are_kept_in_order(self) -> None:
        result = resolve_range(_history("1.1.0"), "1.0.0", "feature/x", config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="1.0.0", ref_b="feature/x"))

    def test_only_point_a(self) -> None:
        result = resolve_range(_history("2.0.0"), "abc123", config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="abc123", ref_b="2.0.0"))

    def test_previous_zero_is_latest_release(self) -> None:
        history = _history("1.1.0", "1.0.0", "0.0.0")
        result = resolve_range(history, "previous", "0", config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="1.1.0", ref_b="1.0.0"))

        selection = result.unwrap()
        assert str(history.previous(0).unwrap()) == selection.ref_a
        assert str(history.previous(1).unwrap()) == selection.ref_b

    def test_previous_defaults_to_zero(self) -> None:
        result = resolve_range(_history("1.1.0", "1.0.0"), "previous", config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="1.1.0", ref_b="1.0.0"))

    def test_previous_offset(self) -> None:
        result = resolve_range(_history("1.1.0", "1.0.0", "0.0.0"), "previous", "1", config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="1.0.0", ref_b="0.0.0"))

    def test_previous_of_first_release_has_no_older_bound(self) -> None:
        result = resolve_range(_history("1.1.0", "1.0.0"), "previous", "1", config=CONFIG)
        assert result == Ok(RangeSelection(ref_a="1.0.0"))

    def test_previous_beyond_history_selects_nothing(self) -> None:
        result = resolve_range(_history("1.0.0"), "previous", "3", config=CONFIG)
        assert result == Ok(None)

    def test_previous_without_any_release_selects_nothing(self) -> None:
        result = resolve_range(_history(), "previous", config=CONFIG)
        assert result == Ok(None)

    @pytest.mark.parametrize("offset", ["x", "-1", "1.5", "²"])
    def test_previous_rejects_bad_offsets(self, offset: str) -> None:
        result = resolve_range(_history("1.0.0"), "previous", offset, config=CONFIG)
        assert isinstance(result, Err)
        assert result.error.kind == "invalid_input"

    def test_git_failure(self) -> None:
        history = ReleaseHistory(FakeRepository(log_fails=True))
        result = resolve_range(history, config=CONFIG)
        assert isinstance(result, Err)
        assert result.error.kind == "git_failed"

    def test_develop_name_comes_from_config(self) -> None:
        config = ReleaseConfig(develop="dev")
        assert resolve_range(_history(), config=config) == Ok(RangeSelection(ref_a="dev"))
