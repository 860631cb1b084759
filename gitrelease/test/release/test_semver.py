from __future__ import annotations

import pytest

from gitrelease.release.semver import (
    INITIAL_VERSION,
    Version,
    next_version,
    parse_bump,
    parse_version,
)


class TestParseVersion:
    def test_three_components(self) -> None:
        assert parse_version("1.2.3") == Version(1, 2, 3)
        assert parse_version("10.20.30") == Version(10, 20, 30)

    def test_two_components_have_no_patch(self) -> None:
        parsed = parse_version("1.2")
        assert parsed == Version(1, 2)
        assert parsed is not None and parsed.patch is None

    @pytest.mark.parametrize("text", ["0.0", "0.0.0", "1.2", "1.2.3", "007.1.22"])
    def test_roundtrip_numeric_components(self, text: str) -> None:
        parsed = parse_version(text)
        assert parsed is not None
        components = tuple(int(p) for p in text.split("."))
        rendered = (parsed.major, parsed.minor) + (() if parsed.patch is None else (parsed.patch,))
        assert rendered == components

    def test_strips_whitespace(self) -> None:
        assert parse_version(" 1.0.0\n") == Version(1, 0, 0)

    @pytest.mark.parametrize(
        "text",
        ["", "1", "1.", "1.2.", "a.b", "1.x.3", "v1.2.3", "1.2.3.4", "1.2.3-beta", "-1.2"],
    )
    def test_rejects_non_versions(self, text: str) -> None:
        assert parse_version(text) is None


class TestVersionStr:
    def test_three_components(self) -> None:
        assert str(Version(1, 2, 3)) == "1.2.3"

    def test_two_components(self) -> None:
        assert str(Version(1, 2)) == "1.2"

    def test_frozen(self) -> None:
        v = Version(1, 2, 3)
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore[misc]


class TestNextVersion:
    def test_no_release_is_zero_for_every_kind(self) -> None:
        assert next_version(None) == INITIAL_VERSION
        assert next_version(None, "major") == Version(0, 0, 0)
        assert next_version(None, "minor") == Version(0, 0, 0)
        assert next_version(None, "patch") == Version(0, 0, 0)

    def test_patch(self) -> None:
        assert next_version(Version(1, 2, 3), "patch") == Version(1, 2, 4)

    def test_patch_on_two_components_starts_at_one(self) -> None:
        assert next_version(Version(1, 2), "patch") == Version(1, 2, 1)

    def test_minor(self) -> None:
        assert next_version(Version(1, 2, 3), "minor") == Version(1, 3, 0)

    def test_minor_on_two_components(self) -> None:
        assert str(next_version(Version(1, 2), "minor")) == "1.3.0"

    def test_major(self) -> None:
        assert next_version(Version(1, 9, 9), "major") == Version(2, 0, 0)

    def test_default_kind_is_minor(self) -> None:
        assert next_version(Version(0, 1, 5)) == Version(0, 2, 0)

    def test_result_always_renders_three_components(self) -> None:
        for kind in ("major", "minor", "patch"):
            assert str(next_version(Version(3, 4), kind)).count(".") == 2

    def test_unknown_kind_is_a_bug(self) -> None:
        with pytest.raises(AssertionError):
            Version(1, 0, 0).bump("huge")  # type: ignore[arg-type]


class TestParseBump:
    def test_known_kinds(self) -> None:
        assert parse_bump("major") == "major"
        assert parse_bump("minor") == "minor"
        assert parse_bump("patch") == "patch"

    def test_anything_else(self) -> None:
        assert parse_bump("Major") is None
        assert parse_bump("1.2.3") is None
        assert parse_bump("") is None
