"""Tests for gitrelease.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitrelease.core.config import (
    ConfigError,
    ReleaseConfig,
    load_config,
    load_config_or_default,
)
from gitrelease.core.result import Err, Ok


class TestReleaseConfig:
    """Test defaults and structure."""

    def test_defaults(self) -> None:
        config = ReleaseConfig()
        assert config.master == "master"
        assert config.develop == "develop"
        assert config.remote == "origin"
        assert config.issue_prefix == "tkt"
        assert config.issue_pattern == "strict"

    def test_release_branch(self) -> None:
        assert ReleaseConfig().release_branch("1.2.0") == "release/1.2.0"

    def test_frozen(self) -> None:
        config = ReleaseConfig()
        with pytest.raises(AttributeError):
            config.remote = "upstream"  # type: ignore[misc]

    def test_from_dict_empty(self) -> None:
        assert ReleaseConfig.from_dict({}) == ReleaseConfig()

    def test_from_dict_issues(self) -> None:
        config = ReleaseConfig.from_dict({"issues": {"prefix": "JIRA", "pattern": "legacy"}})
        assert config.issue_prefix == "JIRA"
        assert config.issue_pattern == "legacy"

    def test_from_dict_branches_are_not_configurable(self) -> None:
        config = ReleaseConfig.from_dict({"master": "main", "remote": "upstream"})
        assert config.master == "master"
        assert config.remote == "origin"

    def test_from_dict_unknown_pattern(self) -> None:
        with pytest.raises(ValueError, match="issues.pattern"):
            ReleaseConfig.from_dict({"issues": {"pattern": "fuzzy"}})


class TestLoadConfig:
    """Test TOML loading."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".git-release.toml"
        path.write_text('[issues]\nprefix = "bug"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.issue_prefix == "bug"
        assert result.value.issue_pattern == "strict"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / ".git-release.toml"
        path.write_text("[issues\nprefix =", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message
        assert result.error.path == path

    def test_invalid_pattern(self, tmp_path: Path) -> None:
        path = tmp_path / ".git-release.toml"
        path.write_text('[issues]\npattern = "fuzzy"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "Invalid config" in result.error.message


class TestLoadConfigOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / ".git-release.toml") == Ok(ReleaseConfig())

    def test_invalid_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / ".git-release.toml"
        path.write_text("not toml [", encoding="utf-8")

        assert isinstance(load_config_or_default(path), Err)
