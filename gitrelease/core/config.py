"""Release configuration.

Branch and remote names are fixed constants. The only tunable part is how
ticket ids are recognised in commit subjects, read from an optional
`.git-release.toml` at the repository root:

    [issues]
    prefix = "tkt"
    pattern = "strict"   # or "legacy"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "DEVELOP_BRANCH",
    "MASTER_BRANCH",
    "RELEASE_BRANCH_PREFIX",
    "REMOTE",
    "ConfigError",
    "IssuePatternMode",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
]

MASTER_BRANCH = "master"
DEVELOP_BRANCH = "develop"
REMOTE = "origin"
# git-flow default prefix for release branches
RELEASE_BRANCH_PREFIX = "release/"

CONFIG_FILE_NAME = ".git-release.toml"
DEFAULT_ISSUE_PREFIX = "tkt"

IssuePatternMode = Literal["strict", "legacy"]
_PATTERN_MODES: tuple[IssuePatternMode, ...] = ("strict", "legacy")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Settings shared by every command of one invocation."""

    master: str = MASTER_BRANCH
    develop: str = DEVELOP_BRANCH
    remote: str = REMOTE
    release_branch_prefix: str = RELEASE_BRANCH_PREFIX
    issue_prefix: str = DEFAULT_ISSUE_PREFIX
    issue_pattern: IssuePatternMode = "strict"

    def release_branch(self, version: str) -> str:
        return f"{self.release_branch_prefix}{version}"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create a config from parsed TOML.

        Raises:
            ValueError: If `issues.pattern` is not a known mode.
        """
        issues: StrDict = get_table(data, "issues") or {}

        pattern = get_str(issues, "pattern") or "strict"
        if pattern not in _PATTERN_MODES:
            raise ValueError(
                f"issues.pattern must be one of {', '.join(_PATTERN_MODES)} (got {pattern!r})"
            )

        return cls(
            issue_prefix=get_str(issues, "prefix") or DEFAULT_ISSUE_PREFIX,
            issue_pattern=pattern,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load configuration from a TOML file.

    Args:
        path: Path to `.git-release.toml`

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseConfig.from_dict(result.value))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def load_config_or_default(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load config if the file exists, otherwise return the defaults.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(ReleaseConfig())
    return load_config(path)
