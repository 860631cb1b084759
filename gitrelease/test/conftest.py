from __future__ import annotations

import pytest

from gitrelease.cli.context import REPO_ENV, VERBOSE_ENV


@pytest.fixture(autouse=True)
def _clean_cli_env(monkeypatch: pytest.MonkeyPatch) -> None:  # pyright: ignore[reportUnusedFunction]
    # The CLI callback exports options through the environment; setting the
    # variables first makes monkeypatch restore them after each test.
    for name in (REPO_ENV, VERBOSE_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
