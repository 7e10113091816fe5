"""Fixtures for tests that touch the config file location."""

from __future__ import annotations

from pathlib import Path

import pytest

import beatlist.config.paths as paths


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Make ``tmp_path`` the detected repository root, with no env override."""

    monkeypatch.setattr(paths, "_detect_repo_root", lambda _start=None: tmp_path)
    monkeypatch.delenv(paths.CONFIG_ENV_VAR, raising=False)
    return tmp_path
