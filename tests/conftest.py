"""Shared pytest fixtures for pathgate tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pathgate.environment import Environment


@pytest.fixture()
def home(tmp_path: Path) -> Path:
	"""Empty home directory under tmp_path."""
	home_dir = tmp_path / "home"
	home_dir.mkdir()
	return home_dir


@pytest.fixture()
def repos(tmp_path: Path) -> Path:
	"""An existing repository root directory."""
	root = tmp_path / "repos"
	root.mkdir()
	return root


@pytest.fixture(autouse=True)
def _clear_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.delenv("PATHGATE_HOME", raising=False)
	monkeypatch.delenv("PATHGATE_PATH_REPO", raising=False)


@pytest.fixture()
def make_environment(home: Path) -> Callable[..., Environment]:
	"""Factory for an Environment rooted at the home fixture, overridable via kwargs."""
	def _make(**overrides: Any) -> Environment:
		defaults: dict[str, Any] = {
			"home": home,
			"data_dirs": [home / "data1", home / "data2"],
		}
		defaults.update(overrides)
		return Environment(**defaults)
	return _make
