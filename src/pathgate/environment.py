"""Process environment: directory layout plus whitelisted repository resolution."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from importlib.resources.abc import Traversable
from pathlib import Path

from pathgate.config import DEFAULT_CONFIG_NAME, PathgateConfig
from pathgate.path_security import CanonicalPath, WhitelistPathResolver
from pathgate.repo_url import WhitelistURLResolver
from pathgate.resources import ResourceLocator

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_PACKAGES = ("pathgate.defaults",)


def _absolute(path: str | os.PathLike[str]) -> Path:
	return Path(os.path.expanduser(os.fspath(path))).absolute()


class Environment:
	"""Resolved directory layout for one pathgate process.

	Everything is computed at construction and never mutated afterwards, so
	a single instance can be shared freely between threads.
	"""

	def __init__(
		self,
		home: str | os.PathLike[str],
		data_dirs: Iterable[str | os.PathLike[str]] = (),
		repo_roots: Iterable[str | os.PathLike[str]] = (),
		config_dir: str | os.PathLike[str] | None = None,
		logs_dir: str | os.PathLike[str] | None = None,
		plugins_dir: str | os.PathLike[str] | None = None,
	) -> None:
		if not os.fspath(home):
			raise ValueError("Environment requires a home directory")
		self._home = _absolute(home)
		self._config_dir = _absolute(config_dir) if config_dir else self._home / "config"
		self._logs_dir = _absolute(logs_dir) if logs_dir else self._home / "logs"
		self._plugins_dir = _absolute(plugins_dir) if plugins_dir else self._home / "plugins"

		data = tuple(_absolute(d) for d in data_dirs)
		self._data_dirs = data if data else (self._home / "data",)

		self._repo_paths = WhitelistPathResolver(repo_roots)
		self._repo_urls = WhitelistURLResolver(self._repo_paths)
		self._resources = ResourceLocator(
			packages=DEFAULT_RESOURCE_PACKAGES,
			directories=(self._config_dir, self._home),
		)
		logger.debug("Environment home=%s config=%s", self._home, self._config_dir)

	@classmethod
	def from_config(cls, config: PathgateConfig) -> Environment:
		"""Build an environment from a loaded configuration."""
		pc = config.path
		return cls(
			home=pc.home,
			data_dirs=pc.data,
			repo_roots=pc.repo,
			config_dir=pc.conf or None,
			logs_dir=pc.logs or None,
			plugins_dir=pc.plugins or None,
		)

	@property
	def home(self) -> Path:
		return self._home

	@property
	def config_dir(self) -> Path:
		return self._config_dir

	@property
	def data_dirs(self) -> tuple[Path, ...]:
		return self._data_dirs

	@property
	def logs_dir(self) -> Path:
		return self._logs_dir

	@property
	def plugins_dir(self) -> Path:
		return self._plugins_dir

	@property
	def config_file(self) -> Path:
		"""Location of the user's pathgate.toml inside the config directory."""
		return self._config_dir / DEFAULT_CONFIG_NAME

	@property
	def repo_roots(self) -> tuple[CanonicalPath, ...]:
		"""Canonical repository roots; empty when repositories are disabled."""
		return self._repo_paths.roots

	def data_with_namespace_dirs(self, namespace: str) -> tuple[Path, ...]:
		"""Per-namespace subdirectories of every data directory."""
		return tuple(d / namespace for d in self._data_dirs)

	def resolve_config(self, name: str) -> Traversable | None:
		"""Find a configuration resource: packaged defaults first, then config dir, then home."""
		return self._resources.locate(name)

	def resolve_repo_path(self, candidate: str) -> CanonicalPath | None:
		"""Canonical path for candidate if it lies within a repository root, else None."""
		return self._repo_paths.resolve(candidate)

	def resolve_repo_url(self, candidate: str) -> str | None:
		"""Canonical URL for a file: or jar:file: candidate within a repository root, else None."""
		return self._repo_urls.resolve(candidate)
