"""Locate configuration resources across packaged data and config directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

logger = logging.getLogger(__name__)


class ResourceLocator:
	"""First-match lookup of a resource name.

	Packaged resources (including ones inside a zip or wheel) are searched
	before plain directories; both in the order given. Names are trusted,
	developer-supplied strings, so no containment check is made here.
	"""

	def __init__(
		self,
		packages: Iterable[str] = (),
		directories: Iterable[str | Path] = (),
	) -> None:
		self.packages: tuple[str, ...] = tuple(packages)
		self.directories: tuple[Path, ...] = tuple(Path(d) for d in directories)

	def locate(self, name: str) -> Traversable | None:
		"""Return the first matching resource, or None if no location has it."""
		for package in self.packages:
			try:
				candidate = resources.files(package).joinpath(name)
			except ModuleNotFoundError:
				logger.debug("Resource package %s is not importable", package)
				continue
			if candidate.is_file():
				return candidate

		for directory in self.directories:
			candidate_path = directory / name
			if candidate_path.is_file():
				return candidate_path

		return None
