"""Path traversal protection for repository locations."""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanonicalPath:
	"""An absolute path with '.', '..' and symlinks already resolved.

	Only build these through CanonicalPath.of() so that containment checks
	never see a raw, caller-spelled path.
	"""

	path: Path

	def __post_init__(self) -> None:
		if not self.path.is_absolute() or ".." in self.path.parts:
			raise ValueError("CanonicalPath requires an absolute path without '..' segments")

	@classmethod
	def of(cls, raw: str | os.PathLike[str], base: Path | None = None) -> CanonicalPath:
		"""Canonicalize raw, joining it onto base first when it is relative.

		Components that do not exist yet are normalized lexically; symlinks in
		the existing prefix are followed.

		Raises:
			ValueError: If raw is empty or contains a null byte.
			OSError: If the filesystem lookup fails, including a symlink loop.
			RuntimeError: On a symlink loop detected inside Path.resolve().
		"""
		text = os.fspath(raw)
		if not text:
			raise ValueError("Path canonicalization failed: empty path")
		if "\x00" in text:
			raise ValueError("Path canonicalization failed: invalid path")

		candidate = Path(text)
		if not candidate.is_absolute():
			candidate = (base if base is not None else Path.cwd()) / candidate
		resolved = candidate.resolve(strict=False)
		# Non-strict resolve may leave a looping link in place; stat exposes it.
		try:
			resolved.stat()
		except OSError as exc:
			if exc.errno == errno.ELOOP:
				raise
		return cls(resolved)

	def contains(self, other: CanonicalPath) -> bool:
		"""True if other is this path or lies beneath it, compared per component."""
		return other.path == self.path or self.path in other.path.parents

	def as_uri(self) -> str:
		return self.path.as_uri()

	def __fspath__(self) -> str:
		return str(self.path)

	def __str__(self) -> str:
		return str(self.path)


class WhitelistPathResolver:
	"""Resolve caller-supplied paths, accepting only those inside configured roots.

	Roots are canonicalized once at construction. An empty root list disables
	resolution entirely.
	"""

	def __init__(self, roots: Iterable[str | os.PathLike[str]]) -> None:
		canonical: list[CanonicalPath] = []
		for root in roots:
			text = os.fspath(root)
			if not text.strip():
				continue
			try:
				canonical.append(CanonicalPath.of(os.path.expanduser(text)))
			except (OSError, RuntimeError, ValueError) as exc:
				raise ValueError("Repository root could not be canonicalized") from exc
		self._roots: tuple[CanonicalPath, ...] = tuple(canonical)
		if self._roots:
			logger.info("Repository roots: %s", ", ".join(str(r) for r in self._roots))

	@property
	def roots(self) -> tuple[CanonicalPath, ...]:
		return self._roots

	def resolve(self, candidate: str) -> CanonicalPath | None:
		"""Return the canonical form of candidate if some root contains it, else None.

		Relative candidates are resolved against each root in turn. The reason
		for a rejection is only logged, never returned.
		"""
		if not self._roots:
			logger.debug("Repository path rejected: not-configured")
			return None
		if not candidate or "\x00" in candidate:
			logger.debug("Repository path rejected: malformed-reference")
			return None

		if Path(candidate).is_absolute():
			bases: tuple[Path | None, ...] = (None,)
		else:
			bases = tuple(root.path for root in self._roots)

		for base in bases:
			try:
				resolved = CanonicalPath.of(candidate, base=base)
			except (OSError, RuntimeError, ValueError):
				logger.debug("Repository path rejected: canonicalization-failure")
				return None
			if self._contained(resolved):
				return resolved

		logger.debug("Repository path rejected: not-contained")
		return None

	def _contained(self, path: CanonicalPath) -> bool:
		return any(root.contains(path) for root in self._roots)
