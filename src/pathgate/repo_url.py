"""Whitelist resolution for file: and jar:file: repository URLs."""

from __future__ import annotations

import logging
import urllib.parse
from dataclasses import dataclass

from pathgate.path_security import WhitelistPathResolver

logger = logging.getLogger(__name__)

ARCHIVE_SEPARATOR = "!/"


@dataclass(frozen=True)
class FileURL:
	"""A local file reference: file:///path or file:/path."""

	path: str


@dataclass(frozen=True)
class ArchiveURL:
	"""An entry inside an archive that is itself referenced by a file URL.

	entry keeps the leading '!/' so it can be reattached verbatim.
	"""

	inner: FileURL
	entry: str


RepoURL = FileURL | ArchiveURL


def _parse_file_url(text: str) -> FileURL | None:
	try:
		parts = urllib.parse.urlsplit(text)
	except ValueError:
		return None
	if parts.scheme.lower() != "file":
		return None
	# Any authority (host, user-info, even "localhost") is refused.
	if parts.netloc:
		return None
	if parts.query or parts.fragment:
		return None
	path = urllib.parse.unquote(parts.path)
	if not path.startswith("/"):
		return None
	return FileURL(path=path)


def parse_repo_url(candidate: str) -> RepoURL | None:
	"""Parse candidate into one of the accepted URL shapes.

	Returns None for any other scheme, for file URLs with an authority, and
	for archive URLs whose inner reference is not a plain file URL.
	"""
	scheme, sep, rest = candidate.partition(":")
	if not sep:
		return None
	scheme = scheme.lower()

	if scheme == "file":
		return _parse_file_url(candidate)
	if scheme == "jar":
		inner_text, bang, tail = rest.partition(ARCHIVE_SEPARATOR)
		if not bang:
			return None
		inner = _parse_file_url(inner_text)
		if inner is None:
			return None
		return ArchiveURL(inner=inner, entry=ARCHIVE_SEPARATOR + tail)
	return None


class WhitelistURLResolver:
	"""Apply WhitelistPathResolver to the path embedded in a repository URL."""

	def __init__(self, path_resolver: WhitelistPathResolver) -> None:
		self._paths = path_resolver

	def resolve(self, candidate: str) -> str | None:
		"""Return candidate rebuilt around its canonical path, or None.

		The archive entry suffix of a jar: URL is preserved unchanged.
		"""
		parsed = parse_repo_url(candidate)
		if parsed is None:
			logger.debug("Repository URL rejected: malformed-reference")
			return None

		file_ref = parsed.inner if isinstance(parsed, ArchiveURL) else parsed
		resolved = self._paths.resolve(file_ref.path)
		if resolved is None:
			return None

		if isinstance(parsed, ArchiveURL):
			return f"jar:{resolved.as_uri()}{parsed.entry}"
		return resolved.as_uri()
