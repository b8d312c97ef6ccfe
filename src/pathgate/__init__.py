"""Whitelisted resolution of repository paths, URLs and config resources."""

from __future__ import annotations

from pathgate.environment import Environment
from pathgate.path_security import CanonicalPath, WhitelistPathResolver
from pathgate.repo_url import ArchiveURL, FileURL, WhitelistURLResolver, parse_repo_url
from pathgate.resources import ResourceLocator

__all__ = [
	"ArchiveURL",
	"CanonicalPath",
	"Environment",
	"FileURL",
	"ResourceLocator",
	"WhitelistPathResolver",
	"WhitelistURLResolver",
	"parse_repo_url",
]
