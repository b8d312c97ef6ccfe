"""TOML configuration loader for pathgate."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pathgate.models import PathSettingsSchema

DEFAULT_CONFIG_NAME = "pathgate.toml"
DEFAULT_CONFIG_TEMPLATE = DEFAULT_CONFIG_NAME + ".example"

ENV_HOME = "PATHGATE_HOME"
ENV_PATH_REPO = "PATHGATE_PATH_REPO"


def _expand(path: str) -> str:
	return os.path.expanduser(path) if path else path


@dataclass
class PathConfig:
	"""Directory layout settings. Empty values fall back to home-relative defaults."""

	home: str = ""
	conf: str = ""
	data: list[str] = field(default_factory=list)
	logs: str = ""
	plugins: str = ""
	repo: list[str] = field(default_factory=list)  # empty disables repository resolution


@dataclass
class PathgateConfig:
	"""Top-level pathgate configuration."""

	path: PathConfig = field(default_factory=PathConfig)


def _split_env_list(value: str) -> list[str]:
	return [item.strip() for item in value.split(",") if item.strip()]


def _build_path(data: dict[str, Any]) -> PathConfig:
	try:
		schema = PathSettingsSchema.model_validate(data)
	except ValidationError as exc:
		raise ValueError(f"Invalid [path] settings: {exc.error_count()} error(s)") from exc

	pc = PathConfig()
	for key in ("home", "conf", "logs", "plugins"):
		setattr(pc, key, _expand(getattr(schema, key)))
	pc.data = [_expand(d) for d in schema.data]
	pc.repo = [_expand(r) for r in schema.repo]
	return pc


def _apply_env_overrides(pc: PathConfig) -> None:
	home = os.environ.get(ENV_HOME, "")
	if home:
		pc.home = _expand(home)
	repo = os.environ.get(ENV_PATH_REPO)
	if repo is not None:
		pc.repo = [_expand(r) for r in _split_env_list(repo)]


def load_config(path: str | Path) -> PathgateConfig:
	"""Load a pathgate.toml config file.

	Args:
		path: Path to the TOML config file.

	Returns:
		Parsed PathgateConfig, with PATHGATE_HOME and PATHGATE_PATH_REPO
		applied on top of the file values.

	Raises:
		FileNotFoundError: If config file doesn't exist.
		tomllib.TOMLDecodeError: If config is invalid TOML.
		ValueError: If the [path] table fails schema validation.
	"""
	config_path = Path(path)
	if not config_path.exists():
		raise FileNotFoundError(f"Config file not found: {config_path}")

	with open(config_path, "rb") as f:
		data = tomllib.load(f)

	pg = PathgateConfig()
	if "path" in data:
		pg.path = _build_path(data["path"])
	_apply_env_overrides(pg.path)
	return pg


def validate_config(config: PathgateConfig) -> list[tuple[str, str]]:
	"""Perform semantic validation of a loaded PathgateConfig.

	Returns a list of (level, message) tuples where level is 'error' or 'warning'.
	"""
	issues: list[tuple[str, str]] = []
	pc = config.path

	# 1. home is required
	if not pc.home:
		issues.append(("error", "path.home is not set"))

	# 2. repository roots
	if not pc.repo:
		issues.append(("warning", "path.repo is empty; repository resolution is disabled"))
	for root in pc.repo:
		root_path = Path(root)
		if not root_path.is_absolute():
			issues.append(("warning", f"path.repo entry is relative: {root}"))
		elif not root_path.exists():
			issues.append(("warning", f"path.repo entry does not exist: {root}"))

	# 3. data directories writable
	for data_dir in pc.data:
		data_path = Path(data_dir)
		if data_path.exists() and not os.access(data_path, os.W_OK):
			issues.append(("warning", f"path.data entry is not writable: {data_path}"))

	return issues
