"""Schemas for validating raw pathgate configuration tables."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class PathSettingsSchema(BaseModel, extra="ignore"):
	"""Pydantic schema for the [path] table of pathgate.toml."""

	home: str = ""
	conf: str = ""
	data: list[str] = []
	logs: str = ""
	plugins: str = ""
	repo: list[str] = []

	@field_validator("data", "repo", mode="before")
	@classmethod
	def split_comma_list(cls, value: object) -> object:
		# Both a TOML array and a "a, b" string are accepted.
		if isinstance(value, str):
			return value.split(",")
		return value

	@field_validator("data", "repo")
	@classmethod
	def strip_entries(cls, value: list[str]) -> list[str]:
		return [item.strip() for item in value if item.strip()]
