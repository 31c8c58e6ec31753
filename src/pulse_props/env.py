from __future__ import annotations

import os

ENV_PULSE_PROPS_TAG = "PULSE_PROPS_TAG"

DEFAULT_TAG_NAME = "react"


def default_tag_name() -> str:
	"""Tag name used to read field directives when none is passed explicitly.

	Read from ``PULSE_PROPS_TAG`` on every call so tests and embedding hosts
	can change it without reloading the module.
	"""
	value = os.environ.get(ENV_PULSE_PROPS_TAG)
	if value is None or not value.strip():
		return DEFAULT_TAG_NAME
	return value.strip()


def resolve_tag_name(tag_name: str | None) -> str:
	if tag_name is None:
		return default_tag_name()
	return tag_name


__all__ = [
	"DEFAULT_TAG_NAME",
	"ENV_PULSE_PROPS_TAG",
	"default_tag_name",
	"resolve_tag_name",
]
