"""Helpers for reading a mounted component's props and state."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from typing import Any, TypeVar

from pulse_props.decode import DecoderConfig, unmarshal_struct
from pulse_props.errors import HostJSONError
from pulse_props.host import HostObject, host_json_parse

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _component_map(this: HostObject, member: str) -> Mapping[str, Any]:
	value = this.get(member).interface()
	if not isinstance(value, Mapping):
		raise TypeError(
			f"Component {member} must be a map, got {type(value).__name__}"
		)
	return value


def unmarshal_props(
	this: HostObject, dest: T, *, config: DecoderConfig | None = None
) -> T:
	"""Decode the component's current ``props`` into ``dest``."""
	return unmarshal_struct(_component_map(this, "props"), dest, config=config)


def unmarshal_state(
	this: HostObject, dest: T, *, config: DecoderConfig | None = None
) -> T:
	"""Decode the component's current ``state`` into ``dest``."""
	return unmarshal_struct(_component_map(this, "state"), dest, config=config)


def _deprecated(old: str, new: str) -> None:
	warnings.warn(
		f"{old}() is deprecated, use {new}() instead",
		DeprecationWarning,
		stacklevel=3,
	)


def hydrate_props(this: HostObject, dest: T) -> T:
	_deprecated("hydrate_props", "unmarshal_props")
	return unmarshal_props(this, dest)


def hydrate_state(this: HostObject, dest: T) -> T:
	_deprecated("hydrate_state", "unmarshal_state")
	return unmarshal_state(this, dest)


def json_unmarshal(text: str) -> HostObject:
	"""Parse ``text`` with the host's JSON parser.

	The result can be fed to ``unmarshal_struct`` via ``.interface()``.
	"""
	obj = host_json_parse(text)
	if obj.is_null:
		logger.debug("JSON document parsed to null")
		raise HostJSONError("json_unmarshal: document parsed to null")
	return obj


__all__ = [
	"hydrate_props",
	"hydrate_state",
	"json_unmarshal",
	"unmarshal_props",
	"unmarshal_state",
]
