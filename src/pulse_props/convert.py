"""Record to props/state map conversion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pulse_props.errors import UnsupportedTypeError
from pulse_props.host import is_host_null, is_live_host_object
from pulse_props.html import inner_html_props
from pulse_props.schema import FieldDescriptor, is_record, record_schema
from pulse_props.sets import PropSet
from pulse_props.zero import is_empty

logger = logging.getLogger(__name__)


def to_map(value: Any, *, tag_name: str | None = None) -> dict[str, Any] | None:
	"""Convert a record into a props map, or pass a mapping through.

	- ``None`` and null host handles give ``None``.
	- Dataclass instances are walked field by field.
	- Mappings are returned unchanged (same object).

	Anything else is a caller bug and raises ``UnsupportedTypeError``.
	"""
	if value is None:
		return None
	if is_host_null(value):
		return None
	if is_record(value):
		return convert_record(value, tag_name=tag_name)
	if isinstance(value, Mapping):
		return value  # pyright: ignore[reportReturnType]
	raise UnsupportedTypeError(value)


def convert_record(record: Any, *, tag_name: str | None = None) -> dict[str, Any]:
	out: dict[str, Any] = {}
	for desc in record_schema(record, tag_name):
		if desc.skip:
			continue
		value = getattr(record, desc.name)
		live = is_live_host_object(value)
		if desc.omitempty and not live and is_empty(value):
			continue

		if isinstance(value, PropSet):
			_merge_set(out, desc, value)
			continue

		if desc.is_inner_html:
			out.update(inner_html_props(value))
			continue

		if isinstance(value, (list, tuple)):
			out[desc.key] = [_convert_item(item, tag_name) for item in value]
			continue

		out[desc.key] = _convert_value(value, live, tag_name)
	return out


def _merge_set(out: dict[str, Any], desc: FieldDescriptor, value: PropSet) -> None:
	base = desc.tag.name
	if not base.strip():
		logger.debug("Dropping %s: set fields need a tag name", desc.name)
		return
	for key, entry in value.convert(base).items():
		if key in out:
			logger.debug("Set field %s overwrites key %r", desc.name, key)
		out[key] = entry


def _convert_item(item: Any, tag_name: str | None) -> Any:
	if is_record(item):
		return convert_record(item, tag_name=tag_name)
	return item


def _convert_value(value: Any, live: bool, tag_name: str | None) -> Any:
	if live:
		return value
	if is_record(value):
		return convert_record(value, tag_name=tag_name)
	return value


s_to_map = to_map

__all__ = ["convert_record", "s_to_map", "to_map"]
