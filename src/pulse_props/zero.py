"""Zero values and emptiness checks used by ``omitempty`` and field resets.

Equality is only defined over comparable kinds: numbers, strings, bytes,
containers and records built from them. Callables and arbitrary objects are
never considered empty unless they are ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import MISSING, Field, fields
from decimal import Decimal
from types import NoneType
from typing import Any, get_origin

from pulse_props.host import HostObject, current_host
from pulse_props.schema import (
	FieldDescriptor,
	is_record,
	is_record_type,
	public_fields,
	record_schema,
	union_members,
	unwrap_annotated,
)

_SCALARS: tuple[type, ...] = (bool, int, float, complex, Decimal, str, bytes, bytearray)
_CONTAINERS: tuple[type, ...] = (list, tuple, Mapping, Set)


def is_empty(value: Any) -> bool:
	"""True if ``value`` equals the zero value of its own type."""
	if value is None:
		return True
	if isinstance(value, HostObject):
		return current_host().is_null(value)
	if isinstance(value, _SCALARS):
		return not value
	if isinstance(value, _CONTAINERS):
		return len(value) == 0
	if is_record(value):
		return all(is_empty(getattr(value, f.name)) for f in public_fields(value))
	return False


def zero_value(hint: Any) -> Any:
	"""Zero value for a declared type.

	Optionals, ``Any``, callables, host handles and types without a natural
	zero all map to ``None``.
	"""
	hint = unwrap_annotated(hint)
	if hint is NoneType or hint is Any:
		return None
	members = union_members(hint)
	if len(members) != 1 or members[0] is not hint:
		# Optional[X] and other unions: absent is None
		return None
	if is_record_type(hint):
		return zero_record(hint)
	origin = get_origin(hint) or hint
	if not isinstance(origin, type):
		return None
	if origin is HostObject:
		return None
	for scalar in _SCALARS:
		if origin is scalar:
			return scalar()
	if issubclass(origin, (list, tuple, dict, set, frozenset)):
		try:
			return origin()
		except TypeError:
			return None
	return None


def zero_record(cls: type) -> Any:
	"""An instance of ``cls`` with every public field at its zero value.

	Built without calling ``__init__`` so constructors with required arguments
	or ``__post_init__`` side effects do not get in the way. Private fields are
	given their declared defaults when they have one.
	"""
	obj = object.__new__(cls)
	schema = {desc.name: desc for desc in record_schema(cls)}
	for f in fields(cls):
		desc = schema.get(f.name)
		value = field_zero(desc) if desc is not None else field_default(f)
		object.__setattr__(obj, f.name, value)
	return obj


def field_zero(desc: FieldDescriptor) -> Any:
	"""Reset value for a public field.

	Fields whose annotation could not be resolved fall back to their own
	dataclass default.
	"""
	if desc.resolved:
		return zero_value(desc.hint)
	return field_default(desc.field)


def field_default(f: Field[Any]) -> Any:
	if f.default_factory is not MISSING:
		return f.default_factory()
	if f.default is not MISSING:
		return f.default
	return None


__all__ = ["field_zero", "is_empty", "zero_record", "zero_value"]
