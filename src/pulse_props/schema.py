"""Field descriptor tables for record types.

A record is a dataclass. ``record_schema`` lists, in declaration order, what
the converter and decoder need to know about each public field: its output
key, its omission policy and its declared type. Nothing is cached; the table
is rebuilt on every call.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
import typing
from dataclasses import dataclass
from types import NoneType, UnionType
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pulse_props.html import DANGEROUSLY_SET_INNER_HTML, INNER_HTML_FIELD
from pulse_props.host import HostObject
from pulse_props.sets import PropSet
from pulse_props.tags import Tag, field_tag

logger = logging.getLogger(__name__)

FieldKind = Literal["scalar", "record", "sequence", "mapping", "set", "html", "host"]


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
	name: str
	tag: Tag
	hint: Any
	kind: FieldKind
	field: dataclasses.Field[Any]
	# False when the annotation could not be evaluated; hint is then Any
	resolved: bool = True

	@property
	def key(self) -> str:
		return self.tag.key(self.name)

	@property
	def skip(self) -> bool:
		return self.tag.skip

	@property
	def omitempty(self) -> bool:
		return self.tag.omitempty

	@property
	def is_inner_html(self) -> bool:
		return (
			self.name == INNER_HTML_FIELD and self.tag.name == DANGEROUSLY_SET_INNER_HTML
		)


def is_record(value: Any) -> bool:
	"""True for dataclass instances (not dataclass types)."""
	return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_record_type(tp: Any) -> bool:
	return isinstance(tp, type) and dataclasses.is_dataclass(tp)


def public_fields(record: Any) -> tuple[dataclasses.Field[Any], ...]:
	return tuple(f for f in dataclasses.fields(record) if not f.name.startswith("_"))


def record_schema(record: Any, tag_name: str | None = None) -> list[FieldDescriptor]:
	"""Descriptor table for a dataclass type or instance."""
	cls = record if isinstance(record, type) else type(record)
	if not dataclasses.is_dataclass(cls):
		raise TypeError(f"{cls.__qualname__} is not a dataclass")
	hints = _type_hints(cls)
	out: list[FieldDescriptor] = []
	for f in public_fields(cls):
		resolved = f.name in hints
		hint = hints.get(f.name, Any)
		desc = FieldDescriptor(
			name=f.name,
			tag=field_tag(f, tag_name),
			hint=hint,
			kind=hint_kind(hint),
			field=f,
			resolved=resolved,
		)
		if desc.is_inner_html:
			desc = dataclasses.replace(desc, kind="html")
		out.append(desc)
	return out


def _type_hints(cls: type) -> dict[str, Any]:
	"""Evaluated annotations of ``cls``.

	Annotations that cannot be evaluated (names only imported under
	``TYPE_CHECKING``, classes local to a function) are left out one by one
	instead of failing the whole class.
	"""
	try:
		return typing.get_type_hints(cls)
	except (NameError, TypeError, AttributeError):
		pass
	hints: dict[str, Any] = {}
	for base in reversed(cls.__mro__):
		if base is object:
			continue
		module = sys.modules.get(base.__module__)
		globalns = dict(vars(module)) if module is not None else {}
		localns = dict(vars(base))
		for name, annotation in inspect.get_annotations(base).items():
			hints.pop(name, None)
			try:
				hints[name] = _evaluate(annotation, globalns, localns)
			except (NameError, TypeError, AttributeError, SyntaxError) as exc:
				logger.debug(
					"Cannot resolve annotation of %s.%s: %s", cls.__qualname__, name, exc
				)
	return hints


def _evaluate(
	annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
	if annotation is None:
		return NoneType
	if isinstance(annotation, str):
		return eval(annotation, globalns, localns)
	return annotation


def unwrap_annotated(hint: Any) -> Any:
	while get_origin(hint) is Annotated:
		hint = get_args(hint)[0]
	return hint


def is_union(hint: Any) -> bool:
	return get_origin(hint) in (Union, UnionType)


def union_members(hint: Any) -> tuple[Any, ...]:
	"""Non-None members of a union, or ``(hint,)`` for anything else."""
	hint = unwrap_annotated(hint)
	if is_union(hint):
		return tuple(a for a in get_args(hint) if a is not NoneType)
	return (hint,)


def hint_kind(hint: Any) -> FieldKind:
	members = union_members(hint)
	if len(members) != 1:
		return "scalar"
	tp = members[0]
	if tp is HostObject:
		return "host"
	if is_record_type(tp):
		return "record"
	origin = get_origin(tp) or tp
	if not isinstance(origin, type):
		return "scalar"
	if is_prop_set_type(origin):
		return "set"
	if origin in (str, bytes, bytearray):
		return "scalar"
	if issubclass(origin, (list, tuple)):
		return "sequence"
	if issubclass(origin, dict):
		return "mapping"
	return "scalar"


def is_prop_set_type(tp: type) -> bool:
	return issubclass(tp, PropSet)


def accepts(hint: Any, tp: type) -> bool:
	"""True if values of ``tp`` are valid for ``hint`` without conversion."""
	hint = unwrap_annotated(hint)
	if hint is Any or hint is object:
		return True
	for member in union_members(hint):
		member = unwrap_annotated(member)
		if member is Any:
			return True
		if isinstance(member, type) and issubclass(tp, member):
			return True
	return False


__all__ = [
	"FieldDescriptor",
	"FieldKind",
	"accepts",
	"hint_kind",
	"is_record",
	"is_record_type",
	"public_fields",
	"record_schema",
	"union_members",
	"unwrap_annotated",
]
