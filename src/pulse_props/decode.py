"""Map to record decoding.

Keys are matched against the same tag directives the converter uses. With
``zero_fields`` (the default) every public field missing from the source is
reset to its zero value, so decoding the same map twice always gives the
same record. Values are validated with pydantic against the declared field
types; nested records are decoded recursively by tag name.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar, get_args, get_origin

from pydantic import ConfigDict, PydanticUserError, TypeAdapter, ValidationError

from pulse_props.env import resolve_tag_name
from pulse_props.errors import DecodeError, DecoderConfigError, FieldError
from pulse_props.host import HostObject
from pulse_props.schema import (
	accepts,
	is_record_type,
	record_schema,
	union_members,
	unwrap_annotated,
)
from pulse_props.zero import field_zero, zero_record, zero_value

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ADAPTER_CONFIG = ConfigDict(arbitrary_types_allowed=True)


@dataclass(frozen=True, slots=True)
class DecoderConfig:
	tag_name: str | None = None
	zero_fields: bool = True
	strict: bool = False


class Decoder:
	__slots__ = ("config", "tag_name")
	config: DecoderConfig
	tag_name: str

	def __init__(self, config: DecoderConfig | None = None) -> None:
		config = config or DecoderConfig()
		tag_name = resolve_tag_name(config.tag_name)
		if not isinstance(tag_name, str) or not tag_name.strip():
			raise DecoderConfigError(f"Invalid decoder tag name: {tag_name!r}")
		self.config = config
		self.tag_name = tag_name

	def decode(self, source: Any, dest: T) -> T:
		"""Populate ``dest`` in place from ``source`` and return it.

		Raises ``DecodeError`` if any value does not fit its field; in that
		case ``dest`` is left untouched.
		"""
		_check_destination(dest)
		if source is None:
			values = self._zeroed(dest)
		else:
			if isinstance(source, HostObject):
				source = source.interface()
			if not isinstance(source, Mapping):
				raise DecodeError(
					[FieldError("", f"expected a map, got {type(source).__name__!r}")]
				)
			errors: list[FieldError] = []
			values = self._decode_fields(source, dest, "", errors)
			if errors:
				logger.debug("Decoding into %s failed: %s", type(dest).__name__, errors)
				raise DecodeError(errors)
		for name, value in values.items():
			setattr(dest, name, value)
		return dest

	def _zeroed(self, dest: Any) -> dict[str, Any]:
		return {
			desc.name: field_zero(desc)
			for desc in record_schema(dest, self.tag_name)
			if not desc.skip
		}

	def _decode_fields(
		self,
		source: Mapping[str, Any],
		dest: Any,
		prefix: str,
		errors: list[FieldError],
	) -> dict[str, Any]:
		values: dict[str, Any] = {}
		for desc in record_schema(dest, self.tag_name):
			if desc.skip:
				continue
			if desc.key in source:
				path = f"{prefix}{desc.key}"
				values[desc.name] = self._decode_value(
					desc.hint, source[desc.key], path, errors
				)
			elif self.config.zero_fields:
				logger.debug("Zeroing %s.%s", type(dest).__name__, desc.name)
				values[desc.name] = field_zero(desc)
		return values

	def _decode_value(
		self, hint: Any, raw: Any, path: str, errors: list[FieldError]
	) -> Any:
		hint = unwrap_annotated(hint)
		if isinstance(raw, HostObject) and not accepts(hint, HostObject):
			raw = raw.interface()
		if raw is None:
			return zero_value(hint)

		record_cls = _record_member(hint)
		if record_cls is not None:
			if isinstance(raw, record_cls):
				return raw
			if isinstance(raw, Mapping):
				return self._decode_record(record_cls, raw, path, errors)
			errors.append(
				FieldError(path, f"expected a map, got {type(raw).__name__!r}")
			)
			return raw

		item_hint = _record_sequence_item(hint)
		if item_hint is not None and _is_sequence(raw):
			origin = get_origin(unwrap_annotated(hint)) or list
			items = [
				self._decode_value(item_hint, item, f"{path}.{index}", errors)
				for index, item in enumerate(raw)
			]
			return tuple(items) if issubclass(origin, tuple) else items

		return self._validate(hint, raw, path, errors)

	def _decode_record(
		self,
		cls: type,
		raw: Mapping[str, Any],
		path: str,
		errors: list[FieldError],
	) -> Any:
		record = zero_record(cls)
		values = self._decode_fields(raw, record, f"{path}.", errors)
		for name, value in values.items():
			object.__setattr__(record, name, value)
		return record

	def _validate(
		self, hint: Any, raw: Any, path: str, errors: list[FieldError]
	) -> Any:
		if accepts(hint, type(raw)):
			return raw
		try:
			return _adapter(hint).validate_python(raw, strict=self.config.strict)
		except ValidationError as exc:
			for err in exc.errors():
				loc = ".".join(str(part) for part in err["loc"])
				errors.append(FieldError(f"{path}.{loc}" if loc else path, err["msg"]))
			return raw


def _adapter(hint: Any) -> TypeAdapter[Any]:
	try:
		return TypeAdapter(hint, config=_ADAPTER_CONFIG)
	except PydanticUserError:
		# models, pydantic dataclasses and TypedDicts carry their own config
		return TypeAdapter(hint)


def _check_destination(dest: Any) -> None:
	cls = type(dest)
	if dest is None or isinstance(dest, type) or not dataclasses.is_dataclass(cls):
		raise DecoderConfigError(
			f"Decode destination must be a dataclass instance, got {cls.__name__}"
		)
	params = getattr(cls, "__dataclass_params__", None)
	if params is not None and params.frozen:
		raise DecoderConfigError(
			f"Decode destination {cls.__name__} is frozen and cannot be populated"
		)


def _record_member(hint: Any) -> type | None:
	for member in union_members(hint):
		member = unwrap_annotated(member)
		if is_record_type(member):
			return member
	return None


def _record_sequence_item(hint: Any) -> Any | None:
	"""Element type of ``list[R]``/``tuple[R, ...]``/``Sequence[R]`` for a record ``R``."""
	members = union_members(hint)
	if len(members) != 1:
		return None
	tp = unwrap_annotated(members[0])
	origin = get_origin(tp)
	if origin is None or not isinstance(origin, type):
		return None
	if not issubclass(origin, (list, tuple)) and origin is not Sequence:
		return None
	args = get_args(tp)
	if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
		return None
	item = args[0] if args else None
	if item is None or _record_member(item) is None:
		return None
	return item


def _is_sequence(value: Any) -> bool:
	return isinstance(value, Sequence) and not isinstance(
		value, (str, bytes, bytearray)
	)


_DEFAULT_DECODER_CONFIG = DecoderConfig()


def unmarshal_struct(
	source: Mapping[str, Any] | None, dest: T, *, config: DecoderConfig | None = None
) -> T:
	"""Decode ``source`` into the dataclass instance ``dest``.

	Fields whose tag key is missing from ``source`` are reset to their zero
	value. Raises ``DecodeError`` on type mismatches.
	"""
	return Decoder(config or _DEFAULT_DECODER_CONFIG).decode(source, dest)


from_map = unmarshal_struct

__all__ = ["Decoder", "DecoderConfig", "from_map", "unmarshal_struct"]
