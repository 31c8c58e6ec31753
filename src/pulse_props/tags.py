"""Field tag directives.

A directive is the string stored in a dataclass field's metadata under the
tag name (``"react"`` unless configured otherwise)::

	@dataclass
	class Props:
		name: str = prop("className")
		count: int = prop("count,omitempty", default=0)
		secret: str = prop("-", default="")

Grammar: ``<name>[,<option>...]`` or exactly ``-``. A blank name falls back
to the field's own name. The only option understood is ``omitempty``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import MISSING, Field, field
from typing import Any

from pulse_props.env import resolve_tag_name

SKIP = "-"
OMITEMPTY = "omitempty"


class Tag:
	__slots__ = ("raw", "name", "options")
	raw: str
	name: str
	options: tuple[str, ...]

	def __init__(self, raw: str) -> None:
		self.raw = raw
		name, _, rest = raw.partition(",")
		self.name = name
		self.options = tuple(opt.strip() for opt in rest.split(",") if opt.strip())

	@property
	def skip(self) -> bool:
		return self.raw == SKIP

	@property
	def omitempty(self) -> bool:
		return OMITEMPTY in self.options

	def key(self, field_name: str) -> str:
		"""Output key for a field carrying this tag."""
		return self.name or field_name

	def __eq__(self, other: object) -> bool:
		return isinstance(other, Tag) and other.raw == self.raw

	def __hash__(self) -> int:
		return hash(self.raw)

	def __repr__(self) -> str:
		return f"Tag({self.raw!r})"


def parse_tag(raw: str | None) -> Tag:
	if raw is None:
		return Tag("")
	if not isinstance(raw, str):
		raise TypeError(f"Tag directive must be a string, got {type(raw).__name__}")
	return Tag(raw)


def field_tag(f: Field[Any], tag_name: str | None = None) -> Tag:
	return parse_tag(f.metadata.get(resolve_tag_name(tag_name)))


def prop(
	tag: str = "",
	*,
	default: Any = MISSING,
	default_factory: Callable[[], Any] | Any = MISSING,
	tag_name: str | None = None,
	metadata: Mapping[str, Any] | None = None,
	**kwargs: Any,
) -> Any:
	"""``dataclasses.field`` carrying a tag directive in its metadata.

	Extra keyword arguments (``repr``, ``compare``, ``kw_only``, ...) are
	passed through to ``dataclasses.field``.
	"""
	if default is not MISSING and default_factory is not MISSING:
		raise ValueError("cannot specify both default and default_factory")
	merged = dict(metadata or {})
	merged[resolve_tag_name(tag_name)] = tag
	return field(
		default=default,
		default_factory=default_factory,
		metadata=merged,
		**kwargs,
	)


__all__ = ["OMITEMPTY", "SKIP", "Tag", "field_tag", "parse_tag", "prop"]
