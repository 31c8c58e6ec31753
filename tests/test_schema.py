from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any

import pytest
from pulse_props import (
	ClassNames,
	HostObject,
	is_empty,
	parse_tag,
	prop,
	record_schema,
	zero_record,
	zero_value,
)


@dataclass
class Child:
	label: str = ""


@dataclass
class Parent:
	name: str = prop("displayName,omitempty")
	child: Child = field(default_factory=Child)
	children: list[Child] = prop("kids", default_factory=list)
	classes: ClassNames = prop("className", default_factory=ClassNames)
	extra: dict[str, Any] = field(default_factory=dict)
	node: HostObject | None = None
	dangerously_set_inner_html: str = prop("dangerouslySetInnerHTML", default="")
	hidden: int = prop("-", default=0)
	_internal: str = ""


class Strict:
	def __init__(self, value: int) -> None:
		raise AssertionError("constructors must not run")


@dataclass
class NeedsArgs:
	count: int
	label: str

	def __post_init__(self) -> None:
		raise AssertionError("__post_init__ must not run")


@pytest.mark.parametrize(
	("raw", "name", "omitempty", "skip"),
	[
		("", "", False, False),
		("title", "title", False, False),
		("title,omitempty", "title", True, False),
		(",omitempty", "", True, False),
		("-", "-", False, True),
		("-,", "-", False, False),
		("x, omitempty ,other", "x", True, False),
	],
)
def test_parse_tag(raw: str, name: str, omitempty: bool, skip: bool):
	tag = parse_tag(raw)
	assert tag.name == name
	assert tag.omitempty is omitempty
	assert tag.skip is skip


def test_tag_key_defaults_to_field_name():
	assert parse_tag(",omitempty").key("count") == "count"
	assert parse_tag("total").key("count") == "total"


def test_parse_tag_rejects_non_strings():
	with pytest.raises(TypeError):
		parse_tag(3)  # pyright: ignore[reportArgumentType]


def test_prop_stores_tag_in_metadata():
	@dataclass
	class P:
		value: int = prop("v,omitempty", default=1, metadata={"doc": "x"})

	(f,) = fields(P)
	assert f.metadata["react"] == "v,omitempty"
	assert f.metadata["doc"] == "x"
	assert P().value == 1


def test_prop_rejects_default_and_factory():
	with pytest.raises(ValueError):
		prop("v", default=1, default_factory=int)


def test_record_schema_describes_public_fields():
	schema = record_schema(Parent)
	assert [d.name for d in schema] == [
		"name",
		"child",
		"children",
		"classes",
		"extra",
		"node",
		"dangerously_set_inner_html",
		"hidden",
	]
	by_name = {d.name: d for d in schema}
	assert by_name["name"].key == "displayName"
	assert by_name["name"].omitempty
	assert by_name["child"].kind == "record"
	assert by_name["children"].kind == "sequence"
	assert by_name["children"].key == "kids"
	assert by_name["classes"].kind == "set"
	assert by_name["extra"].kind == "mapping"
	assert by_name["node"].kind == "host"
	assert by_name["dangerously_set_inner_html"].kind == "html"
	assert by_name["hidden"].skip


def test_record_schema_accepts_instances():
	assert record_schema(Child(label="x"))[0].key == "label"


class Converter:
	def convert(self, base: str) -> dict[str, Any]:
		return {base: "x"}


@dataclass
class Holder:
	value: Converter = field(default_factory=Converter)
	classes: ClassNames = field(default_factory=ClassNames)


def test_convert_method_does_not_make_a_set_field():
	by_name = {desc.name: desc for desc in record_schema(Holder)}
	assert by_name["value"].resolved
	assert by_name["value"].kind == "scalar"
	assert by_name["classes"].kind == "set"


def test_record_schema_rejects_non_dataclasses():
	with pytest.raises(TypeError):
		record_schema(Strict)


@pytest.mark.parametrize(
	"value",
	[None, 0, 0.0, False, "", b"", Decimal(0), [], (), {}, set(), ClassNames(), Child()],
)
def test_is_empty_for_zero_values(value: Any):
	assert is_empty(value)


@pytest.mark.parametrize(
	"value",
	[1, -0.5, True, "x", [0], {"a": None}, Child(label="a"), HostObject({}), len],
)
def test_is_empty_for_non_zero_values(value: Any):
	assert not is_empty(value)


def test_null_host_object_is_empty():
	assert is_empty(HostObject(None))


def test_arbitrary_objects_are_never_empty():
	assert not is_empty(object())


@pytest.mark.parametrize(
	("hint", "expected"),
	[
		(str, ""),
		(int, 0),
		(float, 0.0),
		(bool, False),
		(bytes, b""),
		(list[int], []),
		(dict[str, int], {}),
		(tuple[int, ...], ()),
		(set[str], set()),
		(int | None, None),
		(Any, None),
		(HostObject, None),
		(Strict, None),
	],
)
def test_zero_value(hint: Any, expected: Any):
	assert zero_value(hint) == expected
	assert type(zero_value(hint)) is type(expected)


def test_zero_record_skips_constructors():
	record = zero_record(NeedsArgs)
	assert isinstance(record, NeedsArgs)
	assert record.count == 0
	assert record.label == ""


def test_zero_record_builds_nested_records():
	record = zero_record(Parent)
	assert record.child == Child()
	assert record.children == []
	assert record.node is None
	assert record._internal == ""  # pyright: ignore[reportPrivateUsage]
