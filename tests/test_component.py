from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest
from pulse_props import (
	DecodeError,
	HostJSONError,
	HostObject,
	LocalHost,
	current_host,
	hydrate_props,
	hydrate_state,
	is_host_null,
	is_live_host_object,
	json_unmarshal,
	prop,
	to_map,
	unmarshal_props,
	unmarshal_state,
	use_host,
)


@dataclass
class TodoProps:
	title: str = prop("title", default="")
	limit: int = prop("limit,omitempty", default=0)


@dataclass
class TodoState:
	items: list[str] = prop("items", default_factory=list)
	editing: bool = prop("editing", default=False)


def make_component() -> HostObject:
	return HostObject(
		{
			"props": {"title": "Todo", "limit": 3},
			"state": {"items": ["a", "b"], "editing": True},
		}
	)


def test_unmarshal_props():
	props = unmarshal_props(make_component(), TodoProps(title="old"))
	assert props == TodoProps(title="Todo", limit=3)


def test_unmarshal_state():
	state = unmarshal_state(make_component(), TodoState())
	assert state == TodoState(items=["a", "b"], editing=True)


def test_component_attributes_are_read_from_objects():
	this = HostObject(SimpleNamespace(props={"title": "ns"}, state=None))
	assert unmarshal_props(this, TodoProps()) == TodoProps(title="ns")


def test_missing_props_map_is_a_type_error():
	with pytest.raises(TypeError, match="props"):
		unmarshal_props(HostObject({}), TodoProps())


def test_props_type_mismatch_is_recoverable():
	this = HostObject({"props": {"limit": "lots"}})
	with pytest.raises(DecodeError):
		unmarshal_props(this, TodoProps())


def test_hydrate_aliases_warn():
	this = make_component()
	with pytest.warns(DeprecationWarning, match="unmarshal_props"):
		props = hydrate_props(this, TodoProps())
	with pytest.warns(DeprecationWarning, match="unmarshal_state"):
		state = hydrate_state(this, TodoState())
	assert props.title == "Todo"
	assert state.editing is True


def test_json_unmarshal_returns_host_object():
	obj = json_unmarshal('{"title": "json", "limit": 2}')
	assert is_live_host_object(obj)
	assert obj.get("title").interface() == "json"
	assert obj.get("missing").is_null


def test_json_unmarshal_rejects_invalid_documents():
	with pytest.raises(HostJSONError) as info:
		json_unmarshal("{not json")
	assert info.value.__cause__ is not None


def test_json_unmarshal_rejects_null():
	with pytest.raises(HostJSONError, match="null"):
		json_unmarshal("null")


def test_host_null_checks():
	assert is_host_null(HostObject(None))
	assert not is_host_null(None)
	assert not is_host_null(HostObject(0))
	assert is_live_host_object(HostObject(0))
	assert not is_live_host_object({"a": 1})


class UndefinedAwareHost(LocalHost):
	"""Host where the string "undefined" also counts as null."""

	def is_null(self, obj: HostObject) -> bool:
		return super().is_null(obj) or obj.interface() == "undefined"


def test_use_host_swaps_runtime():
	runtime = UndefinedAwareHost()
	handle = HostObject("undefined")
	assert is_live_host_object(handle)
	with use_host(runtime):
		assert current_host() is runtime
		assert is_host_null(handle)
		assert to_map(handle) is None
	assert current_host() is not runtime
	assert not is_host_null(handle)
