"""Handles to values owned by the host UI runtime.

The host (the JavaScript side of a component) has its own notion of null,
separate from Python's ``None``. A ``HostObject`` is the explicit tagged case
for such a value: the converter never applies zero-value rules to a live
handle and treats a null handle like ``None``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Protocol, final, runtime_checkable

from typing_extensions import override

from pulse_props.errors import HostJSONError

logger = logging.getLogger(__name__)


@final
class HostObject:
	"""Opaque reference to a host-owned value. ``HostObject(None)`` is host null."""

	__slots__ = ("_ref",)
	_ref: Any

	def __init__(self, ref: Any = None) -> None:
		self._ref = ref

	@property
	def is_null(self) -> bool:
		return current_host().is_null(self)

	def get(self, key: str) -> HostObject:
		"""Member access. Missing members give a null handle, like ``undefined``."""
		ref = self._ref
		if ref is None:
			return HostObject(None)
		if isinstance(ref, dict):
			return HostObject(ref.get(key))
		return HostObject(getattr(ref, key, None))

	def interface(self) -> Any:
		"""The wrapped value as a plain Python object."""
		return self._ref

	@override
	def __eq__(self, other: object) -> bool:
		return isinstance(other, HostObject) and other._ref is self._ref

	@override
	def __hash__(self) -> int:
		return id(self._ref)

	@override
	def __repr__(self) -> str:
		if self._ref is None:
			return "HostObject(null)"
		return f"HostObject({type(self._ref).__name__})"


@runtime_checkable
class HostRuntime(Protocol):
	"""Capabilities that only the host environment can provide."""

	def is_null(self, obj: HostObject) -> bool: ...

	def json_parse(self, text: str) -> HostObject: ...


class LocalHost:
	"""In-process host used when no embedding runtime is installed."""

	def is_null(self, obj: HostObject) -> bool:
		return obj.interface() is None

	def json_parse(self, text: str) -> HostObject:
		try:
			value = json.loads(text)
		except json.JSONDecodeError as exc:
			raise HostJSONError(f"JSON.parse failed: {exc.msg}") from exc
		return HostObject(value)


HOST_RUNTIME: ContextVar[HostRuntime] = ContextVar("host_runtime", default=LocalHost())


def current_host() -> HostRuntime:
	return HOST_RUNTIME.get()


@contextmanager
def use_host(runtime: HostRuntime) -> Iterator[HostRuntime]:
	"""Run a block against another host runtime."""
	token = HOST_RUNTIME.set(runtime)
	try:
		yield runtime
	finally:
		HOST_RUNTIME.reset(token)


def is_host_null(value: Any) -> bool:
	"""True if ``value`` is a host handle and the host considers it null."""
	return isinstance(value, HostObject) and current_host().is_null(value)


def is_live_host_object(value: Any) -> bool:
	"""True if ``value`` is a host handle that is not null."""
	return isinstance(value, HostObject) and not current_host().is_null(value)


def host_json_parse(text: str) -> HostObject:
	logger.debug("Parsing %d characters of JSON on %r", len(text), current_host())
	return current_host().json_parse(text)


__all__ = [
	"HOST_RUNTIME",
	"HostObject",
	"HostRuntime",
	"LocalHost",
	"current_host",
	"host_json_parse",
	"is_host_null",
	"is_live_host_object",
	"use_host",
]
