from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from typing_extensions import override


class PropSet(ABC):
	"""A field value that expands into entries of its parent props map.

	``base`` is the field's tag name with options stripped. The returned
	entries are merged into the parent map as-is. Only subclasses are
	expanded; other values with a ``convert`` method are converted like any
	other value.
	"""

	@abstractmethod
	def convert(self, base: str) -> dict[str, Any]: ...


class ClassNames(dict[str, bool], PropSet):
	"""Ordered set of CSS class flags.

		ClassNames("btn", "primary", disabled=False)
		# convert("className") -> {"className": "btn primary"}
	"""

	def __init__(self, *names: str, **flags: bool) -> None:
		super().__init__()
		for name in names:
			self.add(name)
		for name, enabled in flags.items():
			self[name] = enabled

	def add(self, *names: str) -> None:
		for name in names:
			for part in name.split():
				self[part] = True

	def remove(self, *names: str) -> None:
		for name in names:
			for part in name.split():
				self[part] = False

	def toggle(self, name: str) -> bool:
		enabled = not self.get(name, False)
		self[name] = enabled
		return enabled

	def enabled(self) -> list[str]:
		return [name for name, on in self.items() if on]

	@override
	def convert(self, base: str) -> dict[str, Any]:
		return {base: str(self)}

	@override
	def __str__(self) -> str:
		return " ".join(self.enabled())

	@override
	def __repr__(self) -> str:
		return f"ClassNames({str(self)!r})"


class DataSet(dict[str, Any], PropSet):
	"""Prefixed attribute group, e.g. ``data-*`` or ``aria-*``.

		DataSet(id="42", role="row")
		# convert("data") -> {"data-id": "42", "data-role": "row"}
	"""

	def __init__(
		self, entries: Mapping[str, Any] | Iterable[tuple[str, Any]] = (), **kwargs: Any
	) -> None:
		super().__init__(entries, **kwargs)

	@override
	def convert(self, base: str) -> dict[str, Any]:
		return {f"{base}-{name}": value for name, value in self.items()}

	@override
	def __repr__(self) -> str:
		return f"DataSet({dict(self)!r})"


__all__ = ["ClassNames", "DataSet", "PropSet"]
