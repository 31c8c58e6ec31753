from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ErrorCode = Literal[
	"convert.unsupported",
	"decode.config",
	"decode.type",
	"host.json",
]


class PropsError(Exception):
	"""Base class for every error raised by pulse_props."""

	code: ErrorCode


class UnsupportedTypeError(PropsError, TypeError):
	"""A value that is neither a record, a mapping nor None was handed to
	``to_map``. This is a caller bug and is not meant to be caught."""

	code: ErrorCode = "convert.unsupported"

	def __init__(self, value: object) -> None:
		self.value_type = type(value)
		super().__init__(
			f"Unsupported type for props conversion: {self.value_type.__qualname__}"
		)


class DecoderConfigError(PropsError, TypeError):
	"""Invalid decoder configuration or destination. Caller bug."""

	code: ErrorCode = "decode.config"


@dataclass(frozen=True, slots=True)
class FieldError:
	path: str
	message: str

	def __str__(self) -> str:
		return f"'{self.path}': {self.message}"


class DecodeError(PropsError, ValueError):
	"""One or more source values did not fit the destination fields."""

	code: ErrorCode = "decode.type"
	errors: list[FieldError]

	def __init__(self, errors: list[FieldError]) -> None:
		self.errors = list(errors)
		count = len(self.errors)
		noun = "error" if count == 1 else "errors"
		details = "\n".join(f"* {err}" for err in self.errors)
		super().__init__(f"{count} {noun} decoding:\n\n{details}")


class HostJSONError(PropsError, ValueError):
	"""The host runtime could not parse a JSON document."""

	code: ErrorCode = "host.json"


__all__ = [
	"DecodeError",
	"DecoderConfigError",
	"ErrorCode",
	"FieldError",
	"HostJSONError",
	"PropsError",
	"UnsupportedTypeError",
]
