"""
Command-line interface for pulse-props.
Inspect how a record type maps to props and try decoding JSON into it.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import importlib
import importlib.util
import json
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pulse_props.component import json_unmarshal
from pulse_props.convert import to_map
from pulse_props.decode import DecoderConfig, unmarshal_struct
from pulse_props.errors import DecodeError, HostJSONError
from pulse_props.schema import is_record_type, record_schema
from pulse_props.zero import zero_record

cli = typer.Typer(
	name="pulse-props",
	help="Convert between dataclass records and component props/state maps",
	no_args_is_help=True,
)


def load_record_type(target: str) -> type:
	"""Resolve ``module.path:Name`` or ``path/to/file.py:Name`` to a dataclass."""
	module_part, sep, attr = target.rpartition(":")
	if not sep or not module_part or not attr:
		raise typer.BadParameter(
			f"Expected 'module:Record' or 'file.py:Record', got {target!r}"
		)
	if module_part.endswith(".py"):
		path = Path(module_part).resolve()
		if not path.exists():
			raise typer.BadParameter(f"File not found: {path}")
		spec = importlib.util.spec_from_file_location(path.stem, path)
		if spec is None or spec.loader is None:
			raise typer.BadParameter(f"Cannot import {path}")
		module = importlib.util.module_from_spec(spec)
		sys.modules[path.stem] = module
		spec.loader.exec_module(module)
	else:
		module = importlib.import_module(module_part)
	record_type = getattr(module, attr, None)
	if not is_record_type(record_type):
		raise typer.BadParameter(f"{target} is not a dataclass")
	return record_type  # pyright: ignore[reportReturnType]


def _format_hint(hint: Any) -> str:
	if isinstance(hint, type):
		return hint.__name__
	return str(hint).replace("typing.", "")


@cli.command("schema")
def schema(
	target: str = typer.Argument(..., help="Record type: 'module:Record'"),
	tag: str | None = typer.Option(None, "--tag", help="Tag name to read"),
):
	"""Print the field table used to convert a record type."""
	record_type = load_record_type(target)
	table = Table(title=record_type.__qualname__)
	table.add_column("field")
	table.add_column("key")
	table.add_column("kind")
	table.add_column("omitempty")
	table.add_column("type")
	for desc in record_schema(record_type, tag):
		key = "[dim]skipped[/dim]" if desc.skip else desc.key
		table.add_row(
			desc.name,
			key,
			desc.kind,
			"yes" if desc.omitempty else "",
			_format_hint(desc.hint),
		)
	Console().print(table)


@cli.command("decode")
def decode(
	target: str = typer.Argument(..., help="Record type: 'module:Record'"),
	payload: str = typer.Argument(..., help="JSON object to decode"),
	tag: str | None = typer.Option(None, "--tag", help="Tag name to read"),
	strict: bool = typer.Option(False, "--strict", help="Disable type coercion"),
):
	"""Decode a JSON object into a record and print it with its props map."""
	console = Console()
	record_type = load_record_type(target)
	try:
		source = json_unmarshal(payload).interface()
	except HostJSONError as exc:
		console.print(f"[red]Invalid JSON:[/red] {escape(str(exc))}")
		raise typer.Exit(1) from exc

	record = zero_record(record_type)
	try:
		unmarshal_struct(source, record, config=DecoderConfig(tag, strict=strict))
	except DecodeError as exc:
		for err in exc.errors:
			console.print(f"[red]✗[/red] {escape(str(err))}")
		raise typer.Exit(1) from exc

	console.print(repr(record), markup=False)
	console.print_json(json.dumps(to_map(record, tag_name=tag), default=repr))


def main() -> None:
	cli()


if __name__ == "__main__":
	main()
