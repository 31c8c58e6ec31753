from __future__ import annotations

from collections.abc import Callable
from typing import Any

# React's escape hatch for inserting markup without escaping
DANGEROUSLY_SET_INNER_HTML = "dangerouslySetInnerHTML"
HTML_KEY = "__html"

# Field that the converter recognises as raw HTML when tagged with
# DANGEROUSLY_SET_INNER_HTML
INNER_HTML_FIELD = "dangerously_set_inner_html"


def dangerously_set_inner_html(inner: Any) -> dict[str, Any]:
	"""``{"dangerouslySetInnerHTML": {"__html": inner}}``"""
	return {DANGEROUSLY_SET_INNER_HTML: {HTML_KEY: inner}}


def dangerously_set_inner_html_func(inner: Callable[[], Any]) -> dict[str, Any]:
	"""Like ``dangerously_set_inner_html`` but the markup is produced by ``inner``."""
	return dangerously_set_inner_html(inner())


def inner_html_props(value: Any) -> dict[str, Any]:
	if callable(value):
		return dangerously_set_inner_html_func(value)
	return dangerously_set_inner_html(value)


__all__ = [
	"DANGEROUSLY_SET_INNER_HTML",
	"HTML_KEY",
	"INNER_HTML_FIELD",
	"dangerously_set_inner_html",
	"dangerously_set_inner_html_func",
	"inner_html_props",
]
