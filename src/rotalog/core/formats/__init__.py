"""Log formatters.

Contains renderers for plain lines, JSON, CSV and HTML.
"""

from __future__ import annotations

from typing import Any

from .base import Formatter, encode_context, local_now, render_timestamp
from .delimited import CSVFormatter
from .markup import HtmlFormatter
from .jsonl import JSONFormatter, JsonLogRecord
from .line import LineFormatter

_FORMATTERS: dict[str, type] = {
    "line": LineFormatter,
    "json": JSONFormatter,
    "csv": CSVFormatter,
    "html": HtmlFormatter,
}


def build_formatter(name: str, **options: Any) -> Formatter:
    """Return a formatter instance by short name (line, json, csv, html)."""
    try:
        cls = _FORMATTERS[name.lower()]
    except KeyError as exc:
        allowed = ", ".join(_FORMATTERS)
        raise ValueError(f"Unknown formatter {name!r}. Allowed: {allowed}") from exc
    return cls(**options)


__all__ = [
    "CSVFormatter",
    "Formatter",
    "HtmlFormatter",
    "JSONFormatter",
    "JsonLogRecord",
    "LineFormatter",
    "build_formatter",
    "encode_context",
    "local_now",
    "render_timestamp",
]
