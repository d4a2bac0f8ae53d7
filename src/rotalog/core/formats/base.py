"""Formatter interface and shared rendering helpers."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol

from ..errors import FormatError


class Formatter(Protocol):
    """Renderer interface: turn one event into an opaque text record."""

    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        """Render a log event. Must not perform I/O."""
        ...


def local_now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def render_timestamp(clock: Callable[[], datetime], date_format: str | None) -> str:
    """strftime with ``date_format``; ISO-8601 (seconds) when it is None."""
    now = clock()
    if date_format is None:
        return now.isoformat(timespec="seconds")
    return now.strftime(date_format)


def encode_context(context: Mapping[str, Any], *, indent: int | None = None) -> str:
    """JSON-encode a context mapping, raising FormatError on unsupported values."""
    try:
        return json.dumps(dict(context), ensure_ascii=False, indent=indent)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"Context is not JSON-serializable: {exc}") from exc
