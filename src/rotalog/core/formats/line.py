"""Single-line text formatter."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .base import encode_context, local_now, render_timestamp


@dataclass(frozen=True, slots=True)
class LineFormatter:
    """Render ``[timestamp] LEVEL: message {context-json}``."""

    date_format: str | None = "%Y-%m-%d %H:%M:%S"
    include_context: bool = True
    clock: Callable[[], datetime] = field(default=local_now, repr=False, compare=False)

    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        ts = render_timestamp(self.clock, self.date_format)
        out = f"[{ts}] {level.upper()}: {message}"
        if self.include_context and context:
            out += " " + encode_context(context)
        return out
