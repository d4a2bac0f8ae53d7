"""JSON formatter (one object per record)."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import FormatError
from .base import local_now, render_timestamp


class JsonLogRecord(BaseModel):
    timestamp: str
    level: str
    message: str
    context: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class JSONFormatter:
    """Render events as JSON objects; ``context`` is omitted when empty."""

    date_format: str | None = None
    pretty_print: bool = False
    clock: Callable[[], datetime] = field(default=local_now, repr=False, compare=False)

    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        try:
            record = JsonLogRecord(
                timestamp=render_timestamp(self.clock, self.date_format),
                level=level.upper(),
                message=str(message),
                context=dict(context) if context else None,
            )
            return record.model_dump_json(
                exclude_none=True,
                indent=4 if self.pretty_print else None,
            )
        except (ValidationError, PydanticSerializationError) as exc:
            raise FormatError(f"Cannot encode log record: {exc}") from exc
