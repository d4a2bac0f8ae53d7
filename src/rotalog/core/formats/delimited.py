"""CSV formatter."""

from __future__ import annotations

import csv
import io
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .base import encode_context, local_now, render_timestamp


@dataclass(frozen=True, slots=True)
class CSVFormatter:
    """Render timestamp, level, message and context-json as one CSV row.

    Every field is enclosed; enclosure characters inside a field are doubled.
    """

    date_format: str | None = None
    delimiter: str = ","
    enclosure: str = '"'
    clock: Callable[[], datetime] = field(default=local_now, repr=False, compare=False)

    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        fields = [
            render_timestamp(self.clock, self.date_format),
            level.upper(),
            str(message),
            encode_context(context) if context else "",
        ]
        buf = io.StringIO()
        writer = csv.writer(
            buf,
            delimiter=self.delimiter,
            quotechar=self.enclosure,
            doublequote=True,
            quoting=csv.QUOTE_ALL,
            lineterminator="",
        )
        writer.writerow(fields)
        return buf.getvalue()
