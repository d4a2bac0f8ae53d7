"""HTML formatter.

Suggested stylesheet::

    .log-entry { margin-bottom: 1em; font-family: monospace; padding: 0.5em; border: 1px solid #ccc; }
    .log-INFO { background-color: #e7f4e4; }
    .log-ERROR { background-color: #fbeaea; }
    .log-WARNING { background-color: #fff6d1; }
    .log-DEBUG { background-color: #f0f0f0; }
    .log-context { font-size: 0.9em; color: #555; }
"""

from __future__ import annotations

import html
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .base import encode_context, local_now, render_timestamp


@dataclass(frozen=True, slots=True)
class HtmlFormatter:
    """Render an event as a ``<div class="log-entry">`` block.

    The block spans several physical lines, so a file written with this
    formatter holds one block per record rather than one line per record.
    """

    date_format: str | None = None
    clock: Callable[[], datetime] = field(default=local_now, repr=False, compare=False)

    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        ts = render_timestamp(self.clock, self.date_format)
        lvl = html.escape(level.upper())
        msg = html.escape(str(message))
        ctx = ""
        if context:
            ctx = '<pre class="log-context">' + html.escape(encode_context(context, indent=4)) + "</pre>"

        return "\n".join(
            [
                f'<div class="log-entry log-{lvl}">',
                f'    <span class="log-timestamp">{ts}</span>',
                f'    <span class="log-level">{lvl}</span>',
                f'    <span class="log-message">{msg}</span>',
                f"    {ctx}",
                "</div>",
            ]
        )
