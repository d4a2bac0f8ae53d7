"""Placeholder interpolation for log messages."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def interpolate(message: Any, context: Mapping[str, Any] | None = None) -> str:
    """Replace ``{{key}}`` tokens in ``message`` with values from ``context``.

    Single pass of literal substitution: substituted values are not re-scanned,
    unknown placeholders stay verbatim. Longer tokens win when two overlap.
    """
    text = str(message)
    if not context:
        return text

    replacements = {"{{" + str(k) + "}}": _display(v) for k, v in context.items()}
    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda m: replacements[m.group(0)], text)
