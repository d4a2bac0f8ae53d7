"""Core data models for the logging pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LogLevel(str, Enum):
    """Closed set of severity levels, ascending."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    ALERT = "ALERT"
    EMERGENCY = "EMERGENCY"

    @property
    def severity(self) -> int:
        """Numeric rank used for threshold filtering."""
        return _SEVERITY[self]

    @classmethod
    def parse(cls, value: LogLevel | str) -> LogLevel:
        """Return the level for a member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid level {value!r}. Allowed: {allowed}") from exc


_SEVERITY: dict[LogLevel, int] = {
    LogLevel.DEBUG: 100,
    LogLevel.INFO: 200,
    LogLevel.NOTICE: 250,
    LogLevel.WARNING: 300,
    LogLevel.ERROR: 400,
    LogLevel.CRITICAL: 500,
    LogLevel.ALERT: 550,
    LogLevel.EMERGENCY: 600,
}


@dataclass(frozen=True, slots=True)
class LogEvent:
    """One call to the facade; consumed immediately, never persisted."""

    level: LogLevel
    message: Any  # str or anything with a meaningful __str__
    context: Mapping[str, Any] = field(default_factory=dict)
