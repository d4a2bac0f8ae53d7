"""Logger facade: interpolate, format, persist, then notify observers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import MissingSinkError
from .formats import Formatter
from .handlers import RotatingFileSink
from .interpolation import interpolate
from .leveled import LeveledLogger
from .models import LogEvent, LogLevel
from .observers import ObserverRegistry

logger = logging.getLogger(__name__)


class Logger(LeveledLogger):
    """Leveled logger writing formatted records through a sink.

    ``sink`` is required for ``log`` to succeed; ``observers`` is optional and is
    notified with the original message and context after each successful write.
    ``min_level`` drops events whose severity is strictly below it.
    """

    def __init__(
        self,
        formatter: Formatter,
        sink: RotatingFileSink | None = None,
        *,
        observers: ObserverRegistry | None = None,
        min_level: LogLevel | str | None = None,
    ) -> None:
        self.formatter = formatter
        self.sink = sink
        self.observers = observers
        self.min_level = LogLevel.parse(min_level) if min_level is not None else None

    def is_enabled_for(self, level: LogLevel | str) -> bool:
        """True when ``level`` passes the configured threshold."""
        if self.min_level is None:
            return True
        return LogLevel.parse(level).severity >= self.min_level.severity

    def log(
        self, level: LogLevel | str, message: Any, context: Mapping[str, Any] | None = None
    ) -> None:
        event = LogEvent(
            level=LogLevel.parse(level),
            message=message,
            context=context if context is not None else {},
        )
        if not self.is_enabled_for(event.level):
            logger.debug(
                "Dropped %s event below threshold %s", event.level.value, self.min_level.value
            )
            return
        self._dispatch(event)

    def _dispatch(self, event: LogEvent) -> None:
        if self.sink is None:
            raise MissingSinkError("Logger has no sink configured")

        text = interpolate(event.message, event.context)
        line = self.formatter.format(event.level.value, text, event.context)
        self.sink.write(line)

        if self.observers is not None:
            self.observers.notify_all(event.level, event.message, event.context)
