"""Bridge from the stdlib ``logging`` module into a leveled log target."""

from __future__ import annotations

import logging

from .leveled import LeveledLogger
from .models import LogLevel

# (threshold, level) pairs, highest first; levelno rounds down to the nearest entry.
_LEVELNO_MAP: tuple[tuple[int, LogLevel], ...] = (
    (logging.CRITICAL, LogLevel.CRITICAL),
    (logging.ERROR, LogLevel.ERROR),
    (logging.WARNING, LogLevel.WARNING),
    (logging.INFO, LogLevel.INFO),
)


def level_from_levelno(levelno: int) -> LogLevel:
    for threshold, level in _LEVELNO_MAP:
        if levelno >= threshold:
            return level
    return LogLevel.DEBUG


class LoggerBridgeHandler(logging.Handler):
    """``logging.Handler`` that forwards records to a Logger or ObserverRegistry.

    Structured context is taken from ``extra={"context": {...}}``. Records emitted
    by this package's own loggers are skipped so the handler can sit on the root
    logger without feeding back into itself.
    """

    def __init__(self, target: LeveledLogger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == "rotalog" or record.name.startswith("rotalog."):
            return
        try:
            context = getattr(record, "context", None)
            self.target.log(
                level_from_levelno(record.levelno),
                record.getMessage(),
                dict(context) if isinstance(context, dict) else {},
            )
        except Exception:
            self.handleError(record)
