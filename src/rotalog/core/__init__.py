"""Logging core: facade, formatters, rotating sink and observers."""

from __future__ import annotations

from .bridge import LoggerBridgeHandler, level_from_levelno
from .errors import FormatError, MissingSinkError, ObserverNotificationError, RotalogError
from .formats import (
    CSVFormatter,
    Formatter,
    HtmlFormatter,
    JSONFormatter,
    LineFormatter,
    build_formatter,
)
from .handlers import RotatingFileSink
from .interpolation import interpolate
from .leveled import LeveledLogger
from .logger import Logger
from .models import LogEvent, LogLevel
from .observers import (
    CallbackObserver,
    EmailLogObserver,
    LogObserver,
    ObserverHandle,
    ObserverRegistry,
)

__all__ = [
    "CSVFormatter",
    "CallbackObserver",
    "EmailLogObserver",
    "FormatError",
    "Formatter",
    "HtmlFormatter",
    "JSONFormatter",
    "LeveledLogger",
    "LineFormatter",
    "LogEvent",
    "LogLevel",
    "LogObserver",
    "Logger",
    "LoggerBridgeHandler",
    "MissingSinkError",
    "ObserverHandle",
    "ObserverNotificationError",
    "ObserverRegistry",
    "RotalogError",
    "RotatingFileSink",
    "build_formatter",
    "interpolate",
    "level_from_levelno",
]
