"""Leveled, pluggable logging core with date-rotated file output."""

from __future__ import annotations

from .config import LoggerSettings, build_logger, resolve_settings
from .core import (
    CallbackObserver,
    CSVFormatter,
    EmailLogObserver,
    FormatError,
    Formatter,
    HtmlFormatter,
    JSONFormatter,
    LineFormatter,
    LogEvent,
    LogLevel,
    LogObserver,
    Logger,
    LoggerBridgeHandler,
    MissingSinkError,
    ObserverHandle,
    ObserverNotificationError,
    ObserverRegistry,
    RotalogError,
    RotatingFileSink,
    build_formatter,
    interpolate,
)

__all__ = [
    "CSVFormatter",
    "CallbackObserver",
    "EmailLogObserver",
    "FormatError",
    "Formatter",
    "HtmlFormatter",
    "JSONFormatter",
    "LineFormatter",
    "LogEvent",
    "LogLevel",
    "LogObserver",
    "Logger",
    "LoggerBridgeHandler",
    "LoggerSettings",
    "MissingSinkError",
    "ObserverHandle",
    "ObserverNotificationError",
    "ObserverRegistry",
    "RotalogError",
    "RotatingFileSink",
    "build_formatter",
    "build_logger",
    "interpolate",
    "resolve_settings",
]
