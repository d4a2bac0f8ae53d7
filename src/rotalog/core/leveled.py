"""Leveled logging methods shared by every log target."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import LogLevel


class LeveledLogger(ABC):
    """Base adding one method per level; subclasses implement ``log``."""

    @abstractmethod
    def log(
        self, level: LogLevel | str, message: Any, context: Mapping[str, Any] | None = None
    ) -> None:
        """Handle one event at ``level``."""

    def emergency(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.EMERGENCY, message, context)

    def alert(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.ALERT, message, context)

    def critical(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.CRITICAL, message, context)

    def error(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.ERROR, message, context)

    def warning(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.WARNING, message, context)

    def notice(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.NOTICE, message, context)

    def info(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.INFO, message, context)

    def debug(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.DEBUG, message, context)
