"""Observer interface and small adapters."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class LogObserver(Protocol):
    """Receives raw (uninterpolated) events from an ObserverRegistry."""

    def update(self, level: str, message: Any, context: Mapping[str, Any]) -> None:
        """Handle one event. Should not raise on malformed context."""
        ...


@dataclass(frozen=True, slots=True)
class ObserverHandle:
    """Opaque identity token returned by ``ObserverRegistry.attach``."""

    token: int


@dataclass(eq=False, slots=True)
class CallbackObserver:
    """Adapt a plain callable ``fn(level, message, context)`` to the observer interface."""

    fn: Callable[[str, Any, Mapping[str, Any]], None]

    def update(self, level: str, message: Any, context: Mapping[str, Any]) -> None:
        self.fn(level, message, context)
