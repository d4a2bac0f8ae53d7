"""Exception types raised by the logging core."""

from __future__ import annotations

from typing import Any


class RotalogError(Exception):
    """Base class for library errors."""


class MissingSinkError(RotalogError):
    """Raised when a write is attempted on a logger without a sink."""


class FormatError(RotalogError):
    """Raised when a formatter cannot render an event (e.g. non-serializable context)."""


class ObserverNotificationError(RotalogError):
    """Raised after a fan-out in which one or more observers failed.

    ``failures`` holds ``(observer, exception)`` pairs in dispatch order.
    """

    def __init__(self, failures: list[tuple[Any, BaseException]]) -> None:
        self.failures = failures
        names = ", ".join(type(obs).__name__ for obs, _ in failures)
        super().__init__(f"{len(failures)} observer(s) failed: {names}")
