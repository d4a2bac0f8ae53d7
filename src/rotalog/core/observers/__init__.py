"""Observer registry and bundled observers."""

from __future__ import annotations

from .base import CallbackObserver, LogObserver, ObserverHandle
from .mailer import EmailLogObserver
from .registry import ObserverRegistry

__all__ = [
    "CallbackObserver",
    "EmailLogObserver",
    "LogObserver",
    "ObserverHandle",
    "ObserverRegistry",
]
