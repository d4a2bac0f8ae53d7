"""Observer fan-out.

The registry is a log target of its own: ``log`` only dispatches to attached
observers, it neither formats nor persists anything.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from ..errors import ObserverNotificationError
from ..leveled import LeveledLogger
from ..models import LogLevel
from .base import LogObserver, ObserverHandle

logger = logging.getLogger(__name__)


class ObserverRegistry(LeveledLogger):
    """Identity-keyed set of observers, notified in attach order.

    Handles carry a token from a monotonic counter, never reused, so a stale
    handle cannot detach an observer attached later.
    """

    def __init__(self) -> None:
        self._tokens = itertools.count(1)
        self._observers: dict[int, LogObserver] = {}  # token -> observer
        self._token_by_id: dict[int, int] = {}  # id(observer) -> token

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[LogObserver]:
        return iter(list(self._observers.values()))

    def _token_of(self, observer: object) -> int | None:
        token = self._token_by_id.get(id(observer))
        if token is not None and self._observers.get(token) is observer:
            return token
        return None

    def __contains__(self, observer: object) -> bool:
        return self._token_of(observer) is not None

    def attach(self, observer: LogObserver) -> ObserverHandle:
        """Register ``observer``; attaching the same instance again is a no-op."""
        token = self._token_of(observer)
        if token is None:
            token = next(self._tokens)
            self._observers[token] = observer
            self._token_by_id[id(observer)] = token
            logger.debug("Attached observer %r", observer)
        return ObserverHandle(token=token)

    def detach(self, observer: LogObserver | ObserverHandle) -> None:
        """Remove an observer by instance or handle; unknown ones are ignored."""
        if isinstance(observer, ObserverHandle):
            token: int | None = observer.token
        else:
            token = self._token_of(observer)
        if token is None:
            return
        removed = self._observers.pop(token, None)
        if removed is None:
            return
        self._token_by_id.pop(id(removed), None)
        logger.debug("Detached observer %r", removed)

    def notify_all(
        self, level: LogLevel | str, message: Any, context: Mapping[str, Any] | None = None
    ) -> None:
        """Call ``update`` on every observer.

        A failing observer does not stop the fan-out; failures are raised together
        as ObserverNotificationError once every observer has been called.
        """
        name = LogLevel.parse(level).value
        # one read-only view shared by every observer
        ctx = MappingProxyType(dict(context) if context is not None else {})
        failures: list[tuple[Any, BaseException]] = []

        for observer in list(self._observers.values()):
            try:
                observer.update(name, message, ctx)
            except Exception as exc:
                logger.warning("Observer %r failed on %s event: %s", observer, name, exc)
                failures.append((observer, exc))

        if failures:
            raise ObserverNotificationError(failures) from failures[0][1]

    def log(
        self, level: LogLevel | str, message: Any, context: Mapping[str, Any] | None = None
    ) -> None:
        self.notify_all(level, message, context)
