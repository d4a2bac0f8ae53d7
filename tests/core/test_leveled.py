from __future__ import annotations

import pytest

from rotalog.core.leveled import LeveledLogger
from rotalog.core.models import LogLevel


def test_subclass_without_log_cannot_be_built() -> None:
    class Incomplete(LeveledLogger):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_leveled_methods_delegate_to_log() -> None:
    class Collecting(LeveledLogger):
        def __init__(self) -> None:
            self.seen: list[tuple[LogLevel, str, object]] = []

        def log(self, level, message, context=None) -> None:
            self.seen.append((level, message, context))

    target = Collecting()
    target.notice("n", {"k": 1})
    target.debug("d")

    assert target.seen == [(LogLevel.NOTICE, "n", {"k": 1}), (LogLevel.DEBUG, "d", None)]
