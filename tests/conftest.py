from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import pytest

FIXED_NOW = datetime(2025, 12, 30, 8, 12, 4, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def fixed_today() -> Callable[[], date]:
    return lambda: date(2025, 12, 30)


@pytest.fixture
def make_dated_files() -> Callable[[Path, str, int], list[Path]]:
    """Create ``count`` dated files with strictly increasing mtimes; return oldest first."""

    def _make(directory: Path, suffix: str, count: int) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths: list[Path] = []
        for i in range(count):
            path = directory / f"2025-01-{i + 1:02d}-{suffix}"
            path.write_text(f"line {i}\n", encoding="utf-8")
            stamp = 1_700_000_000 + i * 3600
            os.utime(path, (stamp, stamp))
            paths.append(path)
        return paths

    return _make


class RecordingObserver:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, dict[str, Any]]] = []

    def update(self, level: str, message: Any, context: Mapping[str, Any]) -> None:
        self.calls.append((level, message, dict(context)))


class FailingObserver:
    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("observer down")
        self.calls = 0

    def update(self, level: str, message: Any, context: Mapping[str, Any]) -> None:
        self.calls += 1
        raise self.exc


@pytest.fixture
def recording_observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def failing_observer() -> FailingObserver:
    return FailingObserver()


@pytest.fixture
def clear_rotalog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ROTALOG_DIR",
        "ROTALOG_FILENAME",
        "ROTALOG_MAX_FILES",
        "ROTALOG_MIN_LEVEL",
        "ROTALOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def observer_factory() -> Callable[[], RecordingObserver]:
    return RecordingObserver
