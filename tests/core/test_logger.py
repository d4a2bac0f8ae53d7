from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from rotalog.core.errors import FormatError, MissingSinkError, ObserverNotificationError
from rotalog.core.formats import HtmlFormatter, JSONFormatter, LineFormatter
from rotalog.core.handlers import RotatingFileSink
from rotalog.core.logger import Logger
from rotalog.core.models import LogLevel
from rotalog.core.observers import ObserverRegistry


class CapturingFormatter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        self.calls.append((level, message, dict(context)))
        return f"{level}|{message}"


class RaisingFormatter:
    def format(self, level: str, message: Any, context: Mapping[str, Any]) -> str:
        raise FormatError("cannot render")


@pytest.fixture
def sink(tmp_path: Path, fixed_today) -> RotatingFileSink:
    return RotatingFileSink(tmp_path, "app.log", max_files=5, today=fixed_today)


def _lines(sink: RotatingFileSink) -> list[str]:
    return sink.active_path().read_text(encoding="utf-8").splitlines()


def test_leveled_methods_use_literal_level_names(sink) -> None:
    fmt = CapturingFormatter()
    logger = Logger(fmt, sink)

    logger.debug("d")
    logger.info("i")
    logger.notice("n")
    logger.warning("w")
    logger.error("e")
    logger.critical("c")
    logger.alert("a")
    logger.emergency("em")

    assert [c[0] for c in fmt.calls] == [level.value for level in LogLevel]
    assert len(_lines(sink)) == 8


def test_log_interpolates_and_passes_raw_context(sink) -> None:
    fmt = CapturingFormatter()
    logger = Logger(fmt, sink)

    logger.info("User {{user}} logged in", {"user": "admin", "ip": "10.0.0.1"})

    assert fmt.calls == [("INFO", "User admin logged in", {"user": "admin", "ip": "10.0.0.1"})]
    assert _lines(sink) == ["INFO|User admin logged in"]


def test_generic_log_accepts_level_names(sink) -> None:
    fmt = CapturingFormatter()
    Logger(fmt, sink).log("warning", "w")
    assert fmt.calls[0][0] == "WARNING"


def test_unknown_level_raises_value_error(sink) -> None:
    with pytest.raises(ValueError):
        Logger(CapturingFormatter(), sink).log("verbose", "x")


def test_missing_sink_raises_and_creates_nothing(tmp_path: Path) -> None:
    logger = Logger(LineFormatter())
    with pytest.raises(MissingSinkError):
        logger.error("no sink")
    assert list(tmp_path.iterdir()) == []


def test_format_error_skips_write_and_observers(sink, recording_observer) -> None:
    registry = ObserverRegistry()
    registry.attach(recording_observer)
    logger = Logger(RaisingFormatter(), sink, observers=registry)

    with pytest.raises(FormatError):
        logger.info("x")

    assert not sink.active_path().exists()
    assert recording_observer.calls == []


def test_json_formatter_failure_propagates(sink) -> None:
    logger = Logger(JSONFormatter(), sink)
    with pytest.raises(FormatError):
        logger.info("bad", {"obj": object()})
    assert not sink.active_path().exists()


def test_observers_receive_original_message_after_write(sink, recording_observer) -> None:
    registry = ObserverRegistry()
    registry.attach(recording_observer)
    logger = Logger(CapturingFormatter(), sink, observers=registry)

    logger.alert("User {{user}} locked", {"user": "admin"})

    assert recording_observer.calls == [("ALERT", "User {{user}} locked", {"user": "admin"})]
    assert _lines(sink) == ["ALERT|User admin locked"]


def test_observer_failure_surfaces_after_write(sink, failing_observer) -> None:
    registry = ObserverRegistry()
    registry.attach(failing_observer)
    logger = Logger(CapturingFormatter(), sink, observers=registry)

    with pytest.raises(ObserverNotificationError):
        logger.error("boom")

    assert _lines(sink) == ["ERROR|boom"]


def test_min_level_filters_everything_below(sink, recording_observer) -> None:
    fmt = CapturingFormatter()
    registry = ObserverRegistry()
    registry.attach(recording_observer)
    logger = Logger(fmt, sink, observers=registry, min_level="warning")

    logger.info("dropped")
    logger.notice("dropped")
    logger.warning("kept")
    logger.emergency("kept")

    assert [c[1] for c in fmt.calls] == ["kept", "kept"]
    assert len(recording_observer.calls) == 2
    assert _lines(sink) == ["WARNING|kept", "EMERGENCY|kept"]


def test_filtered_event_without_sink_is_silent() -> None:
    logger = Logger(LineFormatter(), min_level=LogLevel.ERROR)
    logger.debug("ignored")


def test_is_enabled_for() -> None:
    logger = Logger(LineFormatter(), min_level=LogLevel.NOTICE)
    assert logger.is_enabled_for("notice")
    assert not logger.is_enabled_for(LogLevel.INFO)
    assert Logger(LineFormatter()).is_enabled_for(LogLevel.DEBUG)


def test_write_k_lines_same_day(sink) -> None:
    logger = Logger(LineFormatter(date_format=None), sink)
    for i in range(10):
        logger.info("event {{n}}", {"n": i})

    lines = _lines(sink)
    assert len(lines) == 10
    assert [line.split(": ", 1)[1] for line in lines] == [
        f'event {i} {{"n": {i}}}' for i in range(10)
    ]


def test_threshold_drop_is_logged_at_debug(sink, caplog) -> None:
    logger = Logger(CapturingFormatter(), sink, min_level="error")

    with caplog.at_level(logging.DEBUG, logger="rotalog.core.logger"):
        logger.info("quiet")

    assert "Dropped INFO event below threshold ERROR" in caplog.text
    assert not sink.active_path().exists()


def test_html_records_span_several_lines(sink) -> None:
    logger = Logger(HtmlFormatter(), sink)
    logger.info("one call")

    content = sink.active_path().read_text(encoding="utf-8")
    assert content.count('<div class="log-entry') == 1
    assert len(content.splitlines()) > 1
