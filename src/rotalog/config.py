"""Logger configuration.

Settings are a pydantic model; ``resolve_settings`` layers ``ROTALOG_*`` environment
overrides on top, and ``build_logger`` wires formatter, sink and facade together.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.formats import build_formatter
from .core.handlers import RotatingFileSink
from .core.logger import Logger
from .core.models import LogLevel
from .core.observers import ObserverRegistry

FormatName = Literal["line", "json", "csv", "html"]


class LoggerSettings(BaseModel):
    directory: Path = Field(default=Path("logs"), description="Directory holding dated log files.")
    filename: str = Field(default="app.log", min_length=1, description="Suffix after '<date>-'.")
    max_files: int = Field(default=5, ge=1, description="Dated files kept after rotation.")
    min_level: LogLevel | None = Field(default=None, description="Drop events below this level.")
    format: FormatName = Field(default="line", description="Formatter short name.")
    rotate_on_new_file: bool = Field(
        default=False, description="Also rotate whenever a new dated file is started."
    )

    @field_validator("min_level", mode="before")
    @classmethod
    def parse_level(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        return LogLevel.parse(value)

    @field_validator("format", mode="before")
    @classmethod
    def lower_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


_ENV_OVERRIDES: dict[str, str] = {
    "directory": "ROTALOG_DIR",
    "filename": "ROTALOG_FILENAME",
    "min_level": "ROTALOG_MIN_LEVEL",
    "format": "ROTALOG_FORMAT",
}


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc


def resolve_settings(settings: LoggerSettings | None = None) -> LoggerSettings:
    """Return settings with optional env overrides applied."""
    if settings is None:
        settings = LoggerSettings()

    updates: dict[str, Any] = {}
    for key, env_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            updates[key] = value

    max_files = _env_int("ROTALOG_MAX_FILES")
    if max_files is not None:
        updates["max_files"] = max_files

    if not updates:
        return settings

    try:
        return LoggerSettings.model_validate({**settings.model_dump(), **updates})
    except ValidationError as exc:
        fields = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        env_names = {**_ENV_OVERRIDES, "max_files": "ROTALOG_MAX_FILES"}
        names = ", ".join(sorted(env_names.get(f, f) for f in fields))
        raise ValueError(f"Invalid environment override ({names})") from exc


def build_logger(
    settings: LoggerSettings | None = None,
    *,
    observers: ObserverRegistry | None = None,
) -> Logger:
    """Construct a Logger (formatter + rotating sink) from settings."""
    settings = settings or LoggerSettings()
    sink = RotatingFileSink(
        settings.directory,
        settings.filename,
        settings.max_files,
        rotate_on_new_file=settings.rotate_on_new_file,
    )
    return Logger(
        build_formatter(settings.format),
        sink,
        observers=observers,
        min_level=settings.min_level,
    )
