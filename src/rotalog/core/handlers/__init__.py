"""Log sinks."""

from __future__ import annotations

from .rotating import RotatingFileSink

__all__ = ["RotatingFileSink"]
