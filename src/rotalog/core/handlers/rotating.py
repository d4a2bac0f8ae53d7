"""Rotating file sink.

Appends each rendered record, followed by a line terminator, to a file named
after the current local date (``<YYYY-MM-DD>-<filename>``) and keeps at most
``max_files`` such files in the directory, deleting the least recently modified
ones. Records are opaque: a multi-line record stays multi-line on disk.

Retention is enforced when the sink is constructed (and on every explicit
``rotate()`` call). With ``rotate_on_new_file=True`` it is also enforced each time
a write creates a new dated file; otherwise a long-lived process may accumulate
more than ``max_files`` files until the sink is rebuilt.
"""

from __future__ import annotations

import glob
import logging
import os
import sys
import threading
from collections.abc import Callable
from datetime import date
from pathlib import Path

if sys.platform != "win32":
    import fcntl
else:  # pragma: no cover
    fcntl = None

logger = logging.getLogger(__name__)


class RotatingFileSink:
    """Append-only, date-keyed file sink with count-based retention."""

    def __init__(
        self,
        directory: str | Path,
        filename: str = "app.log",
        max_files: int = 5,
        *,
        today: Callable[[], date] = date.today,
        rotate_on_new_file: bool = False,
    ) -> None:
        if max_files < 1:
            raise ValueError("max_files must be >= 1")
        if not filename or os.sep in filename or "/" in filename:
            raise ValueError("filename must be a bare file name")

        self._directory = Path(directory)
        self._filename = filename
        self._max_files = max_files
        self._today = today
        self._rotate_on_new_file = rotate_on_new_file
        self._lock = threading.Lock()

        self._directory.mkdir(parents=True, exist_ok=True)
        self.rotate()

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def max_files(self) -> int:
        return self._max_files

    def active_path(self) -> Path:
        """Path of the file the next write goes to (recomputed per call)."""
        return self._directory / f"{self._today().isoformat()}-{self._filename}"

    def write(self, line: str) -> None:
        """Append ``line`` plus a line terminator to today's file.

        ``line`` is written as-is; a multi-line record (e.g. from HtmlFormatter)
        stays multi-line on disk.

        Raises OSError when the file cannot be opened or written.
        """
        path = self.active_path()
        data = line + "\n"

        with self._lock:
            created = not path.exists()
            with open(path, "a", encoding="utf-8") as f:
                if fcntl is not None:
                    fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                try:
                    f.write(data)
                    f.flush()
                finally:
                    if fcntl is not None:
                        fcntl.flock(f.fileno(), fcntl.LOCK_UN)

        if created:
            logger.debug("Started log file %s", path)
            if self._rotate_on_new_file:
                self.rotate()

    def _candidates(self) -> list[Path]:
        """Files matching ``*-<filename>``, most recently modified first."""
        stamped: list[tuple[float, Path]] = []
        for p in self._directory.glob(f"*-{glob.escape(self._filename)}"):
            try:
                if not p.is_file():
                    continue
                stamped.append((p.stat().st_mtime, p))
            except FileNotFoundError:
                # removed between listing and stat
                continue
        stamped.sort(key=lambda item: item[0], reverse=True)
        return [p for _, p in stamped]

    def rotate(self) -> list[Path]:
        """Delete candidates beyond the ``max_files`` most recent; return what was removed.

        Failed deletions are logged and skipped. Not safe against another sink
        rotating the same directory concurrently.
        """
        candidates = self._candidates()
        if len(candidates) < self._max_files:
            return []

        deleted: list[Path] = []
        for p in candidates[self._max_files :]:
            try:
                p.unlink()
            except OSError as exc:
                logger.warning("Could not delete rotated log file %s: %s", p, exc)
                continue
            logger.debug("Deleted rotated log file %s", p)
            deleted.append(p)
        return deleted
