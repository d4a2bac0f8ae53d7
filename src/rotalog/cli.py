"""Command-line entry point: write one log record through a configured Logger."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from rotalog.config import LoggerSettings, build_logger, resolve_settings
from rotalog.core.errors import RotalogError
from rotalog.core.models import LogLevel

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure stderr diagnostics; level comes from ROTALOG_LOG_LEVEL."""
    level_name = os.getenv("ROTALOG_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_level(s: str) -> LogLevel:
    try:
        return LogLevel.parse(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_context(s: str) -> tuple[str, str]:
    key, sep, value = s.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError("context must look like key=value")
    return key.strip(), value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rotalog",
        description="Write a leveled, interpolated log record to a date-rotated file.",
    )
    p.add_argument("message", help="Message template; {{key}} is replaced from --context")
    p.add_argument("--level", type=_parse_level, default=LogLevel.INFO, help="Default: INFO")
    p.add_argument(
        "--context",
        "-c",
        type=_parse_context,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Context entry (repeatable)",
    )

    # Settings (override ROTALOG_* environment variables)
    p.add_argument("--dir", dest="directory", default=None, help="Log directory (env: ROTALOG_DIR)")
    p.add_argument("--filename", default=None, help="File suffix, e.g. app.log (env: ROTALOG_FILENAME)")
    p.add_argument("--max-files", type=int, default=None, help="Files kept (env: ROTALOG_MAX_FILES)")
    p.add_argument(
        "--format",
        choices=["line", "json", "csv", "html"],
        default=None,
        help="Formatter (env: ROTALOG_FORMAT)",
    )
    p.add_argument("--min-level", type=_parse_level, default=None, help="env: ROTALOG_MIN_LEVEL")
    p.add_argument(
        "--rotate-on-new-file",
        action="store_true",
        default=None,
        help="Also enforce retention whenever a new dated file is started",
    )
    return p


def main(argv: Sequence[str] | None = None) -> None:
    _configure_logging()
    args = _build_parser().parse_args(argv)

    try:
        settings = resolve_settings()
        overrides = {
            key: getattr(args, key)
            for key in ("directory", "filename", "max_files", "format", "min_level", "rotate_on_new_file")
            if getattr(args, key) is not None
        }
        if overrides:
            try:
                settings = LoggerSettings.model_validate({**settings.model_dump(), **overrides})
            except ValidationError as e:
                raise ValueError(str(e)) from e

        logger = build_logger(settings)
        if not logger.is_enabled_for(args.level):
            LOGGER.info("Dropped %s record below threshold %s", args.level.value, settings.min_level)
            return
        logger.log(args.level, args.message, dict(args.context))
    except (ValueError, RotalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    except OSError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)

    print(f"Wrote {args.level.value} record to {logger.sink.active_path()}")


if __name__ == "__main__":
    main()
