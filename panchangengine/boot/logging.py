"""Logging setup for the panchangengine command line."""

from __future__ import annotations

import logging
import os
from typing import TextIO

from ..config import get_settings

__all__ = ["ErrCodeFilter", "configure_logging", "resolve_level"]

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(err_code)s %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_NO_CODE = "-"


class ErrCodeFilter(logging.Filter):
    """Ensure every record carries ``err_code``.

    Ephemeris fallbacks tag their warnings with codes such as
    ``EPHEMERIS_TITHI``; all other records are rendered with ``-``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "err_code"):
            record.err_code = _NO_CODE
        return True


def resolve_level(*candidates: str | int | None) -> int:
    """Return the first usable logging level among ``candidates``.

    Level names are case insensitive and numeric strings are accepted.
    Unusable values are skipped; :data:`logging.WARNING` is the default.
    """

    for value in candidates:
        if value is None:
            continue
        if isinstance(value, int):
            return value
        text = value.strip()
        if text.isdigit():
            return int(text)
        level = logging.getLevelName(text.upper()) if text else None
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging(level: str | int | None = None, *, stream: TextIO | None = None) -> int:
    """Send log records to ``stream`` (stderr by default) and return the level.

    The level comes from ``level``, then ``LOG_LEVEL``, then the
    ``logging.level`` setting.
    """

    effective = resolve_level(level, os.environ.get("LOG_LEVEL"), get_settings().logging.level)
    handler = logging.StreamHandler(stream)
    handler.addFilter(ErrCodeFilter())
    handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    logging.basicConfig(level=effective, handlers=[handler], force=True)
    return effective
