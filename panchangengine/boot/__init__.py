"""Process bootstrap helpers."""

from __future__ import annotations

from .logging import ErrCodeFilter, configure_logging, resolve_level

__all__ = ["ErrCodeFilter", "configure_logging", "resolve_level"]
