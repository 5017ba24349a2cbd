"""Shared utilities."""

from __future__ import annotations

from .i18n import (
    DEFAULT_LANGUAGE,
    LANGUAGES,
    Bilingual,
    Language,
    bilingual_table,
    message,
    normalize_language,
    translate,
)

__all__ = [
    "Bilingual",
    "DEFAULT_LANGUAGE",
    "LANGUAGES",
    "Language",
    "bilingual_table",
    "message",
    "normalize_language",
    "translate",
]
