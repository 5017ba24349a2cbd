"""Bilingual string records for routing user-facing text.

Every label the library returns exists in a Sanskrit (Devanagari) and an
English rendering. Rather than branching on the language at each call
site, strings are stored as :class:`Bilingual` records and resolved with
:meth:`Bilingual.get` or :func:`translate`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Literal, get_args

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


Language = Literal["sanskrit", "english"]

LANGUAGES: Final[tuple[str, ...]] = get_args(Language)
DEFAULT_LANGUAGE: Final[Language] = "sanskrit"


def normalize_language(language: str | None) -> Language:
    """Return ``language`` validated against :data:`LANGUAGES`.

    ``None`` resolves to :data:`DEFAULT_LANGUAGE`; matching is case
    insensitive. Unknown values raise :class:`ValueError`.
    """

    if language is None:
        return DEFAULT_LANGUAGE
    candidate = str(language).strip().lower()
    if candidate not in LANGUAGES:
        options = ", ".join(LANGUAGES)
        raise ValueError(f"Unsupported language {language!r}. Options: {options}")
    return candidate  # type: ignore[return-value]


@dataclass(frozen=True)
class Bilingual:
    """A single user-facing string in both supported languages."""

    sanskrit: str
    english: str

    def get(self, language: str | None = None) -> str:
        return getattr(self, normalize_language(language))

    def to_payload(self) -> dict[str, str]:
        return {"sanskrit": self.sanskrit, "english": self.english}


def bilingual_table(pairs: Iterable[tuple[str, str]]) -> tuple[Bilingual, ...]:
    """Build an immutable, index-aligned table from ``(sanskrit, english)`` pairs."""

    return tuple(Bilingual(sanskrit=sa, english=en) for sa, en in pairs)


_MESSAGES: Final[Mapping[str, Bilingual]] = MappingProxyType({
    # Paksha ---------------------------------------------------------------
    "paksha.shukla": Bilingual("शुक्ल पक्ष", "Shukla Paksha"),
    "paksha.krishna": Bilingual("कृष्ण पक्ष", "Krishna Paksha"),
    # Karana placeholder ----------------------------------------------------
    "karana.placeholder": Bilingual("बव", "Bava"),
    # Puja periods ----------------------------------------------------------
    "puja.brahma_muhurta.time": Bilingual("ब्रह्म मुहूर्त", "Brahma Muhurta"),
    "puja.brahma_muhurta.significance": Bilingual("सर्वोत्तम पूजा काल", "Best worship time"),
    "puja.evening.time": Bilingual("संध्या काल", "Evening Time"),
    "puja.evening.significance": Bilingual("प्रदोष पूजा का समय", "Pradosh worship time"),
    "puja.midnight.time": Bilingual("निशीथ काल", "Midnight Time"),
    "puja.midnight.significance": Bilingual("शिवरात्रि पूजा काल", "Shivaratri worship time"),
    "puja.general.time": Bilingual("सामान्य काल", "General Time"),
    "puja.general.significance": Bilingual("नियमित पूजा समय", "Regular worship time"),
    # Day-based Shiv Vaas observances --------------------------------------
    "shiv_vaas.monday.type": Bilingual("सोमवार व्रत", "Monday Fast"),
    "shiv_vaas.monday.significance": Bilingual(
        "भगवान शिव को समर्पित पवित्र दिन", "Sacred day dedicated to Lord Shiva"
    ),
    "shiv_vaas.shivaratri.type": Bilingual("मासिक शिवरात्रि", "Monthly Shivaratri"),
    "shiv_vaas.shivaratri.significance": Bilingual(
        "मासिक शिवरात्रि - अत्यंत पुण्यकारी", "Monthly Shivaratri - highly auspicious"
    ),
    "shiv_vaas.pradosh.type": Bilingual("प्रदोष व्रत", "Pradosh Fast"),
    "shiv_vaas.pradosh.significance": Bilingual(
        "प्रदोष काल में शिव पूजा अत्यंत फलदायी",
        "Shiva worship during Pradosh time is highly fruitful",
    ),
    "shiv_vaas.shravan_monday.type": Bilingual("श्रावण सोमवार व्रत", "Shravan Monday Fast"),
    "shiv_vaas.shravan_monday.significance": Bilingual(
        "श्रावण मास का सोमवार - सर्वोत्तम शिव व्रत",
        "Shravan month Monday - supreme Shiva fast",
    ),
})


def message(key: str) -> Bilingual:
    """Return the :class:`Bilingual` record registered under ``key``."""

    try:
        return _MESSAGES[key]
    except KeyError as exc:
        raise KeyError(f"Unknown message key {key!r}") from exc


def translate(key: str, language: str | None = None) -> str:
    """Return the string for ``key`` rendered in ``language``."""

    return message(key).get(language)
