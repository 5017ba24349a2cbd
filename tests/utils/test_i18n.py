from __future__ import annotations

import pytest

from panchangengine.utils.i18n import (
    Bilingual,
    bilingual_table,
    message,
    normalize_language,
    translate,
)


def test_normalize_language() -> None:
    assert normalize_language(None) == "sanskrit"
    assert normalize_language(" English ") == "english"
    with pytest.raises(ValueError, match="Unsupported language"):
        normalize_language("hindi")


def test_bilingual_get() -> None:
    label = Bilingual("बव", "Bava")

    assert label.get() == "बव"
    assert label.get("english") == "Bava"
    assert label.to_payload() == {"sanskrit": "बव", "english": "Bava"}


def test_bilingual_table_preserves_order() -> None:
    table = bilingual_table((("क", "a"), ("ख", "b")))

    assert [item.english for item in table] == ["a", "b"]
    assert isinstance(table, tuple)


def test_translate_known_keys() -> None:
    assert translate("paksha.shukla", "english") == "Shukla Paksha"
    assert translate("paksha.krishna") == "कृष्ण पक्ष"
    assert translate("puja.general.significance", "english") == "Regular worship time"


def test_unknown_message_key() -> None:
    with pytest.raises(KeyError):
        message("does.not.exist")


def test_message_table_is_read_only() -> None:
    from panchangengine.utils import i18n

    with pytest.raises(TypeError):
        i18n._MESSAGES["paksha.shukla"] = Bilingual("x", "y")  # type: ignore[index]
    assert translate("paksha.shukla", "english") == "Shukla Paksha"
