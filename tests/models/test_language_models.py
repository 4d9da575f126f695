from __future__ import annotations

import pytest

from polytrans.models.const_languages import LANGUAGE_DICTIONARY, LANGUAGES
from polytrans.models.language_models import Language, LanguageDictionary, TranslationServices


@pytest.mark.parametrize(
    ("designation", "expected"),
    [
        ("ja", "ja"),
        ("JA", "ja"),
        (" de ", "de"),
        ("Japanese", "ja"),
        ("日本語", "ja"),
        ("jpn", "ja"),
        ("iw", "he"),
        ("zh", "zh-CN"),
        ("zh-hant", "zh-TW"),
        ("ZH-cn", "zh-CN"),
        ("mni-Mtei", "mni"),
        ("jw", "jv"),
        ("Chinese", "zh-CN"),
    ],
)
def test_try_get_language_resolves_designations(designation: str, expected: str) -> None:
    lang: Language | None = LANGUAGE_DICTIONARY.try_get_language(designation)

    assert lang is not None
    assert lang.iso6391 == expected


@pytest.mark.parametrize("designation", ["", None, "xx-unknown", "Elvish"])
def test_try_get_language_returns_none_for_unknown(designation: str | None) -> None:
    assert LANGUAGE_DICTIONARY.try_get_language(designation) is None


def test_get_language_raises_key_error() -> None:
    with pytest.raises(KeyError, match="xx-unknown"):
        LANGUAGE_DICTIONARY.get_language("xx-unknown")


def test_mapping_interface_uses_canonical_codes() -> None:
    assert LANGUAGE_DICTIONARY["zh-cn"] is LANGUAGES["zh-CN"]
    assert "zh-CN" in list(LANGUAGE_DICTIONARY)
    assert len(LANGUAGE_DICTIONARY) == len(LANGUAGES)
    with pytest.raises(KeyError):
        _ = LANGUAGE_DICTIONARY["iw"]


def test_aliases_are_lower_cased() -> None:
    assert LANGUAGE_DICTIONARY.aliases["mni-mtei"] == "mni"
    assert LANGUAGE_DICTIONARY.aliases["japanese"] == "ja"


def test_language_equality_uses_iso6391_only() -> None:
    first = Language("Japanese", "日本語", "ja", "jpn")
    second = Language("Nihongo", "にほんご", "ja", "xxx", TranslationServices.GOOGLE)

    assert first == second
    assert hash(first) == hash(second)
    assert first != LANGUAGE_DICTIONARY["de"]
    assert str(first) == "ja"


def test_service_support_table() -> None:
    assert LANGUAGE_DICTIONARY["ja"].supported_services == TranslationServices.ALL
    assert LANGUAGE_DICTIONARY["aa"].is_service_supported(TranslationServices.GOOGLE)
    assert not LANGUAGE_DICTIONARY["aa"].is_service_supported(TranslationServices.BING)
    assert LANGUAGE_DICTIONARY["tlh"].is_service_supported(TranslationServices.MICROSOFT)
    assert not LANGUAGE_DICTIONARY["tlh"].is_service_supported(TranslationServices.GOOGLE)
    assert not LANGUAGE_DICTIONARY["as"].is_service_supported(TranslationServices.YANDEX)
    assert LANGUAGE_DICTIONARY["jv"].is_service_supported(TranslationServices.GOOGLE | TranslationServices.YANDEX)


def test_aliases_to_unknown_languages_are_rejected() -> None:
    languages: dict[str, Language] = {"ja": Language("Japanese", "日本語", "ja", "jpn")}

    with pytest.raises(ValueError, match="xx"):
        LanguageDictionary(languages, {"foo": "xx"})
