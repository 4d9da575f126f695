from __future__ import annotations

import re
from typing import TYPE_CHECKING

import pytest

from polytrans.core.trans.engines.trans_yandex import TRANSLIT_API_URL, YandexTranslation
from polytrans.core.trans.interface import (
    BackendOperationError,
    TranslationRateLimitError,
    UnsupportedLanguageError,
)
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.translation_models import TranslationResult, TransliterationResult

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from polytrans.models.config_models import Config


@pytest.fixture
def engine(config: Config, fake_http: MagicMock) -> YandexTranslation:
    inst = YandexTranslation()
    inst.initialize(config)
    inst._http = fake_http
    return inst


def test_initialize(config: Config) -> None:
    inst = YandexTranslation()
    inst.initialize(config)

    assert inst.api_url == "http://translate.yandex.net/api/v1/tr.json"
    assert inst.has_dedicated_detection_api is True


@pytest.mark.asyncio
async def test_translate(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 200, "lang": "en-de", "text": ["Hallo ", "Welt"]}

    result: TranslationResult = await engine.translate("Hello world", "de")

    assert result.translation == "Hallo Welt"
    assert result.source_language == LANGUAGE_DICTIONARY["en"]
    assert result.target_language == LANGUAGE_DICTIONARY["de"]

    kwargs = fake_http.post.await_args.kwargs
    assert kwargs["url"] == "http://translate.yandex.net/api/v1/tr.json/translate"
    assert kwargs["data"] == {"text": "Hello world", "lang": "de"}
    assert kwargs["params"]["srv"] == "android"
    assert re.fullmatch(r"[0-9a-f]{32}", kwargs["params"]["ucid"])


@pytest.mark.asyncio
async def test_translate_with_source_and_stable_ucid(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 200, "lang": "en-de", "text": ["Hallo"]}

    await engine.translate("Hello", "de", "en")
    first_ucid: str = fake_http.post.await_args.kwargs["params"]["ucid"]
    await engine.translate("Hello", "de", "en")

    assert fake_http.post.await_args.kwargs["data"]["lang"] == "en-de"
    assert fake_http.post.await_args.kwargs["params"]["ucid"] == first_ucid


@pytest.mark.asyncio
async def test_error_code_in_payload(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 502, "message": "Invalid parameter: lang"}

    with pytest.raises(BackendOperationError, match="Invalid parameter") as exc_info:
        await engine.translate("Hello", "de")

    assert exc_info.value.service == "yandex"


@pytest.mark.asyncio
async def test_rate_limit_code_in_payload(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 429, "message": "Too many requests"}

    with pytest.raises(TranslationRateLimitError):
        await engine.translate("Hello", "de")


@pytest.mark.asyncio
async def test_unparseable_language_pair(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 200, "lang": "de", "text": ["Hallo"]}

    with pytest.raises(BackendOperationError, match="language codes"):
        await engine.translate("Hello", "de")


@pytest.mark.asyncio
async def test_unsupported_language(engine: YandexTranslation, fake_http: MagicMock) -> None:
    with pytest.raises(UnsupportedLanguageError):
        await engine.translate("Hello", "as")

    fake_http.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_detect_language(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 200, "lang": "fr"}

    assert await engine.detect_language("Bonjour") == LANGUAGE_DICTIONARY["fr"]
    kwargs = fake_http.post.await_args.kwargs
    assert kwargs["url"].endswith("/detect")
    assert kwargs["data"] == {"text": "Bonjour", "hint": "en"}


@pytest.mark.asyncio
async def test_detect_language_without_result(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"code": 200, "lang": ""}

    with pytest.raises(BackendOperationError, match="detected language"):
        await engine.detect_language("???")


@pytest.mark.asyncio
async def test_transliterate_with_source(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = '"privet mir"'

    result: TransliterationResult = await engine.transliterate("привет мир", "en", "ru")

    assert result.transliteration == "privet mir"
    assert result.source_language == LANGUAGE_DICTIONARY["ru"]
    kwargs = fake_http.post.await_args.kwargs
    assert kwargs["url"] == TRANSLIT_API_URL
    assert kwargs["data"]["lang"] == "ru-en"


@pytest.mark.asyncio
async def test_transliterate_detects_missing_source(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.side_effect = [{"code": 200, "lang": "ru"}, "privet"]

    result: TransliterationResult = await engine.transliterate("привет", "en")

    assert result.transliteration == "privet"
    assert result.source_language == LANGUAGE_DICTIONARY["ru"]
    assert fake_http.post.await_count == 2


@pytest.mark.asyncio
async def test_empty_transliteration_fails(engine: YandexTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = '""'

    with pytest.raises(BackendOperationError, match="transliteration"):
        await engine.transliterate("привет", "en", "ru")
