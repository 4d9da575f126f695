from __future__ import annotations

import asyncio
import re
from typing import TYPE_CHECKING

import pytest

from polytrans.core.trans.engines.trans_google import (
    TTS_API_URL,
    GoogleTranslation,
    make_token,
)
from polytrans.core.trans.interface import (
    BackendOperationError,
    DisposedStateError,
    UnsupportedLanguageError,
)
from polytrans.handlers.async_comm import AsyncCommError
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.translation_models import TranslationResult, TransliterationResult

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from polytrans.models.config_models import Config


@pytest.fixture
def engine(config: Config, fake_http: MagicMock) -> GoogleTranslation:
    inst = GoogleTranslation()
    inst.initialize(config)
    inst._http = fake_http
    return inst


def test_make_token_format() -> None:
    now: float = 1_700_000_000.0
    token: str = make_token("hello", now=now)

    assert re.fullmatch(r"\d+\.\d+", token)
    first, second = (int(part) for part in token.split("."))
    assert first < 1_000_000
    assert first ^ (int(now) // 3600) == second


def test_make_token_is_deterministic_per_hour() -> None:
    assert make_token("hello", now=3600.0) == make_token("hello", now=3600.0 + 1800)
    assert make_token("hello", now=3600.0) != make_token("hello", now=3600.0 * 500)
    assert make_token("hello", now=3600.0) != make_token("world", now=3600.0)


def test_make_token_handles_non_ascii() -> None:
    assert re.fullmatch(r"\d+\.\d+", make_token("こんにちは世界", now=0.0))


def test_initialize_uses_defaults(config: Config) -> None:
    inst = GoogleTranslation()
    inst.initialize(config)

    assert inst.api_url == GoogleTranslation.DEFAULT_API_URL
    assert inst.engine_attributes.supports_text_to_speech is True
    assert inst.has_dedicated_detection_api is False


def test_initialize_uses_configured_api_url(config: Config) -> None:
    config.GOOGLE.API_URL = "https://translate.example.test/translate_a/single"
    inst = GoogleTranslation()
    inst.initialize(config)

    assert inst.api_url == "https://translate.example.test/translate_a/single"


@pytest.mark.asyncio
async def test_translate(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {
        "sentences": [{"trans": "Hallo ", "orig": "Hello "}, {"trans": "Welt", "orig": "world"}],
        "src": "en",
        "confidence": 0.97,
    }

    result: TranslationResult = await engine.translate("Hello world", "de")

    assert result.translation == "Hallo Welt"
    assert result.source_language == LANGUAGE_DICTIONARY["en"]
    assert result.target_language == LANGUAGE_DICTIONARY["de"]
    assert result.confidence == pytest.approx(0.97)
    assert result.transliteration is None
    assert result.service == "google"

    kwargs = fake_http.post.await_args.kwargs
    assert kwargs["url"] == GoogleTranslation.DEFAULT_API_URL
    assert kwargs["data"] == {"q": "Hello world"}
    assert ("sl", "auto") in kwargs["params"]
    assert ("tl", "de") in kwargs["params"]
    assert ("client", "gtx") in kwargs["params"]


@pytest.mark.asyncio
async def test_translate_patches_javanese_code(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"sentences": [{"trans": "Halo"}], "src": "en"}

    await engine.translate("Hello", "jv", "en")

    params = fake_http.post.await_args.kwargs["params"]
    assert ("tl", "jw") in params
    assert ("sl", "en") in params


@pytest.mark.asyncio
async def test_transliterate(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {
        "sentences": [{"trans": "こんにちは"}, {"translit": "Kon'nichiwa"}],
        "src": "en",
    }

    result: TransliterationResult = await engine.transliterate("Hello", "ja")

    assert result.transliteration == "Kon'nichiwa"
    assert result.target_language == LANGUAGE_DICTIONARY["ja"]


@pytest.mark.asyncio
async def test_transliterate_without_transliteration_fails(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"sentences": [{"trans": "Hallo"}], "src": "en"}

    with pytest.raises(BackendOperationError, match="transliteration"):
        await engine.transliterate("Hello", "de")


@pytest.mark.asyncio
async def test_detect_language(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"sentences": [{"trans": "Hello"}], "src": "fr"}

    assert await engine.detect_language("Bonjour") == LANGUAGE_DICTIONARY["fr"]


@pytest.mark.asyncio
async def test_transport_error_is_wrapped(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.side_effect = AsyncCommError("Unable to connect to the server.")

    with pytest.raises(BackendOperationError) as exc_info:
        await engine.translate("Hello", "de")

    assert exc_info.value.service == "google"
    assert isinstance(exc_info.value.__cause__, AsyncCommError)


@pytest.mark.asyncio
async def test_invalid_response_is_wrapped(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = {"unexpected": True}

    with pytest.raises(BackendOperationError, match="invalid response"):
        await engine.translate("Hello", "de")


@pytest.mark.asyncio
async def test_unsupported_language_is_rejected_before_request(
    engine: GoogleTranslation, fake_http: MagicMock
) -> None:
    with pytest.raises(UnsupportedLanguageError):
        await engine.translate("Hello", "tlh")

    fake_http.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_text_to_speech_joins_chunks(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    fake_http.get.return_value = b"mp3"
    text: str = " ".join(["word"] * 100)  # 499 characters, three chunks

    audio: bytes = await engine.text_to_speech(text, "en")

    assert audio == b"mp3" * 3
    assert fake_http.get.await_count == 3
    kwargs = fake_http.get.await_args.kwargs
    assert kwargs["url"] == TTS_API_URL
    assert kwargs["params"]["tl"] == "en"
    assert kwargs["params"]["total"] == "3"
    assert kwargs["decode"] == "bytes"


@pytest.mark.asyncio
async def test_text_to_speech_failure_cancels_remaining_chunks(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    cancelled: list[str] = []

    async def fetch(**kwargs) -> bytes:
        idx: str = kwargs["params"]["idx"]
        if idx == "0":
            await asyncio.sleep(0)
            msg = "Unable to connect to the server."
            raise AsyncCommError(msg)
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.append(idx)
            raise
        return b"mp3"

    fake_http.get.side_effect = fetch

    with pytest.raises(BackendOperationError) as exc_info:
        await engine.text_to_speech(" ".join(["word"] * 100), "en")

    assert isinstance(exc_info.value.__cause__, AsyncCommError)
    assert sorted(cancelled) == ["1", "2"]


@pytest.mark.asyncio
async def test_text_to_speech_rejects_language_without_voice(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    with pytest.raises(UnsupportedLanguageError):
        await engine.text_to_speech("Qafaraf", "aa")

    fake_http.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_close_releases_transport(engine: GoogleTranslation, fake_http: MagicMock) -> None:
    await engine.close()

    fake_http.close.assert_awaited_once()
    with pytest.raises(DisposedStateError):
        await engine.translate("Hello", "de")
