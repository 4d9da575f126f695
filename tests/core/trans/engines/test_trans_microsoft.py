from __future__ import annotations

import base64
import hashlib
import hmac
import json
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from urllib.parse import quote

import pytest

from polytrans.core.trans.engines import trans_microsoft as trans_microsoft_module
from polytrans.core.trans.engines.trans_microsoft import (
    MicrosoftTranslation,
    hot_patch,
    make_signature,
    token_expiration,
)
from polytrans.core.trans.interface import (
    BackendOperationError,
    CredentialAcquisitionError,
    UnsupportedLanguageError,
    ValidationError,
)
from polytrans.handlers.async_comm import AsyncCommError
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.translation_models import TranslationResult, TransliterationResult
from polytrans.models.voice_models import MicrosoftVoice

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from polytrans.models.config_models import Config


def make_jwt(claims: dict) -> str:
    payload: str = base64.urlsafe_b64encode(json.dumps(claims).encode("utf-8")).decode("ascii").rstrip("=")
    return f"eyJhbGciOiJIUzI1NiJ9.{payload}.c2lnbmF0dXJl"


def token_response(lifetime: int = 600) -> dict[str, str]:
    return {"t": make_jwt({"region": "westus", "exp": int(time.time()) + lifetime}), "r": "westus"}


@pytest.fixture
def engine(config: Config, fake_http: MagicMock) -> MicrosoftTranslation:
    inst = MicrosoftTranslation()
    inst.initialize(config)
    inst._http = fake_http
    return inst


def test_make_signature() -> None:
    now = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)
    guid: str = "0123456789abcdef0123456789abcdef"
    url: str = "dev.microsofttranslator-int.com/translate?api-version=3.0&to=de"

    signature: str = make_signature(url, now=now, guid=guid)

    prefix, digest, date, request_id = signature.split("::")
    assert prefix == "MSTranslatorAndroidApp"
    assert date == "Mon, 01 Jan 2024 00:00:00GMT"
    assert request_id == guid
    message: str = f"MSTranslatorAndroidApp{quote(url, safe='')}{date}{guid}".lower()
    expected = hmac.new(trans_microsoft_module._PRIVATE_KEY, message.encode("utf-8"), hashlib.sha256).digest()
    assert base64.b64decode(digest) == expected


def test_make_signature_generates_request_id() -> None:
    signature: str = make_signature("dev.microsofttranslator-int.com/detect")

    assert len(signature.split("::")[3]) == 32


def test_token_expiration() -> None:
    assert token_expiration(make_jwt({"exp": 1_700_000_000})) == 1_700_000_000.0


@pytest.mark.parametrize("token", ["not-a-jwt", make_jwt({"region": "westus"}), make_jwt({"exp": "soon"})])
def test_token_expiration_rejects_invalid_tokens(token: str) -> None:
    with pytest.raises(ValueError):
        token_expiration(token)


def test_hot_patch() -> None:
    assert hot_patch("zh-CN") == "zh-Hans"
    assert hot_patch("no") == "nb"
    assert hot_patch("de") == "de"


def test_initialize_strips_scheme(config: Config) -> None:
    config.MICROSOFT.API_URL = "https://api.example.test/"
    inst = MicrosoftTranslation()
    inst.initialize(config)

    assert inst.api_url == "api.example.test"
    assert inst.has_dedicated_detection_api is True


@pytest.mark.asyncio
async def test_translate(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = [
        {"detectedLanguage": {"language": "en", "score": 1.0}, "translations": [{"text": "Hallo", "to": "de"}]}
    ]

    result: TranslationResult = await engine.translate("Hello", "de")

    assert result.translation == "Hallo"
    assert result.source_language == LANGUAGE_DICTIONARY["en"]
    assert result.target_language == LANGUAGE_DICTIONARY["de"]
    assert result.confidence == 1.0

    kwargs = fake_http.post.await_args.kwargs
    assert kwargs["url"] == "https://dev.microsofttranslator-int.com/translate?api-version=3.0&to=de"
    assert kwargs["json_data"] == [{"Text": "Hello"}]
    assert kwargs["headers"]["X-MT-Signature"].startswith("MSTranslatorAndroidApp::")


@pytest.mark.asyncio
async def test_translate_with_source_uses_patched_codes(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = [{"translations": [{"text": "你好", "to": "zh-Hans"}]}]

    result: TranslationResult = await engine.translate("Hello", "zh-CN", "en")

    assert fake_http.post.await_args.kwargs["url"].endswith("&to=zh-Hans&from=en")
    assert result.source_language == LANGUAGE_DICTIONARY["en"]
    assert result.target_language == LANGUAGE_DICTIONARY["zh-CN"]


@pytest.mark.asyncio
async def test_transliterate_by_language_is_unsupported(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    with pytest.raises(BackendOperationError, match="does not support transliteration"):
        await engine.transliterate("こんにちは", "ja")

    fake_http.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_transliterate_script(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = [{"text": "konnichiwa", "script": "Latn"}]

    result: TransliterationResult = await engine.transliterate_script("こんにちは", "ja", "Jpan", "Latn")

    assert result.transliteration == "konnichiwa"
    assert result.script == "Latn"
    assert "language=ja&fromScript=Jpan&toScript=Latn" in fake_http.post.await_args.kwargs["url"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("language", "from_script", "to_script"),
    [("de", "Latn", "Cyrl"), ("ja", "Jpan", "Cyrl"), ("ja", "Latn", "Latn")],
)
async def test_transliterate_script_validates_scripts(
    engine: MicrosoftTranslation, fake_http: MagicMock, language: str, from_script: str, to_script: str
) -> None:
    with pytest.raises(ValidationError):
        await engine.transliterate_script("text", language, from_script, to_script)

    fake_http.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_detect_language(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = [{"language": "fr", "score": 0.98}]

    assert await engine.detect_language("Bonjour") == LANGUAGE_DICTIONARY["fr"]
    assert "/detect?api-version=3.0" in fake_http.post.await_args.kwargs["url"]


@pytest.mark.asyncio
async def test_detect_language_unknown_code(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = [{"language": "xx", "score": 0.1}]

    with pytest.raises(BackendOperationError, match="detected language"):
        await engine.detect_language("???")


@pytest.mark.asyncio
async def test_auth_token_is_cached(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = token_response()

    first = await engine.get_auth_token()
    second = await engine.get_auth_token()

    assert first is second
    assert first.region == "westus"
    assert fake_http.post.await_count == 1
    headers = fake_http.post.await_args.kwargs["headers"]
    assert headers["X-UserId"] == "0"
    assert "X-MT-Signature" in headers


@pytest.mark.asyncio
async def test_expired_auth_token_is_refreshed(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.side_effect = [token_response(lifetime=-10), token_response()]

    await engine.get_auth_token()
    await engine.get_auth_token()

    assert fake_http.post.await_count == 2


@pytest.mark.asyncio
async def test_auth_token_failure(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.side_effect = AsyncCommError("Unable to connect to the server.")

    with pytest.raises(CredentialAcquisitionError):
        await engine.get_auth_token()


@pytest.mark.asyncio
async def test_text_to_speech(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    token: dict[str, str] = token_response()
    fake_http.post.side_effect = [token, b"mp3-data"]

    audio: bytes = await engine.text_to_speech("Tom & Jerry", "ja", speak_rate=1.5)

    assert audio == b"mp3-data"
    kwargs = fake_http.post.await_args.kwargs
    assert kwargs["url"] == "https://westus.tts.speech.microsoft.com/cognitiveservices/v1"
    assert kwargs["headers"]["Authorization"] == f"Bearer {token['t']}"
    ssml: str = kwargs["data"].decode("utf-8")
    assert "ja-JP-NanamiNeural" in ssml
    assert "Tom &amp; Jerry" in ssml
    assert "rate='1.5'" in ssml


@pytest.mark.asyncio
async def test_text_to_speech_surfaces_credential_failure(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.side_effect = AsyncCommError("Unable to connect to the server.")

    with pytest.raises(BackendOperationError, match="unable to acquire credentials") as exc_info:
        await engine.text_to_speech("Hello", "en")

    assert isinstance(exc_info.value.__cause__, CredentialAcquisitionError)


@pytest.mark.asyncio
async def test_text_to_speech_rejects_language_without_voice(engine: MicrosoftTranslation) -> None:
    with pytest.raises(UnsupportedLanguageError):
        await engine.text_to_speech("Qafaraf", "aa")


@pytest.mark.asyncio
async def test_get_tts_voices_is_memoised(engine: MicrosoftTranslation, fake_http: MagicMock) -> None:
    fake_http.post.return_value = token_response()
    fake_http.get.return_value = [
        {"DisplayName": "Aria", "ShortName": "en-US-AriaNeural", "Gender": "Female", "Locale": "en-US"},
    ]

    voices: list[MicrosoftVoice] = await engine.get_tts_voices()
    again: list[MicrosoftVoice] = await engine.get_tts_voices()

    assert voices == [MicrosoftVoice("Aria", "en-US-AriaNeural", "Female", "en-US")]
    assert again is voices
    assert fake_http.get.await_count == 1
