from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from deepl.exceptions import (
    AuthorizationException,
    ConnectionException,
    QuotaExceededException,
    TooManyRequestsException,
)

from polytrans.core.trans.engines import trans_deepl as trans_deepl_module
from polytrans.core.trans.interface import (
    BackendOperationError,
    DisposedStateError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
    UnsupportedLanguageError,
)
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.translation_models import TranslationResult

if TYPE_CHECKING:
    from polytrans.models.config_models import Config


class DummyLanguage:
    ENGLISH: str = "en"
    ENGLISH_AMERICAN: str = "en-US"
    GERMAN: str = "de"
    JAPANESE: str = "ja"
    PORTUGUESE_BRAZILIAN: str = "pt-BR"
    CHINESE: str = "zh"


class DummyTextResult:
    def __init__(self, text: str, detected_source_lang: str) -> None:
        self.text: str = text
        self.detected_source_lang: str = detected_source_lang


class DummyClient:
    translate_result: DummyTextResult | list[DummyTextResult] = DummyTextResult("ok", "EN")
    translate_error: Exception | None = None
    instances: list[DummyClient] = []

    def __init__(self, auth_key: str, *, server_url: str | None = None) -> None:
        if not auth_key:
            msg = "auth_key must not be empty"
            raise ValueError(msg)
        self.auth_key: str = auth_key
        self.server_url: str | None = server_url
        self.calls: list[tuple[str, str | None, str]] = []
        self.closed: bool = False
        type(self).instances.append(self)

    def translate_text(
        self, text: str, *, source_lang: str | None, target_lang: str
    ) -> DummyTextResult | list[DummyTextResult]:
        self.calls.append((text, source_lang, target_lang))
        err: Exception | None = type(self).translate_error
        if err is not None:
            raise err
        return type(self).translate_result

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def setup_deepl_module(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(trans_deepl_module, "DeeplLanguage", DummyLanguage)
    monkeypatch.setattr(trans_deepl_module, "DeepLClient", DummyClient)
    monkeypatch.setattr(trans_deepl_module.DeeplTranslation, "_source_codes", {})
    monkeypatch.setattr(trans_deepl_module.DeeplTranslation, "_target_codes", {})
    monkeypatch.setenv("DEEPL_API_OAUTH", "test-key")

    DummyClient.translate_result = DummyTextResult("ok", "EN")
    DummyClient.translate_error = None
    DummyClient.instances = []


@pytest.fixture
def engine(config: Config) -> trans_deepl_module.DeeplTranslation:
    inst = trans_deepl_module.DeeplTranslation()
    inst.initialize(config)
    return inst


def test_initialize_creates_client(engine: trans_deepl_module.DeeplTranslation) -> None:
    client: DummyClient = DummyClient.instances[0]

    assert client.auth_key == "test-key"
    assert client.server_url is None
    assert engine.engine_attributes.supports_transliteration is False


def test_initialize_passes_configured_server_url(config: Config) -> None:
    config.DEEPL.API_URL = "https://api-free.deepl.com"
    inst = trans_deepl_module.DeeplTranslation()
    inst.initialize(config)

    assert DummyClient.instances[0].server_url == "https://api-free.deepl.com"


def test_initialize_without_key_raises_runtime_error(monkeypatch: pytest.MonkeyPatch, config: Config) -> None:
    monkeypatch.delenv("DEEPL_API_OAUTH")
    inst = trans_deepl_module.DeeplTranslation()

    with pytest.raises(RuntimeError, match="DeepL client"):
        inst.initialize(config)


def test_language_code_mappings(engine: trans_deepl_module.DeeplTranslation) -> None:
    _ = engine
    source_codes: dict[str, str] = trans_deepl_module.DeeplTranslation._source_codes
    target_codes: dict[str, str] = trans_deepl_module.DeeplTranslation._target_codes

    assert source_codes["en"] == "EN"
    assert source_codes["zh-CN"] == "ZH"
    assert source_codes["pt-PT"] == "PT"
    assert target_codes["en"] == "EN-US"
    assert target_codes["de"] == "DE"
    assert target_codes["zh-TW"] == "ZH-HANT"
    assert target_codes["pt"] == "PT-BR"


def test_is_language_supported(engine: trans_deepl_module.DeeplTranslation) -> None:
    assert engine.is_language_supported("ja")
    assert engine.is_language_supported(LANGUAGE_DICTIONARY["de"])
    assert engine.is_language_supported("Chinese")
    assert not engine.is_language_supported("aa")
    assert not engine.is_language_supported("xx-unknown")


@pytest.mark.asyncio
async def test_translate(engine: trans_deepl_module.DeeplTranslation) -> None:
    DummyClient.translate_result = DummyTextResult("こんにちは", "EN")

    result: TranslationResult = await engine.translate("Hello", "ja")

    assert result.translation == "こんにちは"
    assert result.source_language == LANGUAGE_DICTIONARY["en"]
    assert result.target_language == LANGUAGE_DICTIONARY["ja"]
    assert result.service == "deepl"
    assert DummyClient.instances[0].calls == [("Hello", None, "JA")]


@pytest.mark.asyncio
async def test_translate_uses_target_variants(engine: trans_deepl_module.DeeplTranslation) -> None:
    DummyClient.translate_result = [DummyTextResult("Hello", "DE")]

    result: TranslationResult = await engine.translate("Hallo", "en", "de")

    assert result.translation == "Hello"
    assert DummyClient.instances[0].calls == [("Hallo", "DE", "EN-US")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (QuotaExceededException("Quota for this billing period has been exceeded"), TranslationQuotaExceededError),
        (TooManyRequestsException("Too many requests"), TranslationRateLimitError),
        (AuthorizationException("Authorization failure"), BackendOperationError),
        (ConnectionException("Connection failed"), BackendOperationError),
        (ValueError("bad argument"), BackendOperationError),
    ],
)
async def test_translate_maps_client_errors(
    engine: trans_deepl_module.DeeplTranslation, error: Exception, expected: type[Exception]
) -> None:
    DummyClient.translate_error = error

    with pytest.raises(expected) as exc_info:
        await engine.translate("Hello", "ja")

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_language_missing_from_deepl_mappings_is_rejected(engine: trans_deepl_module.DeeplTranslation) -> None:
    with pytest.raises(UnsupportedLanguageError):
        await engine.translate("Hello", "fr")


@pytest.mark.asyncio
async def test_transliterate_is_unsupported(engine: trans_deepl_module.DeeplTranslation) -> None:
    with pytest.raises(BackendOperationError, match="does not support transliteration"):
        await engine.transliterate("Hello", "ja")


@pytest.mark.asyncio
async def test_detect_language(engine: trans_deepl_module.DeeplTranslation) -> None:
    DummyClient.translate_result = DummyTextResult("Hello", "JA")

    assert await engine.detect_language("こんにちは") == LANGUAGE_DICTIONARY["ja"]
    assert DummyClient.instances[0].calls[0][2] == "EN-US"


@pytest.mark.asyncio
async def test_close_closes_client(engine: trans_deepl_module.DeeplTranslation) -> None:
    await engine.close()
    await engine.close()

    assert DummyClient.instances[0].closed is True
    assert engine.is_disposed
    with pytest.raises(DisposedStateError):
        engine.is_language_supported("ja")
