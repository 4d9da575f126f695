"""Microsoft Translator backend using the endpoint of the Microsoft Translator Android app.

Every request is signed with an HMAC-SHA256 ``X-MT-Signature`` header. Text-to-speech goes through the Azure speech
service with a short-lived bearer token; the token is cached in a `SessionManager` until the ``exp`` claim of its JWT.
"""

from __future__ import annotations

import asyncio
import base64
import hashlib
import hmac
import json
import re
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Final
from urllib.parse import quote

from polytrans.core.cache import CacheEntry, SessionManager
from polytrans.core.trans.engines.base import HttpTransEngine
from polytrans.core.trans.interface import (
    BackendOperationError,
    EngineAttributes,
    UnsupportedLanguageError,
    ValidationError,
    resolve_language,
)
from polytrans.models.language_models import TranslationServices
from polytrans.models.re_models import JWT_PATTERN
from polytrans.models.response_models import (
    MicrosoftAuthToken,
    MicrosoftLanguageDetectionResult,
    MicrosoftTranslationResult,
    MicrosoftTransliterationResult,
)
from polytrans.models.translation_models import TranslationResult, TransliterationResult
from polytrans.models.voice_models import DEFAULT_VOICES, MicrosoftVoice
from polytrans.utils.logger_utils import LoggerUtils
from polytrans.utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from polytrans.models.config_models import Config
    from polytrans.models.language_models import Language

__all__: list[str] = ["SCRIPTS", "MicrosoftTranslation", "make_signature", "token_expiration"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

API_VERSION: Final[str] = "3.0"
SPEECH_TOKEN_URL: Final[str] = "dev.microsofttranslator.com/apps/endpoint?api-version=1.0"
SIGNATURE_DATE_FORMAT: Final[str] = "%a, %d %b %Y %H:%M:%SGMT"
TTS_OUTPUT_FORMAT: Final[str] = "audio-16khz-32kbitrate-mono-mp3"

# Key of the Microsoft Translator Android app
_PRIVATE_KEY: Final[bytes] = bytes(
    [
        0xA2, 0x29, 0x3A, 0x3D, 0xD0, 0xDD, 0x32, 0x73,
        0x97, 0x7A, 0x64, 0xDB, 0xC2, 0xF3, 0x27, 0xF5,
        0xD7, 0xBF, 0x87, 0xD9, 0x45, 0x9D, 0xF0, 0x5A,
        0x09, 0x66, 0xC6, 0x30, 0xC6, 0x6A, 0xAA, 0x84,
        0x9A, 0x41, 0xAA, 0x94, 0x3A, 0xA8, 0xD5, 0x1A,
        0x6E, 0x4D, 0xAA, 0xC9, 0xA3, 0x70, 0x12, 0x35,
        0xC7, 0xEB, 0x12, 0xF6, 0xE8, 0x23, 0x07, 0x9E,
        0x47, 0x10, 0x95, 0x91, 0x88, 0x55, 0xD8, 0x17,
    ]
)  # fmt: skip

SCRIPTS: Final[dict[str, tuple[str, ...]]] = {
    "ar": ("Latn", "Arab"),
    "as": ("Latn", "Beng"),
    "be": ("Latn", "Cyrl"),
    "bg": ("Latn", "Cyrl"),
    "bn": ("Latn", "Beng"),
    "el": ("Latn", "Grek"),
    "fa": ("Latn", "Arab"),
    "gu": ("Latn", "Gujr"),
    "he": ("Latn", "Hebr"),
    "hi": ("Latn", "Deva"),
    "ja": ("Latn", "Jpan"),
    "kk": ("Latn", "Cyrl"),
    "kn": ("Latn", "Knda"),
    "ko": ("Latn", "Kore"),
    "ky": ("Latn", "Cyrl"),
    "mk": ("Latn", "Cyrl"),
    "ml": ("Latn", "Mlym"),
    "mn": ("Latn", "Cyrl"),
    "mr": ("Latn", "Deva"),
    "or": ("Latn", "Orya"),
    "pa": ("Latn", "Guru"),
    "ru": ("Latn", "Cyrl"),
    "sd": ("Latn", "Arab"),
    "si": ("Latn", "Sinh"),
    "ta": ("Latn", "Taml"),
    "te": ("Latn", "Telu"),
    "tg": ("Latn", "Cyrl"),
    "tt": ("Latn", "Cyrl"),
    "uk": ("Latn", "Cyrl"),
    "ur": ("Latn", "Arab"),
    "zh-CN": ("Latn", "Hans"),
    "zh-TW": ("Latn", "Hant"),
}

_HOT_PATCH: Final[dict[str, str]] = {
    "lg": "lug",
    "no": "nb",
    "ny": "nya",
    "sr": "sr-Cyrl",
    "mn": "mn-Cyrl",
    "tlh": "tlh-Latn",
    "zh-CN": "zh-Hans",
    "zh-TW": "zh-Hant",
}


def hot_patch(code: str) -> str:
    """Translate a canonical code into the code the Microsoft API expects."""
    return _HOT_PATCH.get(code, code)


def make_signature(url: str, *, now: datetime | None = None, guid: str | None = None) -> str:
    """Build the ``X-MT-Signature`` header value for a request.

    Args:
        url (str): Request URL without the scheme, query string included.
        now (datetime | None): Signing time in UTC. Defaults to the current time.
        guid (str | None): Request id as 32 hex digits. Defaults to a fresh uuid4.

    Returns:
        str: 'MSTranslatorAndroidApp::<base64 HMAC>::<date>::<guid>'.
    """
    guid = guid or uuid.uuid4().hex
    date: str = (now or datetime.now(UTC)).strftime(SIGNATURE_DATE_FORMAT)
    message: str = f"MSTranslatorAndroidApp{quote(url, safe='')}{date}{guid}".lower()
    digest: bytes = hmac.new(_PRIVATE_KEY, message.encode("utf-8"), hashlib.sha256).digest()
    return f"MSTranslatorAndroidApp::{base64.b64encode(digest).decode('ascii')}::{date}::{guid}"


def token_expiration(token: str) -> float:
    """Read the ``exp`` claim from the payload segment of a JWT.

    Raises:
        ValueError: If the token is not a JWT or carries no numeric ``exp`` claim.
    """
    match: re.Match[str] | None = JWT_PATTERN.match(token)
    if match is None:
        msg = "The auth token is not a JWT."
        raise ValueError(msg)
    claims: Any = json.loads(StringUtils.base64url_decode(match.group("payload")))
    exp: Any = claims.get("exp") if isinstance(claims, dict) else None
    if not isinstance(exp, int | float):
        msg = "Unable to obtain the expiration date from the auth token."
        raise ValueError(msg)
    return float(exp)


class MicrosoftTranslation(HttpTransEngine):
    DEFAULT_API_URL: ClassVar[str] = "dev.microsofttranslator-int.com"
    SERVICE: ClassVar[TranslationServices] = TranslationServices.MICROSOFT

    def __init__(self) -> None:
        super().__init__()
        self.auth_session: SessionManager[MicrosoftAuthToken] = SessionManager(
            self._fetch_auth_token, name=self.fetch_engine_name()
        )
        self._voices: list[MicrosoftVoice] = []
        self._voices_lock: asyncio.Lock = asyncio.Lock()

    @staticmethod
    def fetch_engine_name() -> str:
        return "microsoft"

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(
            name="microsoft",
            supports_dedicated_detection_api=True,
            supports_transliteration=False,
            supports_text_to_speech=True,
        )
        self.setup_transport(config)
        # the signature covers the URL without its scheme
        self.api_url = self.api_url.removeprefix("https://").removeprefix("http://").rstrip("/")

    async def _post_signed(self, url: str, text: str) -> Any:
        return await self._http.post(
            url=f"https://{url}",
            headers={"X-MT-Signature": make_signature(url)},
            json_data=[{"Text": text}],
            decode="json",
        )

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        logger.debug(
            "'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", StringUtils.preview(text), from_lang, to_lang
        )

        url: str = f"{self.api_url}/translate?api-version={API_VERSION}&to={hot_patch(to_lang.iso6391)}"
        if from_lang is not None:
            url += f"&from={hot_patch(from_lang.iso6391)}"

        with self.backend_errors("translate"):
            response: list[dict[str, Any]] = await self._post_signed(url, text)
            result: MicrosoftTranslationResult = MicrosoftTranslationResult.from_dict(
                response[0], infer_missing=True
            )
            detected = result.detected_language
            source_code: str | None = detected.language if detected else None
            source_lang: Language | None = self.language_from_code(source_code) if source_code else from_lang
            if source_lang is None:
                msg = "Failed to get the source language."
                raise BackendOperationError(msg, service=self.engine_name)
            translation = result.translations[0]

        logger.info("translation completed (%s > %s)", source_lang, to_lang)
        return TranslationResult(
            translation=translation.text,
            source=text,
            target_language=self.language_from_code(translation.to) or to_lang,
            source_language=source_lang,
            service=self.engine_name,
            confidence=detected.score if detected else None,
        )

    async def transliterate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TransliterationResult:
        """Not available; Microsoft transliterates between scripts, see `transliterate_script`.

        Raises:
            BackendOperationError: Always, once the shared guards have passed.
        """
        self.check_request(text, to_language, from_language)
        msg = f"'{self.engine_name}' does not support transliteration via languages."
        raise BackendOperationError(msg, service=self.engine_name)

    async def transliterate_script(
        self, text: str, language: Language | str, from_script: str, to_script: str
    ) -> TransliterationResult:
        """Convert text of a language from one script to another.

        Args:
            text (str): Text to convert.
            language (Language | str): Language of the text.
            from_script (str): ISO 15924 code of the input script, e.g. 'Jpan'.
            to_script (str): ISO 15924 code of the output script, e.g. 'Latn'.

        Raises:
            ValidationError: If the language has no script table or a script is not in it.
        """
        lang, _ = self.check_request(text, language)
        self._ensure_valid_scripts(lang, from_script, to_script)

        url: str = (
            f"{self.api_url}/transliterate?api-version={API_VERSION}&language={hot_patch(lang.iso6391)}"
            f"&fromScript={from_script}&toScript={to_script}"
        )
        with self.backend_errors("transliterate"):
            response: list[dict[str, Any]] = await self._post_signed(url, text)
            result = MicrosoftTransliterationResult.from_dict(response[0], infer_missing=True)
            if not result.text:
                msg = "Failed to get the transliteration."
                raise BackendOperationError(msg, service=self.engine_name)

        return TransliterationResult(
            transliteration=result.text,
            source=text,
            target_language=lang,
            source_language=lang,
            service=self.engine_name,
            script=result.script,
        )

    @staticmethod
    def _ensure_valid_scripts(language: Language, from_script: str, to_script: str) -> None:
        scripts: tuple[str, ...] | None = SCRIPTS.get(language.iso6391)
        if scripts is None:
            msg = f"The language '{language}' does not support transliteration."
            raise ValidationError(msg)
        for script in (from_script, to_script):
            if script not in scripts:
                msg = f"Script not supported: '{script}'."
                raise ValidationError(msg)
        if from_script == to_script:
            msg = "'from_script' and 'to_script' cannot be equal."
            raise ValidationError(msg)

    async def detect_language(self, text: str) -> Language:
        self.ensure_not_disposed()
        self.check_text(text)
        with self.backend_errors("detect the language"):
            response: list[dict[str, Any]] = await self._post_signed(
                f"{self.api_url}/detect?api-version={API_VERSION}", text
            )
            result = MicrosoftLanguageDetectionResult.from_dict(response[0], infer_missing=True)

        lang: Language | None = self.language_from_code(result.language)
        if lang is None:
            msg = f"Failed to get the detected language ('{result.language}')."
            raise BackendOperationError(msg, service=self.engine_name)
        logger.debug("Detected language: '%s' (score=%s)", lang, result.score)
        return lang

    async def _fetch_auth_token(self) -> CacheEntry[MicrosoftAuthToken]:
        """Request a new Azure speech token. Used as the refresh operation of `auth_session`."""
        response: dict[str, Any] = await self._http.post(
            url=f"https://{SPEECH_TOKEN_URL}",
            headers={
                "X-ClientVersion": "N/A",
                "X-MT-Signature": make_signature(SPEECH_TOKEN_URL),
                "X-UserId": "0",
            },
            decode="json",
        )
        token: MicrosoftAuthToken = MicrosoftAuthToken.from_dict(response)
        if not token.token or not token.region:
            msg = "Unable to get the Microsoft Azure auth token."
            raise ValueError(msg)
        return CacheEntry.expiring_at(token, token_expiration(token.token))

    async def get_auth_token(self) -> MicrosoftAuthToken:
        """Return the cached Azure speech token, requesting a new one once it has expired."""
        self.ensure_not_disposed()
        return await self.auth_session.get_or_refresh()

    async def get_tts_voices(self) -> list[MicrosoftVoice]:
        """Fetch the list of neural voices once and keep it for the lifetime of the backend."""
        self.ensure_not_disposed()
        if self._voices:
            return self._voices

        async with self._voices_lock:
            if self._voices:
                return self._voices
            with self.backend_errors("list the voices"):
                auth: MicrosoftAuthToken = await self.auth_session.get_or_refresh()
                response: list[dict[str, Any]] = await self._http.get(
                    url=f"https://{auth.region}.tts.speech.microsoft.com/cognitiveservices/voices/list",
                    headers={"Authorization": f"Bearer {auth.token}"},
                    decode="json",
                )
                self._voices = [MicrosoftVoice.from_dict(voice, infer_missing=True) for voice in response]
            logger.info("'%s': %d voices available", self.engine_name, len(self._voices))
        return self._voices

    async def text_to_speech(self, text: str, language: Language | str, speak_rate: float = 1.0) -> bytes:
        """Synthesize MP3 speech with the default voice of the language.

        Raises:
            UnsupportedLanguageError: If there is no default voice for the language.
        """
        self.ensure_not_disposed()
        lang: Language | None = resolve_language(language)
        voice: MicrosoftVoice | None = DEFAULT_VOICES.get(lang.iso6391) if lang else None
        if voice is None:
            msg = f"Unable to get the voice from language '{language}'."
            raise UnsupportedLanguageError(msg)
        return await self.text_to_speech_with_voice(text, voice, speak_rate)

    async def text_to_speech_with_voice(self, text: str, voice: MicrosoftVoice, speak_rate: float = 1.0) -> bytes:
        self.ensure_not_disposed()
        self.check_text(text)
        with self.backend_errors("synthesize speech"):
            auth: MicrosoftAuthToken = await self.auth_session.get_or_refresh()
            return await self._http.post(
                url=f"https://{auth.region}.tts.speech.microsoft.com/cognitiveservices/v1",
                headers={
                    "Authorization": f"Bearer {auth.token}",
                    "X-Microsoft-OutputFormat": TTS_OUTPUT_FORMAT,
                    "Content-Type": "application/ssml+xml",
                },
                data=voice.to_ssml(StringUtils.escape_xml(text), speak_rate).encode("utf-8"),
                decode="bytes",
            )
