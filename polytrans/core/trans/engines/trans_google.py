"""Google Translate backend using the public gtx endpoint.

Requests are form posts to ``translate_a/single`` with a ``tk`` token derived from the text. Text-to-speech uses
``translate_tts`` and is split into chunks that are fetched concurrently.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, ClassVar, Final

from polytrans.core.trans.engines.base import HttpTransEngine
from polytrans.core.trans.interface import (
    BackendOperationError,
    EngineAttributes,
    UnsupportedLanguageError,
    resolve_language,
)
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.language_models import TranslationServices
from polytrans.models.translation_models import TranslationResult, TransliterationResult
from polytrans.utils.logger_utils import LoggerUtils
from polytrans.utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from polytrans.models.config_models import Config
    from polytrans.models.language_models import Language

__all__: list[str] = ["GoogleTranslation", "make_token"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

TTS_API_URL: Final[str] = "https://translate.google.com/translate_tts"
SALT_1: Final[str] = "+-a^+6"
SALT_2: Final[str] = "+-3^+b+-f"

TTS_LANGUAGES: Final[tuple[str, ...]] = (
    "af", "ar", "bg", "bn", "bs", "ca", "cs", "cy", "da", "de", "el", "en", "eo", "es", "et", "fi", "fr", "gu",
    "hi", "hr", "hu", "hy", "id", "is", "it", "iw", "ja", "jv", "km", "kn", "ko", "la", "lv", "mk", "ml", "mr",
    "ms", "my", "ne", "nl", "no", "pl", "pt", "ro", "ru", "si", "sk", "sq", "sr", "su", "sv", "sw", "ta", "te",
    "th", "tl", "tr", "uk", "ur", "vi", "zh-CN", "zh-TW",
)  # fmt: skip


def _work_token(num: int, seed: str) -> int:
    for i in range(0, len(seed) - 2, 3):
        char: str = seed[i + 2]
        shift: int = ord(char) - 87 if char >= "a" else int(char)
        shifted: int = (num & 0xFFFFFFFF) >> shift if seed[i + 1] == "+" else num << shift
        num = (num + shifted) & 0xFFFFFFFF if seed[i] == "+" else num ^ shifted
    return num


def make_token(text: str, *, now: float | None = None) -> str:
    """Compute the ``tk`` request token for the text.

    Args:
        text (str): Text sent in the request.
        now (float | None): POSIX timestamp used for the hourly seed. Defaults to the current time.

    Returns:
        str: Token of the form '<a>.<a ^ hour>'.
    """
    hour: int = int(time.time() if now is None else now) // 3600
    value: int = hour
    for char in text:
        value = _work_token(value + ord(char), SALT_1)
    value = _work_token(value, SALT_2) & 0xFFFFFFFF
    value %= 1_000_000
    return f"{value}.{value ^ hour}"


def _hot_patch(code: str) -> str:
    return {"jv": "jw"}.get(code, code)


class GoogleTranslation(HttpTransEngine):
    DEFAULT_API_URL: ClassVar[str] = "https://translate.googleapis.com/translate_a/single"
    SERVICE: ClassVar[TranslationServices] = TranslationServices.GOOGLE

    @staticmethod
    def fetch_engine_name() -> str:
        return "google"

    @classmethod
    def tts_languages(cls) -> frozenset[Language]:
        """Languages that text-to-speech accepts."""
        return frozenset(lang for code in TTS_LANGUAGES if (lang := LANGUAGE_DICTIONARY.try_get_language(code)))

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(
            name="google",
            supports_dedicated_detection_api=False,
            supports_text_to_speech=True,
        )
        self.setup_transport(config)

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        logger.debug(
            "'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", StringUtils.preview(text), from_lang, to_lang
        )

        params: list[tuple[str, str]] = [
            ("client", "gtx"),
            ("sl", _hot_patch(from_lang.iso6391) if from_lang else "auto"),
            ("tl", _hot_patch(to_lang.iso6391)),
            ("dt", "t"),
            ("dt", "bd"),
            ("dj", "1"),
            ("source", "input"),
            ("tk", make_token(text)),
        ]
        with self.backend_errors("translate"):
            response: dict[str, Any] = await self._http.post(url=self.api_url, params=params, data={"q": text})
            sentences: list[dict[str, Any]] = response["sentences"]
            if not isinstance(sentences, list):
                msg = "Failed to get the translated text."
                raise BackendOperationError(msg, service=self.engine_name)

            translation: str = "".join(sentence.get("trans") or "" for sentence in sentences)
            transliteration: str = "".join(sentence.get("translit") or "" for sentence in sentences)
            source_code: str | None = response.get("src")
            confidence: float | None = response.get("confidence")

        logger.info("translation completed (%s > %s)", source_code, to_lang)
        return TranslationResult(
            translation=translation,
            source=text,
            target_language=to_lang,
            source_language=self.language_from_code(source_code) or from_lang,
            service=self.engine_name,
            transliteration=transliteration or None,
            confidence=float(confidence) if confidence is not None else None,
        )

    async def transliterate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TransliterationResult:
        result: TranslationResult = await self.translate(text, to_language, from_language)
        if not result.transliteration:
            msg = "Failed to get the transliteration."
            raise BackendOperationError(msg, service=self.engine_name)
        return TransliterationResult(
            transliteration=result.transliteration,
            source=text,
            target_language=result.target_language,
            source_language=result.source_language,
            service=self.engine_name,
        )

    async def detect_language(self, text: str) -> Language:
        result: TranslationResult = await self.translate(text, "en")
        if result.source_language is None:
            msg = "Failed to get the detected language."
            raise BackendOperationError(msg, service=self.engine_name)
        logger.debug("Detected language: '%s'", result.source_language)
        return result.source_language

    async def text_to_speech(self, text: str, language: Language | str, speak_rate: float = 1.0) -> bytes:
        """Synthesize MP3 speech. Long text is split at word boundaries and the parts are concatenated.

        Raises:
            UnsupportedLanguageError: If Google has no voice for the language.
        """
        self.ensure_not_disposed()
        self.check_text(text)
        lang: Language | None = resolve_language(language)
        if lang is None or lang not in self.tts_languages():
            msg = f"'{self.engine_name}' has no text-to-speech voice for '{language}'."
            raise UnsupportedLanguageError(msg)

        chunks: list[str] = StringUtils.split_without_word_breaking(text)
        with self.backend_errors("synthesize speech"):
            parts: list[bytes] = await self.fetch_all(
                self._fetch_speech(chunk, lang, speak_rate, idx, len(chunks)) for idx, chunk in enumerate(chunks)
            )
        return b"".join(parts)

    async def _fetch_speech(self, chunk: str, language: Language, speak_rate: float, idx: int, total: int) -> bytes:
        params: dict[str, str] = {
            "ie": "UTF-8",
            "q": chunk,
            "tl": language.iso6391,
            "ttsspeed": f"{speak_rate:g}",
            "total": str(total),
            "idx": str(idx),
            "client": "tw-ob",
            "textlen": str(len(chunk)),
            "tk": make_token(chunk),
        }
        return await self._http.get(url=TTS_API_URL, params=params, decode="bytes")
