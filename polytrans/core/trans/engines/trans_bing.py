"""Bing Translator backend using the endpoints of the Bing translator web page.

The page embeds a key and a token that every request must carry. They are scraped once and cached for an hour in a
`SessionManager`. Bing answers HTTP 200 even for failed requests; an object with a ``statusCode`` member is an error.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING, Any, ClassVar, Final

from polytrans.core.cache import CacheEntry, SessionManager
from polytrans.core.trans.engines.base import HttpTransEngine
from polytrans.core.trans.engines.trans_microsoft import hot_patch as microsoft_hot_patch
from polytrans.core.trans.interface import (
    BackendOperationError,
    EngineAttributes,
    UnsupportedLanguageError,
    resolve_language,
)
from polytrans.models.credential_models import BingCredentials
from polytrans.models.language_models import TranslationServices
from polytrans.models.re_models import BING_CREDENTIALS_PATTERN
from polytrans.models.response_models import BingErrorResult, BingTranslationResult
from polytrans.models.translation_models import TranslationResult, TransliterationResult
from polytrans.models.voice_models import DEFAULT_VOICES, MicrosoftVoice
from polytrans.utils.logger_utils import LoggerUtils
from polytrans.utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    import re

    from polytrans.models.config_models import Config
    from polytrans.models.language_models import Language

__all__: list[str] = ["BingTranslation", "parse_credentials"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

IID: Final[str] = "translator.5024.1"
MAX_TEXT_LENGTH: Final[int] = 1000


def parse_credentials(html: str, *, now: float | None = None) -> CacheEntry[BingCredentials]:
    """Extract the credentials from the translator page.

    Args:
        html (str): Body of the translator page.
        now (float | None): POSIX timestamp used when the key is not numeric. Defaults to the current time.

    Returns:
        CacheEntry[BingCredentials]: Credentials with a fresh impression id, expiring one hour after the key.

    Raises:
        ValueError: If the page does not contain the credentials.
    """
    match: re.Match[str] | None = BING_CREDENTIALS_PATTERN.search(html)
    if match is None:
        msg = "Unable to find the Bing credentials."
        raise ValueError(msg)

    key_text: str = match.group("key").strip()
    # the key is the page generation time; fall back to now if it ever stops being numeric
    key: int = int(key_text) if key_text.isdigit() else int((time.time() if now is None else now) * 1000)
    credentials = BingCredentials(
        token=match.group("token"),
        key=key,
        impression_guid=uuid.uuid4().hex.upper(),
    )
    return CacheEntry.expiring_at(credentials, credentials.expires_at)


def _hot_patch(code: str) -> str:
    if code == "rn":
        return "run"
    return microsoft_hot_patch(code)


class BingTranslation(HttpTransEngine):
    DEFAULT_API_URL: ClassVar[str] = "https://www.bing.com"
    SERVICE: ClassVar[TranslationServices] = TranslationServices.BING

    def __init__(self) -> None:
        super().__init__()
        self.credentials: SessionManager[BingCredentials] = SessionManager(
            self._fetch_credentials, name=self.fetch_engine_name()
        )

    @staticmethod
    def fetch_engine_name() -> str:
        return "bing"

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(
            name="bing",
            supports_dedicated_detection_api=False,
            supports_text_to_speech=True,
            max_text_length=MAX_TEXT_LENGTH,
        )
        self.setup_transport(config)
        self.api_url = self.api_url.rstrip("/")

    async def _fetch_credentials(self) -> CacheEntry[BingCredentials]:
        html: str = await self._http.get(url=f"{self.api_url}/translator", decode="text")
        return parse_credentials(html)

    def _query(self, credentials: BingCredentials) -> dict[str, str]:
        return {"isVertical": "1", "IG": credentials.impression_guid, "IID": IID}

    def _raise_for_error_payload(self, response: Any, action: str) -> None:
        if not isinstance(response, dict) or "statusCode" not in response:
            return
        error: BingErrorResult = BingErrorResult.from_dict(response, infer_missing=True)
        message: str = error.message or f"The API returned status code {error.status_code}."
        msg: str = f"'{self.engine_name}' could not {action}: {message}"
        raise self._error_for_status(error.status_code, msg)

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        logger.debug(
            "'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", StringUtils.preview(text), from_lang, to_lang
        )

        with self.backend_errors("translate"):
            credentials: BingCredentials = await self.credentials.get_or_refresh()
            data: dict[str, str] = {
                "fromLang": _hot_patch(from_lang.iso6391) if from_lang else "auto-detect",
                "text": text,
                "to": _hot_patch(to_lang.iso6391),
                "token": credentials.token,
                "key": str(credentials.key),
            }
            response: Any = await self._http.post(
                url=f"{self.api_url}/ttranslatev3", params=self._query(credentials), data=data, decode="json"
            )
            self._raise_for_error_payload(response, "translate")

            results: list[BingTranslationResult] = [
                BingTranslationResult.from_dict(item, infer_missing=True) for item in response
            ]
            first: BingTranslationResult = results[0]
            if not first.translations:
                msg = "Received an invalid response from the API."
                raise BackendOperationError(msg, service=self.engine_name)

        translation = first.translations[0]
        detected = first.detected_language
        source_lang: Language | None = self.language_from_code(detected.language) if detected else from_lang
        source_transliteration: str | None = results[1].input_transliteration if len(results) > 1 else None

        logger.info("translation completed (%s > %s)", source_lang, to_lang)
        return TranslationResult(
            translation=translation.text,
            source=text,
            target_language=self.language_from_code(translation.to) or to_lang,
            source_language=source_lang,
            service=self.engine_name,
            transliteration=translation.transliteration.text if translation.transliteration else None,
            source_transliteration=source_transliteration,
            confidence=detected.score if detected else None,
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
            source_transliteration=result.source_transliteration,
        )

    async def detect_language(self, text: str) -> Language:
        result: TranslationResult = await self.translate(text, "en")
        if result.source_language is None:
            msg = "Unable to detect the language of text."
            raise BackendOperationError(msg, service=self.engine_name)
        return result.source_language

    async def text_to_speech(self, text: str, language: Language | str, speak_rate: float = 1.0) -> bytes:
        """Synthesize MP3 speech with the Microsoft default voice of the language."""
        self.ensure_not_disposed()
        self.check_text(text)
        lang: Language | None = resolve_language(language)
        voice: MicrosoftVoice | None = DEFAULT_VOICES.get(lang.iso6391) if lang else None
        if voice is None:
            msg = f"Unable to get the voice from language '{language}'."
            raise UnsupportedLanguageError(msg)

        with self.backend_errors("synthesize speech"):
            credentials: BingCredentials = await self.credentials.get_or_refresh()
            data: dict[str, str] = {
                "ssml": voice.to_ssml(StringUtils.escape_xml(text), speak_rate),
                "token": credentials.token,
                "key": str(credentials.key),
            }
            return await self._http.post(
                url=f"{self.api_url}/tfettts", params=self._query(credentials), data=data, decode="bytes"
            )

