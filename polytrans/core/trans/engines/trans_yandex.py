"""Yandex.Translate backend using the API of the Yandex.Translate Android app.

Requests carry a ``ucid`` client id. The id is generated locally and rotated every six minutes through a
`SessionManager`, like the app does.
"""

from __future__ import annotations

import json
import uuid
from typing import TYPE_CHECKING, Any, ClassVar, Final

from polytrans.core.cache import CacheEntry, SessionManager
from polytrans.core.trans.engines.base import HttpTransEngine
from polytrans.core.trans.interface import BackendOperationError, EngineAttributes
from polytrans.models.language_models import TranslationServices
from polytrans.models.response_models import YandexLanguageDetectionResult, YandexTranslationResult
from polytrans.models.translation_models import TranslationResult, TransliterationResult
from polytrans.utils.logger_utils import LoggerUtils
from polytrans.utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from polytrans.models.config_models import Config
    from polytrans.models.language_models import Language

__all__: list[str] = ["YandexTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

TRANSLIT_API_URL: Final[str] = "https://translate.yandex.net/translit/translit"
UCID_LIFETIME: Final[float] = 360.0


class YandexTranslation(HttpTransEngine):
    DEFAULT_API_URL: ClassVar[str] = "http://translate.yandex.net/api/v1/tr.json"
    DEFAULT_USER_AGENT: ClassVar[str] = "ru.yandex.translate/3.20.2024"
    SERVICE: ClassVar[TranslationServices] = TranslationServices.YANDEX

    def __init__(self) -> None:
        super().__init__()
        self.ucid: SessionManager[str] = SessionManager(self._new_ucid, name=self.fetch_engine_name())

    @staticmethod
    def fetch_engine_name() -> str:
        return "yandex"

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(
            name="yandex",
            supports_dedicated_detection_api=True,
        )
        self.setup_transport(config)
        self.api_url = self.api_url.rstrip("/")

    async def _new_ucid(self) -> CacheEntry[str]:
        return CacheEntry.expiring_after(uuid.uuid4().hex, UCID_LIFETIME)

    async def _query(self) -> dict[str, str]:
        return {"ucid": await self.ucid.get_or_refresh(), "srv": "android", "format": "text"}

    def _check_response(self, result: YandexTranslationResult | YandexLanguageDetectionResult) -> None:
        if not result.is_successful:
            msg: str = f"'{self.engine_name}' returned code {result.code}: {result.message or 'no message'}"
            raise self._error_for_status(result.code, msg)

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        logger.debug(
            "'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", StringUtils.preview(text), from_lang, to_lang
        )

        lang_pair: str = f"{from_lang.iso6391}-{to_lang.iso6391}" if from_lang else to_lang.iso6391
        with self.backend_errors("translate"):
            response: dict[str, Any] = await self._http.post(
                url=f"{self.api_url}/translate",
                params=await self._query(),
                data={"text": text, "lang": lang_pair},
                decode="json",
            )
            result: YandexTranslationResult = YandexTranslationResult.from_dict(response, infer_missing=True)
            self._check_response(result)

            codes: list[str] = (result.lang or "").split("-", 1)
            if len(codes) < 2 or result.text is None:  # noqa: PLR2004
                msg = "Unable to parse the result language codes."
                raise BackendOperationError(msg, service=self.engine_name)

        logger.info("translation completed (%s)", result.lang)
        return TranslationResult(
            translation="".join(result.text),
            source=text,
            target_language=self.language_from_code(codes[1]) or to_lang,
            source_language=self.language_from_code(codes[0]) or from_lang,
            service=self.engine_name,
        )

    async def transliterate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TransliterationResult:
        """Transliterate text; the service needs a source language, which is detected when not given."""
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        if from_lang is None:
            from_lang = await self.detect_language(text)

        with self.backend_errors("transliterate"):
            body: str | None = await self._http.post(
                url=TRANSLIT_API_URL,
                data={"text": text, "lang": f"{from_lang.iso6391}-{to_lang.iso6391}"},
                decode="text",
            )
            transliteration: str = (body or "").strip()
            if transliteration.startswith('"'):
                transliteration = json.loads(transliteration)
            if not transliteration:
                msg = "Failed to get the transliteration."
                raise BackendOperationError(msg, service=self.engine_name)

        return TransliterationResult(
            transliteration=transliteration,
            source=text,
            target_language=to_lang,
            source_language=from_lang,
            service=self.engine_name,
        )

    async def detect_language(self, text: str) -> Language:
        self.ensure_not_disposed()
        self.check_text(text)
        with self.backend_errors("detect the language"):
            response: dict[str, Any] = await self._http.post(
                url=f"{self.api_url}/detect",
                params=await self._query(),
                data={"text": text, "hint": "en"},
                decode="json",
            )
            result: YandexLanguageDetectionResult = YandexLanguageDetectionResult.from_dict(
                response, infer_missing=True
            )
            self._check_response(result)

        lang: Language | None = self.language_from_code(result.lang)
        if lang is None:
            msg = f"Failed to get the detected language ('{result.lang}')."
            raise BackendOperationError(msg, service=self.engine_name)
        logger.debug("Detected language: '%s'", lang)
        return lang
