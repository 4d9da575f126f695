from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar

from deepl import DeepLClient, TextResult
from deepl import Language as DeeplLanguage
from deepl.exceptions import (
    AuthorizationException,
    ConnectionException,
    DeepLException,
    QuotaExceededException,
    TooManyRequestsException,
)

from polytrans.core.trans.interface import (
    BackendOperationError,
    EngineAttributes,
    TransInterface,
    TranslateExceptionError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
)
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.language_models import Language
from polytrans.models.translation_models import TranslationResult, TransliterationResult
from polytrans.utils.logger_utils import LoggerUtils
from polytrans.utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from polytrans.models.config_models import Config


__all__: list[str] = ["DeeplTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class DeeplTranslation(TransInterface):
    """DeepL backend built on the official client library.

    The client is blocking, so every call runs in a worker thread. Language support is decided by the client's own
    language constants rather than by the language table.
    """

    _source_codes: ClassVar[dict[str, str]] = {}  # canonical code -> DeepL source code
    _target_codes: ClassVar[dict[str, str]] = {}  # canonical code -> DeepL target code

    # target codes DeepL only accepts with a variant
    _TARGET_VARIANTS: ClassVar[dict[str, str]] = {
        "en": "EN-US",
        "pt": "PT-BR",
        "pt-PT": "PT-PT",
        "zh-CN": "ZH-HANS",
        "zh-TW": "ZH-HANT",
    }

    def __init__(self) -> None:
        super().__init__()
        self.__inst: DeepLClient | None = None
        if not DeeplTranslation._target_codes:
            self._generate_langcode_mappings()

    @classmethod
    def _generate_langcode_mappings(cls) -> None:
        """Map canonical codes to DeepL's source and target codes.

        Every uppercase string constant of the client's Language class is a DeepL code such as 'de' or 'en-US'.
        Source codes are the upper-cased base code; target codes default to the upper-cased constant, with the
        variants DeepL requires taking precedence.
        """
        language_constants: dict[str, str] = {
            name: value for name, value in vars(DeeplLanguage).items() if isinstance(value, str) and name.isupper()
        }
        for code in language_constants.values():
            base_code: str = code.split("-")[0].lower()
            cls._source_codes[base_code] = base_code.upper()
            cls._target_codes.setdefault(base_code, code.upper())

        for zh_variant in ("zh-CN", "zh-TW"):
            cls._source_codes[zh_variant] = "ZH"
        if "pt" in cls._source_codes:
            cls._source_codes["pt-PT"] = "PT"
        cls._target_codes.update(cls._TARGET_VARIANTS)
        logger.debug("Language code mapping generated for DeepL.")

    @property
    def _inst(self) -> DeepLClient:
        if self.__inst is None:
            msg = "The DeepL instance is not initialised"
            raise TranslateExceptionError(msg)
        return self.__inst

    @_inst.setter
    def _inst(self, inst: DeepLClient | None) -> None:
        self.__inst = inst
        logger.debug("'%s': 'set instance'", self.__class__.__name__)

    @staticmethod
    def fetch_engine_name() -> str:
        return "deepl"

    def initialize(self, config: Config) -> None:
        """Create the DeepL client with the key from ``DEEPL_API_OAUTH``.

        The key is only checked by the service on the first request.

        Raises:
            RuntimeError: If the client cannot be created, e.g. because no key is set.
        """
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(
            name="deepl",
            supports_dedicated_detection_api=False,
            supports_transliteration=False,
        )
        server_url: str | None = config.engine_section("deepl").API_URL or None
        try:
            self._inst = DeepLClient(self.get_authentication_key(), server_url=server_url)
        except (AttributeError, ValueError) as err:
            logger.critical(err)
            msg = "An error occurred while creating the DeepL client instance"
            raise RuntimeError(msg) from err

    def is_language_supported(self, language: Language | str) -> bool:
        self.ensure_not_disposed()
        lang: Language | None = (
            language if isinstance(language, Language) else LANGUAGE_DICTIONARY.try_get_language(language)
        )
        if lang is None:
            return False
        return lang.iso6391 in DeeplTranslation._source_codes or lang.iso6391 in DeeplTranslation._target_codes

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        logger.debug(
            "'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", StringUtils.preview(text), from_lang, to_lang
        )

        src_code: str | None = DeeplTranslation._source_codes.get(from_lang.iso6391) if from_lang else None
        tgt_code: str | None = DeeplTranslation._target_codes.get(to_lang.iso6391)
        if tgt_code is None or (from_lang is not None and src_code is None):
            msg = f"Languages not supported by DeepL. Source language: '{from_lang}'. Target language: '{to_lang}'."
            raise BackendOperationError(msg, service=self.engine_name)

        results: TextResult | list[TextResult] = await self._translate_text(text, src_code, tgt_code)
        result: TextResult = results[0] if isinstance(results, list) else results

        logger.info("translation completed (%s > %s)", result.detected_source_lang, tgt_code)
        return TranslationResult(
            translation=result.text,
            source=text,
            target_language=to_lang,
            source_language=self.language_from_code(result.detected_source_lang.lower()) or from_lang,
            service=self.engine_name,
        )

    async def _translate_text(self, text: str, src_code: str | None, tgt_code: str) -> TextResult | list[TextResult]:
        try:
            return await asyncio.to_thread(
                self._inst.translate_text,
                text,
                source_lang=src_code,
                target_lang=tgt_code,
            )
        except QuotaExceededException as err:
            msg = "DeepL translation quota exceeded"
            raise TranslationQuotaExceededError(msg, service=self.engine_name) from err
        except TooManyRequestsException as err:
            msg = "DeepL rate limit reached"
            raise TranslationRateLimitError(msg, service=self.engine_name) from err
        except AuthorizationException as err:
            msg = "Authorisation failed. Please check your authentication key"
            raise BackendOperationError(msg, service=self.engine_name) from err
        except ConnectionException as err:
            msg = "An error occurred when connecting to the DeepL server"
            raise BackendOperationError(msg, service=self.engine_name) from err
        except (DeepLException, ValueError, TypeError) as err:
            msg = "An anomaly occurred during the translation process at DeepL"
            raise BackendOperationError(msg, service=self.engine_name) from err

    async def transliterate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TransliterationResult:
        self.check_request(text, to_language, from_language)
        msg = f"'{self.engine_name}' does not support transliteration."
        raise BackendOperationError(msg, service=self.engine_name)

    async def detect_language(self, text: str) -> Language:
        """Detect the language by translating to English and reading the detected source language."""
        result: TranslationResult = await self.translate(text, "en")
        if result.source_language is None:
            msg = "Failed to get the detected language."
            raise BackendOperationError(msg, service=self.engine_name)
        logger.debug("Detected language: '%s'", result.source_language)
        return result.source_language

    async def _release(self) -> None:
        if self.__inst is not None:
            await asyncio.to_thread(self.__inst.close)
            self.__inst = None
