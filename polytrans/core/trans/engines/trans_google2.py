"""Google Translate backend using the batchexecute RPC of the translate web app.

The request packs a JSON payload inside a JSON RPC envelope sent as the ``f.req`` form field. The response starts with
the ``)]}'`` guard, followed by the envelope lines; the line carrying the RPC id holds the payload as a JSON string.
"""

from __future__ import annotations

import base64
import json
from typing import TYPE_CHECKING, Any, ClassVar, Final

from polytrans.core.trans.engines.base import HttpTransEngine
from polytrans.core.trans.engines.trans_google import TTS_LANGUAGES
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

__all__: list[str] = ["Google2Translation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

TRANSLATE_RPC_ID: Final[str] = "MkEWBc"
TTS_RPC_ID: Final[str] = "jQ1olc"
RESPONSE_GUARD: Final[str] = ")]}'"

TTS2_EXTRA_LANGUAGES: Final[tuple[str, ...]] = ("am", "eu", "gl", "ha", "lt", "pa", "pt-PT", "yue")


def _hot_patch(code: str) -> str:
    return {"mni": "mni-Mtei"}.get(code, code)


class Google2Translation(HttpTransEngine):
    SERVICE: ClassVar[TranslationServices] = TranslationServices.GOOGLE

    def __init__(self) -> None:
        super().__init__()
        self.url_suffix: str = "com"

    @staticmethod
    def fetch_engine_name() -> str:
        return "google2"

    @classmethod
    def tts_languages(cls) -> frozenset[Language]:
        codes: tuple[str, ...] = TTS_LANGUAGES + TTS2_EXTRA_LANGUAGES
        return frozenset(lang for code in codes if (lang := LANGUAGE_DICTIONARY.try_get_language(code)))

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(
            name="google2",
            supports_dedicated_detection_api=False,
            supports_text_to_speech=True,
        )
        self.url_suffix = config.TRANSLATION.GOOGLE_SUFFIX or "com"
        self.setup_transport(config)
        if not config.engine_section("google2").API_URL:
            self.api_url = f"https://translate.google.{self.url_suffix}/_/TranslateWebserverUi/data/batchexecute"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Referer": f"https://translate.google.{self.url_suffix}/",
            "Content-Type": "application/x-www-form-urlencoded;charset=utf-8",
        }

    async def _call_rpc(self, rpc_id: str, payload: list[Any]) -> Any:
        """Send one RPC and return its decoded payload.

        Raises:
            BackendOperationError: If the response holds no payload for the RPC.
        """
        serialized: str = json.dumps(payload, separators=(",", ":"))
        envelope: str = json.dumps([[[rpc_id, serialized, None, "generic"]]], separators=(",", ":"))
        body: str = await self._http.post(
            url=self.api_url,
            params={"rpcids": rpc_id},
            headers=self._build_headers(),
            data={"f.req": envelope},
            decode="text",
        )
        if body.startswith(RESPONSE_GUARD):
            body = body[len(RESPONSE_GUARD) :]

        for line in body.splitlines():
            if rpc_id not in line:
                continue
            logger.debug(StringUtils.preview(line, 200))
            data: str | None = json.loads(line)[0][2]
            if data is None:
                break
            return json.loads(data)

        msg = "Unable to get the data from the response."
        raise BackendOperationError(msg, service=self.engine_name)

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        to_lang, from_lang = self.check_request(text, to_language, from_language)
        logger.debug(
            "'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", StringUtils.preview(text), from_lang, to_lang
        )

        payload: list[Any] = [
            [text, _hot_patch(from_lang.iso6391) if from_lang else "auto", _hot_patch(to_lang.iso6391), True],
            [1],
        ]
        with self.backend_errors("translate"):
            root: list[Any] = await self._call_rpc(TRANSLATE_RPC_ID, payload)
            result: TranslationResult = self._process_response(root, text, to_lang)

        logger.info("translation completed (%s > %s)", result.source_language, result.target_language)
        return result

    def _process_response(self, root: list[Any], text: str, to_lang: Language) -> TranslationResult:
        target_code: str | None = root[1][1]
        source_code: str = root[1][3]
        if source_code == "auto":
            # no source language is echoed back for hyperlinks
            source_code = root[2] if len(root) > 2 and isinstance(root[2], str) else "en"

        trans_info: list[Any] = root[1][0][0]
        if len(trans_info) > 5 and isinstance(trans_info[5], list):
            translation: str = " ".join(chunk[0] for chunk in trans_info[5] if chunk and chunk[0])
        else:
            translation = trans_info[0]

        target_transliteration: str | None = trans_info[1] if len(trans_info) > 1 else None
        source_transliteration: str | None = root[0][0] if isinstance(root[0], list) and root[0] else None

        return TranslationResult(
            translation=translation,
            source=text,
            target_language=self.language_from_code(target_code) or to_lang,
            source_language=self.language_from_code(source_code),
            service=self.engine_name,
            transliteration=target_transliteration or None,
            source_transliteration=source_transliteration or None,
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
            msg = "Failed to get the detected language."
            raise BackendOperationError(msg, service=self.engine_name)
        return result.source_language

    async def text_to_speech(self, text: str, language: Language | str, speak_rate: float = 1.0) -> bytes:
        """Synthesize MP3 speech through the TTS RPC. A rate below 1 selects the slow voice."""
        self.ensure_not_disposed()
        self.check_text(text)
        lang: Language | None = resolve_language(language)
        if lang is None or lang not in self.tts_languages():
            msg = f"'{self.engine_name}' has no text-to-speech voice for '{language}'."
            raise UnsupportedLanguageError(msg)

        slow: int = 1 if speak_rate < 1.0 else 0
        chunks: list[str] = StringUtils.split_without_word_breaking(text)
        with self.backend_errors("synthesize speech"):
            parts: list[bytes] = await self.fetch_all(self._fetch_speech(chunk, lang, slow) for chunk in chunks)
        return b"".join(parts)

    async def _fetch_speech(self, chunk: str, language: Language, slow: int) -> bytes:
        root: list[Any] = await self._call_rpc(TTS_RPC_ID, [chunk, language.iso6391, None, "undefined", [slow]])
        return base64.b64decode(root[0])
