"""Abstract base class of the translation backends and the translation error taxonomy.

Every backend implements the same capability set (translate, transliterate, detect_language,
is_language_supported) and registers itself by name so that the orchestrator can build backends from the
configuration. The guards shared by all backends (disposal, empty text, language resolution and support) live
here as well.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Self

from polytrans.handlers.async_comm import AsyncCommError
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.language_models import Language, TranslationServices
from polytrans.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterator

    from polytrans.models.config_models import Config
    from polytrans.models.translation_models import TranslationResult, TransliterationResult

__all__: list[str] = [
    "AggregateFailure",
    "BackendOperationError",
    "CredentialAcquisitionError",
    "DisposedStateError",
    "EngineAttributes",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationQuotaExceededError",
    "TranslationRateLimitError",
    "UnsupportedLanguageError",
    "ValidationError",
    "resolve_language",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class ValidationError(TranslateExceptionError, ValueError):
    """The request is invalid: empty text, text too long, or a language that cannot be resolved."""


class UnsupportedLanguageError(TranslateExceptionError, ValueError):
    """No backend able to serve the requested language is available."""


class CredentialAcquisitionError(TranslateExceptionError):
    """A backend could not obtain the credential it needs to call its service."""


class BackendOperationError(TranslateExceptionError):
    """A backend failed to carry out a request.

    Attributes:
        service (str): Name of the failing backend.
    """

    def __init__(self, msg: str, *, service: str = "") -> None:
        super().__init__(msg)
        self.service: str = service


class TranslationQuotaExceededError(BackendOperationError):
    """The translatable character quota has been exceeded."""


class TranslationRateLimitError(BackendOperationError):
    """The translation request was rate-limited by the API."""


class AggregateFailure(TranslateExceptionError):  # noqa: N818
    """Every eligible backend failed.

    Attributes:
        errors (dict[str, Exception]): Error of each invoked backend, keyed by name in invocation order.
    """

    def __init__(self, msg: str, errors: dict[str, Exception]) -> None:
        super().__init__(msg)
        self.errors: dict[str, Exception] = dict(errors)

    def __str__(self) -> str:
        details: str = "; ".join(f"{name}: {err}" for name, err in self.errors.items())
        base: str = super().__str__()
        return f"{base} ({details})" if details else base


class DisposedStateError(TranslateExceptionError, RuntimeError):
    """The object has been closed and can no longer be used."""


def resolve_language(language: Language | str | None, message: str = "Unknown language.") -> Language | None:
    """Resolve a language handle or a free-form code/name/alias.

    Args:
        language (Language | str | None): Language to resolve. None stays None.
        message (str): Message of the ValidationError raised for unknown designations.

    Returns:
        Language | None: The canonical handle.

    Raises:
        ValidationError: If the designation is not a known language.
    """
    if language is None or isinstance(language, Language):
        return language
    lang: Language | None = LANGUAGE_DICTIONARY.try_get_language(language)
    if lang is None:
        msg: str = f"{message} ('{language}')"
        raise ValidationError(msg)
    return lang


@dataclass
class EngineAttributes:
    """Engine-specific capabilities and behavior flags.

    Attributes:
        name (str): Name of the backend. Used as the key of attempted errors.
        supports_dedicated_detection_api (bool): Whether the backend has a dedicated language detection API.
        supports_transliteration (bool): Whether `transliterate` can succeed at all.
        supports_text_to_speech (bool): Whether `text_to_speech` is implemented.
        max_text_length (int | None): Maximum number of characters per request. None for no limit.
    """

    name: str
    supports_dedicated_detection_api: bool = False
    supports_transliteration: bool = True
    supports_text_to_speech: bool = False
    max_text_length: int | None = None


class TransInterface(ABC):
    """Abstract base class of the translation backends.

    Subclasses are registered by `fetch_engine_name()` when they are defined. Language support is decided by the
    `SERVICE` flag against the language table unless a subclass overrides `is_language_supported`.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Registered backend classes keyed by name.
        SERVICE (ClassVar[TranslationServices]): Service flag looked up in the language table.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}
    SERVICE: ClassVar[TranslationServices] = TranslationServices.NONE

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its distinguished name.

        Raises:
            TypeError: If the subclass does not provide fetch_engine_name().
            ValueError: If another backend is already registered under the same name.
        """
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "fetch_engine_name") or not callable(cls.fetch_engine_name):
            msg = "Subclasses of TransInterface must implement the static method fetch_engine_name()."
            raise TypeError(msg)

        name: object = cls.fetch_engine_name()
        if not isinstance(name, str) or name == "":
            return  # engines with empty names are usable but not registered

        if name in cls.registered:
            msg: str = f"A translation engine with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls

    def __init__(self) -> None:
        self._engine_attributes: EngineAttributes | None = None
        self._disposed: bool = False

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.engine_name!r})"

    @property
    def engine_attributes(self) -> EngineAttributes:
        if self._engine_attributes is None:
            msg = "Engine attributes have not been set."
            raise RuntimeError(msg)
        return self._engine_attributes

    @engine_attributes.setter
    def engine_attributes(self, attributes: EngineAttributes) -> None:
        if self._engine_attributes is not None:
            msg = "Engine attributes can only be set once during initialization."
            raise RuntimeError(msg)
        self._engine_attributes = attributes

    @property
    def engine_name(self) -> str:
        """Name of this backend instance; the registered name until attributes are set."""
        if self._engine_attributes is None:
            return self.fetch_engine_name()
        return self._engine_attributes.name

    @property
    def has_dedicated_detection_api(self) -> bool:
        return self.engine_attributes.supports_dedicated_detection_api

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def ensure_not_disposed(self) -> None:
        """Raise DisposedStateError if close() has been called."""
        if self._disposed:
            msg: str = f"'{self.engine_name}' has been closed."
            raise DisposedStateError(msg)

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the translation engine.

        Called during class registration in __init_subclass__, so the implementation must be available at
        subclass definition time.
        """
        raise NotImplementedError

    @abstractmethod
    def initialize(self, config: Config) -> None:
        """Initialize the backend with the given configuration.

        Must set `engine_attributes`. No network access happens here.

        Raises:
            RuntimeError: If the backend cannot be set up.
            TranslateExceptionError: If the backend rejects the configuration.
        """
        raise NotImplementedError

    @abstractmethod
    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TranslationResult:
        """Translate text to the target language.

        Args:
            text (str): Text to translate.
            to_language (Language | str): Target language.
            from_language (Language | str | None): Source language. If None, the service detects it.

        Returns:
            TranslationResult: Translation produced by this backend.

        Raises:
            ValidationError: If the text is empty or a language is unknown.
            UnsupportedLanguageError: If this backend does not support a language.
            DisposedStateError: If the backend has been closed.
            BackendOperationError: If the service call failed for any other reason.
        """
        raise NotImplementedError

    @abstractmethod
    async def transliterate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> TransliterationResult:
        """Transliterate text into the script of the target language.

        Raises the same errors as `translate`.
        """
        raise NotImplementedError

    @abstractmethod
    async def detect_language(self, text: str) -> Language:
        """Detect the language of the text.

        Raises:
            ValidationError: If the text is empty.
            DisposedStateError: If the backend has been closed.
            BackendOperationError: If detection failed or returned an unknown language.
        """
        raise NotImplementedError

    async def text_to_speech(self, text: str, language: Language | str, speak_rate: float = 1.0) -> bytes:
        """Synthesize speech for the text. Only some backends implement it.

        Returns:
            bytes: Audio data (MP3).

        Raises:
            BackendOperationError: If this backend has no text-to-speech support.
        """
        _ = text, language, speak_rate
        msg: str = f"'{self.engine_name}' does not support text-to-speech."
        raise BackendOperationError(msg, service=self.engine_name)

    def is_language_supported(self, language: Language | str) -> bool:
        """Check whether this backend can translate to or from the language.

        Args:
            language (Language | str): Language handle, code, name or alias.

        Returns:
            bool: False for unknown designations.

        Raises:
            DisposedStateError: If the backend has been closed.
        """
        self.ensure_not_disposed()
        lang: Language | None
        if isinstance(language, Language):
            lang = language
        else:
            lang = LANGUAGE_DICTIONARY.try_get_language(language)
        if lang is None:
            return False
        return lang.is_service_supported(self.SERVICE)

    async def close(self) -> None:
        """Release the backend's resources. Idempotent; later calls raise DisposedStateError."""
        if self._disposed:
            return
        self._disposed = True
        await self._release()
        logger.debug("'%s' process termination", self.engine_name)

    async def _release(self) -> None:  # noqa: B027
        """Close owned resources. Subclasses owning a transport override this."""

    def get_authentication_key(self) -> str:
        """Retrieve the authentication key from the environment.

        The key is read from ``<NAME>_API_OAUTH``, e.g. ``DEEPL_API_OAUTH`` for the 'deepl' backend.

        Returns:
            str: The key, or an empty string if the variable is not set.
        """
        return os.getenv(f"{self.fetch_engine_name().upper()}_API_OAUTH", "")

    def check_request(
        self,
        text: str,
        to_language: Language | str,
        from_language: Language | str | None = None,
    ) -> tuple[Language, Language | None]:
        """Apply the guards shared by translate and transliterate.

        Returns:
            tuple[Language, Language | None]: Resolved target and source languages.

        Raises:
            DisposedStateError: If the backend has been closed.
            ValidationError: If the text is empty or too long, or a language is unknown.
            UnsupportedLanguageError: If this backend does not support a language.
        """
        self.ensure_not_disposed()
        self.check_text(text)
        to_lang: Language | None = resolve_language(to_language, "Unknown target language.")
        if to_lang is None:
            msg = "The target language is required."
            raise ValidationError(msg)
        from_lang: Language | None = resolve_language(from_language, "Unknown source language.")

        for lang in (to_lang, from_lang):
            if lang is not None and not self.is_language_supported(lang):
                msg = f"'{self.engine_name}' does not support the language '{lang.iso6391}'."
                raise UnsupportedLanguageError(msg)
        return to_lang, from_lang

    def check_text(self, text: str) -> None:
        """Raise ValidationError for empty or over-long text."""
        if not isinstance(text, str) or not text.strip():
            msg = "The text to process must not be empty."
            raise ValidationError(msg)
        max_length: int | None = self._engine_attributes.max_text_length if self._engine_attributes else None
        if max_length is not None and len(text) > max_length:
            msg = f"The text exceeds the maximum length of {max_length} characters supported by '{self.engine_name}'."
            raise ValidationError(msg)

    @contextmanager
    def backend_errors(self, action: str) -> Iterator[None]:
        """Report every failure inside the block as a BackendOperationError naming this backend.

        Guard errors (validation, language support, disposal) and BackendOperationErrors pass through unchanged.
        Cancellation is never intercepted.

        Args:
            action (str): What was being done, for the error message (e.g. 'translate').
        """
        try:
            yield
        except (BackendOperationError, ValidationError, UnsupportedLanguageError, DisposedStateError):
            raise
        except CredentialAcquisitionError as err:
            logger.error("'%s': %s", self.engine_name, err)
            msg: str = f"'{self.engine_name}' could not {action}: unable to acquire credentials."
            raise BackendOperationError(msg, service=self.engine_name) from err
        except AsyncCommError as err:
            logger.error("'%s': %s", self.engine_name, err)
            msg = f"'{self.engine_name}' could not {action}: {err}"
            raise self._error_for_status(err.status, msg) from err
        except (KeyError, IndexError, TypeError, ValueError, AttributeError, json.JSONDecodeError) as err:
            logger.error("'%s': unexpected response: %r", self.engine_name, err)
            msg = f"'{self.engine_name}' could not {action}: received an invalid response from the API."
            raise BackendOperationError(msg, service=self.engine_name) from err

    def _error_for_status(self, status: int | None, msg: str) -> BackendOperationError:
        if status == 429:  # noqa: PLR2004
            return TranslationRateLimitError(msg, service=self.engine_name)
        return BackendOperationError(msg, service=self.engine_name)

    def language_from_code(self, code: str | None) -> Language | None:
        """Map a code returned by the service back to a language handle. None for unknown codes."""
        lang: Language | None = LANGUAGE_DICTIONARY.try_get_language(code)
        if lang is None and code:
            logger.debug("'%s': unknown language code in response: '%s'", self.engine_name, code)
        return lang
