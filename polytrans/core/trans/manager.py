from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from polytrans.core.trans.engines import (
    BingTranslation,  # noqa: F401
    DeeplTranslation,  # noqa: F401
    Google2Translation,  # noqa: F401
    GoogleTranslation,  # noqa: F401
    MicrosoftTranslation,  # noqa: F401
    YandexTranslation,  # noqa: F401
)
from polytrans.core.trans.interface import (
    AggregateFailure,
    DisposedStateError,
    TransInterface,
    TranslateExceptionError,
    UnsupportedLanguageError,
    ValidationError,
)
from polytrans.models.translation_models import AggregateOutcome
from polytrans.utils.logger_utils import LoggerUtils
from polytrans.utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Awaitable, Callable, Iterable, Sequence

    from polytrans.models.config_models import Config
    from polytrans.models.language_models import Language
    from polytrans.models.translation_models import TranslationResult, TransliterationResult


__all__: list[str] = ["AllFailed", "FirstSuccess", "TransManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

AGGREGATE_FAILURE_MESSAGE: str = "No translator provided a valid result."


@dataclass(frozen=True)
class FirstSuccess[T]:
    """Fold outcome: a backend succeeded after the recorded failures."""

    result: T
    service: str
    errors: dict[str, Exception] = field(default_factory=dict)


@dataclass(frozen=True)
class AllFailed:
    """Fold outcome: every invoked backend failed."""

    errors: dict[str, Exception] = field(default_factory=dict)


class TransManager:
    """Runs each operation across an ordered list of backends with fallback and error aggregation.

    Backends are tried in the order they were given, never reordered. For translate and transliterate, a backend that
    does not support the target language (or the source language, when one is given) is skipped without being
    invoked or recorded. The first success is returned together with the errors of the backends that failed before
    it; when every invoked backend fails, AggregateFailure carries all of their errors.

    The manager owns its backends: closing it closes every backend.

    Args:
        backends (Iterable[TransInterface]): Initialized backends, in fallback order.

    Raises:
        ValueError: If the list is empty or two backends share a name.
        TypeError: If an element is a TransManager or not a backend.
    """

    def __init__(self, backends: Iterable[TransInterface]) -> None:
        engines: tuple[TransInterface, ...] = tuple(backends)
        if not engines:
            msg = "The backend list must not be empty."
            raise ValueError(msg)

        for engine in engines:
            if isinstance(engine, TransManager):
                msg = "The backend list must not contain a TransManager."
                raise TypeError(msg)
            if not isinstance(engine, TransInterface):
                msg = f"'{type(engine).__name__}' is not a translation backend."
                raise TypeError(msg)

        names: list[str] = [engine.engine_name for engine in engines]
        duplicates: set[str] = {name for name in names if names.count(name) > 1}
        if duplicates:
            msg = f"Backend names must be unique: {sorted(duplicates)}"
            raise ValueError(msg)

        self._engines: tuple[TransInterface, ...] = engines
        self._disposed: bool = False
        logger.debug("TransManager backends: %s", names)

    @classmethod
    def from_config(cls, config: Config) -> TransManager:
        """Build the backends listed in ``TRANSLATION.ENGINE``, in that order.

        Unknown names and backends whose setup fails are logged and left out.

        Raises:
            ValueError: If no backend could be set up.
        """
        logger.info("TransManager initialization started")
        engines: list[TransInterface] = []
        for name in config.TRANSLATION.ENGINE:
            engine_cls: type[TransInterface] | None = TransInterface.registered.get(name)
            if engine_cls is None:
                logger.critical("Translation class not found: '%s'", name)
                continue
            instance: TransInterface = engine_cls()
            try:
                instance.initialize(config)
            except RuntimeError as err:
                logger.critical("RuntimeError in '%s' translation setup: %s", name, err)
                continue
            except TranslateExceptionError as err:
                logger.critical("Exception in '%s' translation setup: %s", name, err)
                continue
            engines.append(instance)
            logger.info("Translation engine initialized: '%s'", name)
            logger.debug("Engine attributes: %s", instance.engine_attributes)

        if not engines:
            msg = f"None of the configured translation engines could be initialized: {config.TRANSLATION.ENGINE}"
            raise ValueError(msg)
        return cls(engines)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(backends={self.engine_names!r})"

    @property
    def engines(self) -> tuple[TransInterface, ...]:
        return self._engines

    @property
    def engine_names(self) -> list[str]:
        return [engine.engine_name for engine in self._engines]

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def ensure_not_disposed(self) -> None:
        if self._disposed:
            msg = "The TransManager has been closed."
            raise DisposedStateError(msg)

    def is_language_supported(self, language: Language | str) -> bool:
        """Check whether at least one backend supports the language.

        Raises:
            DisposedStateError: If the manager has been closed.
        """
        self.ensure_not_disposed()
        return any(engine.is_language_supported(language) for engine in self._engines)

    async def translate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> AggregateOutcome[TranslationResult]:
        """Translate with the first eligible backend that succeeds.

        Raises:
            DisposedStateError: If the manager has been closed.
            ValidationError: If the text is empty or no target language is given.
            UnsupportedLanguageError: If no backend supports the target or the source language, or none supports both.
            AggregateFailure: If every eligible backend failed.
        """
        eligible: list[TransInterface] = self._eligible_engines(text, to_language, from_language)
        logger.debug("translate: '%s' -> %s via %s", StringUtils.preview(text), to_language, eligible)
        outcome = await self._fold(
            eligible, lambda engine: engine.translate(text, to_language, from_language), "translate"
        )
        return self._unwrap(outcome)

    async def transliterate(
        self, text: str, to_language: Language | str, from_language: Language | str | None = None
    ) -> AggregateOutcome[TransliterationResult]:
        """Transliterate with the first eligible backend that succeeds. Raises like `translate`."""
        eligible: list[TransInterface] = self._eligible_engines(text, to_language, from_language)
        outcome = await self._fold(
            eligible, lambda engine: engine.transliterate(text, to_language, from_language), "transliterate"
        )
        return self._unwrap(outcome)

    async def detect_language(self, text: str) -> AggregateOutcome[Language]:
        """Detect the language with the first backend that succeeds. No backend is skipped.

        Raises:
            DisposedStateError: If the manager has been closed.
            ValidationError: If the text is empty.
            AggregateFailure: If every backend failed.
        """
        self.ensure_not_disposed()
        self._check_text(text)
        outcome = await self._fold(self._engines, lambda engine: engine.detect_language(text), "detect_language")
        return self._unwrap(outcome)

    async def close(self) -> None:
        """Close every backend in order. Idempotent.

        A backend that fails to close is logged and the remaining backends are still closed.
        """
        if self._disposed:
            return
        self._disposed = True
        for engine in self._engines:
            try:
                await engine.close()
            except Exception:
                logger.exception("'%s': error while closing", engine.engine_name)
        logger.debug("'%s' process termination", self.__class__.__name__)

    @staticmethod
    def _check_text(text: str) -> None:
        if not isinstance(text, str) or not text.strip():
            msg = "The text to process must not be empty."
            raise ValidationError(msg)

    def _eligible_engines(
        self, text: str, to_language: Language | str, from_language: Language | str | None
    ) -> list[TransInterface]:
        """Apply the guards of translate/transliterate and return the backends to try, in order.

        No backend is invoked here; only their language support is queried.
        """
        self.ensure_not_disposed()
        self._check_text(text)
        if to_language is None or (isinstance(to_language, str) and not to_language.strip()):
            msg = "The target language is required."
            raise ValidationError(msg)

        if not self.is_language_supported(to_language):
            msg = f'No available translator supports the target language "{to_language}".'
            raise UnsupportedLanguageError(msg)
        if from_language is not None and not self.is_language_supported(from_language):
            msg = f'No available translator supports the source language "{from_language}".'
            raise UnsupportedLanguageError(msg)

        eligible: list[TransInterface] = [
            engine
            for engine in self._engines
            if engine.is_language_supported(to_language)
            and (from_language is None or engine.is_language_supported(from_language))
        ]
        if not eligible:
            msg = f'No available translator supports the language pair "{from_language}" -> "{to_language}".'
            raise UnsupportedLanguageError(msg)
        return eligible

    async def _fold[T](
        self,
        engines: Sequence[TransInterface],
        operation: Callable[[TransInterface], Awaitable[T]],
        action: str,
    ) -> FirstSuccess[T] | AllFailed:
        """Invoke the backends left to right until one succeeds.

        Cancellation is never recorded as a backend failure: a cancellation requested before an attempt starts is
        raised instead of invoking the next backend, and one raised by a backend propagates unchanged.
        """
        errors: dict[str, Exception] = {}
        for engine in engines:
            self._raise_if_cancelling()
            name: str = engine.engine_name
            try:
                result: T = await operation(engine)
            except TranslateExceptionError as err:
                logger.warning("'%s' failed to %s: %s", name, action, err)
                errors[name] = err
            except Exception as err:
                logger.exception("'%s' raised an unexpected error during %s", name, action)
                errors[name] = err
            else:
                if errors:
                    logger.info("'%s' succeeded after %d failure(s)", name, len(errors))
                return FirstSuccess(result, name, errors)
        return AllFailed(errors)

    @staticmethod
    def _raise_if_cancelling() -> None:
        task: asyncio.Task | None = asyncio.current_task()
        if task is not None and task.cancelling():
            raise asyncio.CancelledError

    @staticmethod
    def _unwrap[T](outcome: FirstSuccess[T] | AllFailed) -> AggregateOutcome[T]:
        match outcome:
            case FirstSuccess(result=result, service=service, errors=errors):
                return AggregateOutcome(inner_result=result, attempted_errors=errors, service=service)
            case AllFailed(errors=errors):
                raise AggregateFailure(AGGREGATE_FAILURE_MESSAGE, errors)
