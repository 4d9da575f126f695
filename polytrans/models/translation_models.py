"""Models for translation results.

Defines the per-backend TranslationResult / TransliterationResult and the AggregateOutcome returned by the
orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polytrans.models.language_models import Language

__all__: list[str] = ["AggregateOutcome", "TranslationResult", "TransliterationResult"]


@dataclass(frozen=True)
class TranslationResult:
    """Result of a translation performed by a single backend.

    Attributes:
        translation (str): Translated text.
        source (str): Text that was translated.
        target_language (Language): Language of the translation.
        source_language (Language | None): Language of the source text, given or detected. None if unknown.
        service (str): Name of the backend that produced the result.
        transliteration (str | None): Transliteration of the translation, if the backend returned one.
        source_transliteration (str | None): Transliteration of the source text, if the backend returned one.
        confidence (float | None): Confidence of the source language detection.
    """

    translation: str
    source: str
    target_language: Language
    source_language: Language | None
    service: str
    transliteration: str | None = None
    source_transliteration: str | None = None
    confidence: float | None = None

    @property
    def has_transliteration(self) -> bool:
        return bool(self.transliteration)

    def __str__(self) -> str:
        return self.translation


@dataclass(frozen=True)
class TransliterationResult:
    """Result of a transliteration performed by a single backend.

    Attributes:
        transliteration (str): Transliterated text.
        source (str): Text that was transliterated.
        target_language (Language | None): Language whose script the text was converted to.
        source_language (Language | None): Language of the source text.
        service (str): Name of the backend that produced the result.
        source_transliteration (str | None): Transliteration of the source text.
        script (str | None): Output script (ISO 15924), when the backend reports one.
    """

    transliteration: str
    source: str
    target_language: Language | None
    source_language: Language | None
    service: str
    source_transliteration: str | None = None
    script: str | None = None

    def __str__(self) -> str:
        return self.transliteration


@dataclass(frozen=True)
class AggregateOutcome[T]:
    """Successful outcome of an operation fanned out across several backends.

    Attributes:
        inner_result (T): Result returned by the backend that succeeded.
        attempted_errors (dict[str, Exception]): Errors of the backends invoked before the successful one,
            keyed by backend name in invocation order. Backends skipped for language support never appear.
        service (str): Name of the backend that succeeded.
    """

    inner_result: T
    attempted_errors: dict[str, Exception] = field(default_factory=dict)
    service: str = ""

    def __str__(self) -> str:
        return str(self.inner_result)
