"""Wire payload models of the JSON backends.

Field names are converted from the services' camelCase with dataclasses-json. Every model is decoded with
``from_dict(..., infer_missing=True)`` so that absent optional members become None instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, LetterCase, config, dataclass_json

__all__: list[str] = [
    "BingErrorResult",
    "BingTranslationResult",
    "MicrosoftAuthToken",
    "MicrosoftLanguageDetectionResult",
    "MicrosoftTranslationResult",
    "MicrosoftTransliterationResult",
    "YandexLanguageDetectionResult",
    "YandexTranslationResult",
]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DetectedLanguage(DataClassJsonMixin):
    language: str
    score: float | None = None


# Bing


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class _BingTransliteration(DataClassJsonMixin):
    text: str
    script: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class _BingTranslation(DataClassJsonMixin):
    text: str
    to: str
    transliteration: _BingTransliteration | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class BingTranslationResult(DataClassJsonMixin):
    """One element of the array returned by ``/ttranslatev3``.

    The first element carries the translation; when transliteration is available a second element carries
    ``inputTransliteration`` for the source text.
    """

    detected_language: DetectedLanguage | None = None
    translations: list[_BingTranslation] | None = None
    input_transliteration: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class BingErrorResult(DataClassJsonMixin):
    """Error object Bing returns with HTTP 200."""

    status_code: int
    message: str | None = None


# Microsoft


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class _MicrosoftTranslation(DataClassJsonMixin):
    text: str
    to: str


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class MicrosoftTranslationResult(DataClassJsonMixin):
    translations: list[_MicrosoftTranslation] = field(default_factory=list)
    detected_language: DetectedLanguage | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class MicrosoftTransliterationResult(DataClassJsonMixin):
    text: str
    script: str


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class MicrosoftLanguageDetectionResult(DataClassJsonMixin):
    language: str
    score: float | None = None


@dataclass_json
@dataclass
class MicrosoftAuthToken(DataClassJsonMixin):
    """Azure speech token issued to the translator app.

    Attributes:
        token (str): JWT bearer token (``t``).
        region (str): Azure region the token is valid for (``r``).
    """

    token: str = field(metadata=config(field_name="t"))
    region: str = field(metadata=config(field_name="r"))


# Yandex


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class YandexTranslationResult(DataClassJsonMixin):
    code: int = 200
    message: str | None = None
    lang: str | None = None
    text: list[str] | None = None

    @property
    def is_successful(self) -> bool:
        return self.code == 200  # noqa: PLR2004


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class YandexLanguageDetectionResult(DataClassJsonMixin):
    code: int = 200
    message: str | None = None
    lang: str | None = None

    @property
    def is_successful(self) -> bool:
        return self.code == 200  # noqa: PLR2004
