"""Data models for polytrans.

This package contains the language table, the result types returned by the backends and the orchestrator,
the typed wire payloads, the Microsoft voice descriptors and the configuration dataclasses.
"""

from __future__ import annotations

from polytrans.models.config_models import Config, Engine, General, Translation
from polytrans.models.const_languages import LANGUAGE_DICTIONARY, LANGUAGES
from polytrans.models.language_models import Language, LanguageDictionary, TranslationServices
from polytrans.models.translation_models import AggregateOutcome, TranslationResult, TransliterationResult
from polytrans.models.voice_models import DEFAULT_VOICES, MicrosoftVoice

__all__: list[str] = [
    "DEFAULT_VOICES",
    "LANGUAGES",
    "LANGUAGE_DICTIONARY",
    "AggregateOutcome",
    "Config",
    "Engine",
    "General",
    "Language",
    "LanguageDictionary",
    "MicrosoftVoice",
    "Translation",
    "TranslationResult",
    "TranslationServices",
    "TransliterationResult",
]
