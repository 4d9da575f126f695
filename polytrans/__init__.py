"""polytrans: one interface over several online translation services.

Each backend (Google, Google batchexecute, Microsoft, Bing, Yandex, DeepL) implements the same capability set.
`TransManager` tries them in order and returns the first success together with the errors of those that failed.
"""

from polytrans.core.cache import CacheEntry, SessionManager
from polytrans.core.trans.interface import (
    AggregateFailure,
    BackendOperationError,
    CredentialAcquisitionError,
    DisposedStateError,
    EngineAttributes,
    TransInterface,
    TranslateExceptionError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
    UnsupportedLanguageError,
    ValidationError,
)
from polytrans.core.trans.manager import TransManager
from polytrans.models.config_models import Config
from polytrans.models.const_languages import LANGUAGE_DICTIONARY
from polytrans.models.language_models import Language, TranslationServices
from polytrans.models.translation_models import AggregateOutcome, TranslationResult, TransliterationResult

__all__: list[str] = [
    "LANGUAGE_DICTIONARY",
    "AggregateFailure",
    "AggregateOutcome",
    "BackendOperationError",
    "CacheEntry",
    "Config",
    "CredentialAcquisitionError",
    "DisposedStateError",
    "EngineAttributes",
    "Language",
    "SessionManager",
    "TransInterface",
    "TransManager",
    "TranslateExceptionError",
    "TranslationQuotaExceededError",
    "TranslationRateLimitError",
    "TranslationResult",
    "TranslationServices",
    "TransliterationResult",
    "UnsupportedLanguageError",
    "ValidationError",
]
