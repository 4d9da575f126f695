"""Translation backends and their orchestration.

The backend contract and the error taxonomy are re-exported here. The orchestrator lives in
``polytrans.core.trans.manager`` and the concrete backends in ``polytrans.core.trans.engines``.
"""

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
]
