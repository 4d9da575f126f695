"""Transport handlers for polytrans.

Modules:
- async_comm: aiohttp-based HTTP client owned by each translation backend.
"""

from polytrans.handlers.async_comm import (
    AsyncCommError,
    AsyncCommInvalidContentTypeError,
    AsyncCommTimeoutError,
    AsyncHttp,
)

__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]
