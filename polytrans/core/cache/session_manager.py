from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from polytrans.core.cache.expiring import CacheEntry
from polytrans.core.trans.interface import CredentialAcquisitionError
from polytrans.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Awaitable, Callable

    from polytrans.core.cache.expiring import Clock


__all__: list[str] = ["SessionManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class SessionManager[T]:
    """Caches one credential and refreshes it at most once per expiry window.

    Readers take a lock-free fast path while the current entry is valid. Once it has expired, callers queue on an
    `asyncio.Lock` and re-check after acquiring it, so that N concurrent callers trigger exactly one refresh and
    all observe the entry the winner published.

    A failed refresh publishes nothing and is reported as CredentialAcquisitionError; the expired entry is never
    handed out as a fallback. The next call retries.

    Args:
        refresh (Callable[[], Awaitable[CacheEntry[T]]]): Fetches a new credential together with its expiry.
        name (str): Label used in log and error messages, usually the backend name.
        clock (Clock): Source of the current time.
    """

    def __init__(
        self,
        refresh: Callable[[], Awaitable[CacheEntry[T]]],
        *,
        name: str = "",
        clock: Clock = time.time,
    ) -> None:
        self._refresh: Callable[[], Awaitable[CacheEntry[T]]] = refresh
        self._name: str = name or self.__class__.__name__
        self._clock: Clock = clock
        self._entry: CacheEntry[T] | None = None
        self._lock: asyncio.Lock = asyncio.Lock()
        self._refresh_count: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def current(self) -> CacheEntry[T] | None:
        """The published entry, expired or not. None before the first successful refresh."""
        return self._entry

    @property
    def refresh_count(self) -> int:
        """Number of refresh operations started."""
        return self._refresh_count

    def is_valid(self) -> bool:
        entry: CacheEntry[T] | None = self._entry
        return entry is not None and not entry.is_expired(clock=self._clock)

    def invalidate(self) -> None:
        """Drop the current entry so that the next call refreshes."""
        self._entry = None
        logger.debug("'%s': credential invalidated", self._name)

    async def get_or_refresh(self) -> T:
        """Return the current credential, refreshing it first if it has expired.

        Returns:
            T: A credential that was valid when it was published.

        Raises:
            CredentialAcquisitionError: If the refresh operation failed.
            asyncio.CancelledError: If the caller was cancelled while waiting or refreshing.
        """
        entry: CacheEntry[T] | None = self._entry
        if entry is not None and not entry.is_expired(clock=self._clock):
            return entry.value

        async with self._lock:
            # another caller may have refreshed while we waited
            entry = self._entry
            if entry is not None and not entry.is_expired(clock=self._clock):
                return entry.value

            self._entry = None
            self._refresh_count += 1
            logger.debug("'%s': refreshing credential", self._name)
            try:
                new_entry: CacheEntry[T] = await self._refresh()
            except CredentialAcquisitionError:
                logger.warning("'%s': credential refresh failed", self._name)
                raise
            except Exception as err:
                logger.warning("'%s': credential refresh failed: %s", self._name, err)
                msg: str = f"Unable to acquire the credentials of '{self._name}'."
                raise CredentialAcquisitionError(msg) from err

            if not isinstance(new_entry, CacheEntry):
                msg = f"The refresh operation of '{self._name}' returned {type(new_entry).__name__}, not a CacheEntry."
                raise CredentialAcquisitionError(msg)

            self._entry = new_entry
            logger.info(
                "'%s': credential refreshed (valid for %.0f sec)", self._name, new_entry.remaining(clock=self._clock)
            )
            return new_entry.value
