"""Immutable cache entry with an expiration instant.

Instants are POSIX timestamps in seconds (``time.time()``); ``math.inf`` means the entry never expires.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

__all__: list[str] = ["CacheEntry", "Clock"]

type Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry[T]:
    """A cached value and the instant it stops being valid.

    Entries are never mutated; a refresh publishes a new entry.

    Attributes:
        value (T): The cached payload. Returned even after expiry, callers check `is_expired()` first.
        cached_at (float): When the entry was created.
        expires_at (float): When the entry expires. ``math.inf`` for never.
    """

    value: T
    cached_at: float
    expires_at: float = math.inf

    @classmethod
    def never_expiring(cls, value: T, *, clock: Clock = time.time) -> CacheEntry[T]:
        return cls(value, clock())

    @classmethod
    def expiring_at(cls, value: T, expires_at: float, *, clock: Clock = time.time) -> CacheEntry[T]:
        """Create an entry that expires at an absolute instant.

        Args:
            value (T): Payload to cache.
            expires_at (float): POSIX timestamp after which the entry is expired.
            clock (Clock): Source of the current time.
        """
        return cls(value, clock(), float(expires_at))

    @classmethod
    def expiring_after(cls, value: T, duration: float, *, clock: Clock = time.time) -> CacheEntry[T]:
        """Create an entry that expires ``duration`` seconds from now.

        Raises:
            ValueError: If the duration is negative.
        """
        if duration < 0:
            msg: str = f"Duration must not be negative: {duration}"
            raise ValueError(msg)
        now: float = clock()
        return cls(value, now, now + duration)

    def is_expired(self, *, clock: Clock = time.time) -> bool:
        """Check whether the entry has reached its expiration instant. Has no side effects."""
        return clock() >= self.expires_at

    def remaining(self, *, clock: Clock = time.time) -> float:
        """Seconds left until expiry, never negative."""
        return max(0.0, self.expires_at - clock())
