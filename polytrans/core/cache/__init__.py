"""Credential cache package.

Provides the immutable expiring cache entry and the per-backend session manager that refreshes it.
"""

from __future__ import annotations

from polytrans.core.cache.expiring import CacheEntry
from polytrans.core.cache.session_manager import SessionManager

__all__: list[str] = ["CacheEntry", "SessionManager"]
