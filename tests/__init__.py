"""Unit tests for polytrans.

Tests use pytest with asyncio support. Backends are exercised offline: their HTTP transport is replaced by a mock.
"""
