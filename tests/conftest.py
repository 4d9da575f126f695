from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from polytrans.handlers.async_comm import AsyncHttp
from polytrans.models.config_models import Config


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def fake_http() -> MagicMock:
    """Transport double; tests set ``return_value`` / ``side_effect`` of get and post."""
    http = MagicMock(spec=AsyncHttp)
    http.get = AsyncMock()
    http.post = AsyncMock()
    http.close = AsyncMock()
    return http
