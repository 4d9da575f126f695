from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, ClassVar

from polytrans.core.trans.interface import TransInterface, TranslateExceptionError
from polytrans.handlers.async_comm import AsyncHttp
from polytrans.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Coroutine, Iterable

    from polytrans.models.config_models import Config, Engine

__all__: list[str] = ["HttpTransEngine"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DEFAULT_USER_AGENT: str = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class HttpTransEngine(TransInterface):
    """Base class of the backends that talk to their service through an `AsyncHttp` transport.

    Not registered itself. Subclasses call `setup_transport()` from `initialize()` and reach the transport through
    `_http`. The configured API URL and User-Agent override the class defaults.
    """

    DEFAULT_API_URL: ClassVar[str] = ""
    DEFAULT_USER_AGENT: ClassVar[str] = DEFAULT_USER_AGENT

    def __init__(self) -> None:
        super().__init__()
        self.__http: AsyncHttp | None = None
        self.api_url: str = self.DEFAULT_API_URL

    @staticmethod
    def fetch_engine_name() -> str:
        return ""

    @property
    def _http(self) -> AsyncHttp:
        if self.__http is None:
            msg = f"The transport of '{self.engine_name}' is not initialised"
            raise TranslateExceptionError(msg)
        return self.__http

    @_http.setter
    def _http(self, http: AsyncHttp | None) -> None:
        self.__http = http
        logger.debug("'%s': 'set transport'", self.__class__.__name__)

    def setup_transport(self, config: Config) -> None:
        """Create the transport from the backend's configuration section.

        Args:
            config (Config): Loaded configuration. Missing values fall back to the class defaults.
        """
        name: str = self.fetch_engine_name()
        section: Engine = config.engine_section(name)
        self.api_url = section.API_URL or self.DEFAULT_API_URL
        user_agent: str = section.USER_AGENT or self.DEFAULT_USER_AGENT
        self._http = AsyncHttp(headers={"User-Agent": user_agent}, total_timeout=config.engine_timeout(name))
        logger.debug("'%s': api_url='%s', timeout=%s", name, self.api_url, config.engine_timeout(name))

    async def _release(self) -> None:
        if self.__http is not None:
            await self.__http.close()
            self.__http = None

    @staticmethod
    async def fetch_all[T](requests: Iterable[Coroutine[Any, Any, T]]) -> list[T]:
        """Run requests concurrently and return their results in order.

        The first failure cancels the requests still running and is raised unwrapped, so that `backend_errors()`
        reports it like a single request failure.
        """
        try:
            async with asyncio.TaskGroup() as group:
                tasks: list[asyncio.Task[T]] = [group.create_task(request) for request in requests]
        except ExceptionGroup as eg:
            raise eg.exceptions[0]  # noqa: B904
        return [task.result() for task in tasks]
