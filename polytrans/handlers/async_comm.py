"""Asynchronous HTTP transport used by the translation backends.

Every backend instance owns one `AsyncHttp`, which owns one aiohttp session. Responses are decoded according to
their Content-Type through registered content handlers, or returned as text/bytes when the caller asks for it.
Transport failures are reported as `AsyncCommError` / `AsyncCommTimeoutError` so that the backends only deal with
a single error family.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from polytrans.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping, Sequence

    from aiohttp.client import ClientResponse


__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
    "DecodeMode",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

type HTTPMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
type DecodeMode = Literal["auto", "text", "bytes", "json"]
type Params = Mapping[str, str] | Sequence[tuple[str, str]]

CONNECT_TIMEOUT: Final[float] = 1.0
DEFAULT_TIMEOUT: Final[float] = 10.0


class AsyncHttp:
    """Asynchronous HTTP client with content-type aware decoding.

    The aiohttp session is created on first use (or on entering the context), since aiohttp requires a running
    event loop. After `close()` the next request opens a fresh session.

    Args:
        headers (Mapping[str, str] | None): Headers sent with every request, e.g. a User-Agent.
        total_timeout (float): Default total timeout of a request in seconds. 0 or less disables it.
    """

    def __init__(self, *, headers: Mapping[str, str] | None = None, total_timeout: float = DEFAULT_TIMEOUT) -> None:
        logger.debug("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None
        self.headers: dict[str, str] = dict(headers or {})
        self.total_timeout: float = total_timeout
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("text/plain", lambda x: x.decode("utf-8"))
        self.add_handler("text/html", lambda x: x.decode("utf-8"))
        self.add_handler("application/json", lambda x: json.loads(x.decode("utf-8")))
        self.add_handler("audio/mpeg", bytes)

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        self.initialize_session(suppress_already_log=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    def initialize_session(self, *, suppress_already_log: bool = False) -> None:
        """Create the aiohttp session if there is none or it was closed.

        Args:
            suppress_already_log (bool): If True, do not log when the session is already initialized.
        """
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(headers=self.headers, raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)
        elif not suppress_already_log:
            logger.debug("%s session already initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """Get the current aiohttp session, creating it when needed."""
        self.initialize_session(suppress_already_log=True)
        if self.__session is None:
            msg = "Session could not be initialized"
            raise RuntimeError(msg)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session and not self.__session.closed:
            await self.__session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(
        self,
        *,
        url: str,
        params: Params | None = None,
        headers: Mapping[str, str] | None = None,
        total_timeout: float | None = None,
        decode: DecodeMode = "auto",
    ) -> Any:
        """Perform an asynchronous HTTP GET request.

        Args:
            url (str): The URL to send the GET request to.
            params (Params | None): Query parameters, as a mapping or as pairs for repeated keys.
            headers (Mapping[str, str] | None): Extra headers for this request.
            total_timeout (float | None): Total timeout in seconds. None uses the client default.
            decode (DecodeMode): How to decode the body; "auto" follows the Content-Type.

        Returns:
            Any: The decoded response body.
        """
        return await self._request(
            "GET",
            url=url,
            total_timeout=total_timeout,
            decode=decode,
            params=params,
            headers=headers,
        )

    async def post(
        self,
        *,
        url: str,
        params: Params | None = None,
        headers: Mapping[str, str] | None = None,
        data: Any | None = None,
        json_data: Any | None = None,
        total_timeout: float | None = None,
        decode: DecodeMode = "auto",
    ) -> Any:
        """Perform an asynchronous HTTP POST request.

        Args:
            url (str): The URL to send the POST request to.
            params (Params | None): Query parameters, as a mapping or as pairs for repeated keys.
            headers (Mapping[str, str] | None): Extra headers for this request.
            data (Any | None): Form fields (a mapping is sent url-encoded) or a raw str/bytes body.
            json_data (Any | None): Object sent as a JSON body. Mutually exclusive with ``data``.
            total_timeout (float | None): Total timeout in seconds. None uses the client default.
            decode (DecodeMode): How to decode the body; "auto" follows the Content-Type.

        Returns:
            Any: The decoded response body.
        """
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if json_data is not None:
            kwargs["json"] = json_data
        else:
            kwargs["data"] = data
        return await self._request("POST", url=url, total_timeout=total_timeout, decode=decode, **kwargs)

    async def decode_response(self, resp: ClientResponse, decode: DecodeMode = "auto") -> Any:
        """Decode a response body.

        Args:
            resp (ClientResponse): The response object from the aiohttp request.
            decode (DecodeMode): "text", "bytes" and "json" force a decoding; "auto" looks up the content handler
                registered for the response's Content-Type.

        Returns:
            Any: The decoded body, or None for an empty body.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the Content-Type.
        """
        raw: bytes = await resp.read()
        if decode == "bytes":
            return raw
        if not raw:
            logger.debug("Received empty response")
            return None
        if decode == "text":
            return raw.decode(resp.charset or "utf-8")
        if decode == "json":
            return json.loads(raw.decode("utf-8"))

        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        logger.debug("'Content-Type': '%s'", content_type)
        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler:
            return handler(raw)

        msg: str = f"Unknown Content-Type '{content_type}'"
        raise AsyncCommInvalidContentTypeError(msg)

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Add a custom handler for a specific content type.

        Args:
            content_type (str): The content type to handle (e.g., "text/plain", "application/json").
            handler (Callable[[bytes], Any]): A function that takes bytes and returns the parsed data.
        """
        if self.content_handlers.get(content_type):
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler

    def _build_timeout(self, total_timeout: float | None) -> aiohttp.ClientTimeout:
        total: float = self.total_timeout if total_timeout is None else total_timeout
        if total <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total < CONNECT_TIMEOUT:
            # a connect timeout longer than the total would never trigger
            return aiohttp.ClientTimeout(total=total)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total)

    async def _request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        total_timeout: float | None,
        decode: DecodeMode,
        **kwargs: Any,
    ) -> Any:
        """Perform an asynchronous HTTP request.

        Raises:
            AsyncCommTimeoutError: If the request timed out.
            AsyncCommError: If the connection failed or the server answered with an error status.
        """
        logger.debug("[%s] url=%s timeout=%s params=%s", method, url, total_timeout, kwargs.get("params"))
        kwargs = {key: value for key, value in kwargs.items() if value is not None}

        try:
            async with self.session.request(
                method=method,
                url=url,
                timeout=self._build_timeout(total_timeout),
                **kwargs,
            ) as resp:
                return await self.decode_response(resp, decode)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "Unable to connect to the server."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = "HTTP communication failed."
            raise AsyncCommError(msg) from err
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            logger.debug(err)
            msg = "The response body could not be decoded."
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors.

    Attributes:
        msg (str): Error message, including the HTTP status when the error came from a response.
        status (int | None): HTTP status of the failed response, if any.
    """

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)
        self.status: int | None = None

        rsp: aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, aiohttp.ClientResponseError):
            self.status = rsp.status
            self.msg = f"{self.msg}: status='{rsp.status}'"

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """Error raised when an asynchronous communication operation times out."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """Error raised when no handler is registered for the Content-Type of a response."""
