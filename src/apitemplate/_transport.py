"""Transport seam: sends a prepared request and exposes the response body readers."""

import json
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

import httpx

from ._utils._content_type import get_header
from ._utils._request_builder import FormData, encode_empty_multipart
from ._utils._ssl_context import get_httpx_client_kwargs
from .models.blob import Blob


@runtime_checkable
class TransportResponse(Protocol):
    """Response as seen by the normalizer.

    ``blob`` is optional; the normalizer falls back to ``read_bytes`` and then to
    ``text`` when a reader is missing.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def is_success(self) -> bool: ...

    async def json(self) -> Any: ...

    async def text(self) -> str: ...

    async def read_bytes(self) -> bytes: ...


class Transport(Protocol):
    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Union[str, FormData, None],
    ) -> TransportResponse: ...


class HttpxResponse:
    """Adapter exposing an ``httpx.Response`` through :class:`TransportResponse`."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def is_success(self) -> bool:
        return self._response.is_success

    @property
    def raw(self) -> httpx.Response:
        return self._response

    async def json(self) -> Any:
        content = await self._response.aread()
        return json.loads(content)

    async def text(self) -> str:
        await self._response.aread()
        return self._response.text

    async def read_bytes(self) -> bytes:
        return await self._response.aread()

    async def blob(self) -> Blob:
        content = await self._response.aread()
        return Blob(
            content=content,
            content_type=get_header(self._response.headers, "content-type"),
        )


class HttpxTransport:
    """Default transport backed by ``httpx.AsyncClient``.

    Without an injected client a new one is opened for every request and
    closed once the body has been read, so calls share no connection state.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self._client = client
        self._timeout = timeout

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Union[str, FormData, None],
    ) -> HttpxResponse:
        kwargs: dict[str, Any] = {"headers": dict(headers)}
        if isinstance(body, FormData):
            files = body.to_httpx_files()
            if files:
                kwargs["files"] = files
            else:
                content, content_type = encode_empty_multipart()
                kwargs["content"] = content
                kwargs["headers"]["Content-Type"] = content_type
        elif body is not None:
            kwargs["content"] = body.encode("utf-8")

        if self._client is not None:
            response = await self._client.request(method, url, **kwargs)
            return HttpxResponse(response)

        async with httpx.AsyncClient(
            **get_httpx_client_kwargs(self._timeout)
        ) as client:
            response = await client.request(method, url, **kwargs)
            await response.aread()
        return HttpxResponse(response)
