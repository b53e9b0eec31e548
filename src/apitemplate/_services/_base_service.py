from logging import getLogger
from typing import Mapping, Optional

from .._config import Config
from .._transport import HttpxTransport, Transport, TransportResponse
from .._utils._errors import handle_transport_errors
from .._utils._request_builder import FormData
from .._utils.constants import HEADER_AUTHORIZATION, LOGGER_NAME


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in headers.items()
    }


class BaseService:
    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()
        self._transport = transport or HttpxTransport(timeout=self._config.timeout)

        super().__init__()

    @property
    def config(self) -> Config:
        return self._config

    async def send_async(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[str | FormData] = None,
    ) -> TransportResponse:
        headers = {**self._config.default_headers, **headers}

        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {mask_headers(headers)}")

        async with handle_transport_errors(method, url):
            response = await self._transport.send(method, url, headers, body)

        self._logger.debug(f"Response: {response.status_code} {method} {url}")
        return response
