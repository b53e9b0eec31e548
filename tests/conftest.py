from typing import Any, Mapping, Optional

import pytest

from apitemplate import ApiTemplateService, Config, FormData


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def token() -> str:
    return "secret-token"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def service(config: Config) -> ApiTemplateService:
    return ApiTemplateService(config=config)


class FakeResponse:
    """In-memory response exposing only the readers it is given."""

    def __init__(
        self,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        json_error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.headers = dict(headers or {})
        self._body = body
        self._text = text
        self._json_error = json_error
        if content is not None:
            self.read_bytes = self._read_bytes
            self._content = content

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    async def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._body

    async def text(self) -> str:
        if self._text is None:
            raise RuntimeError("body already consumed")
        return self._text

    async def _read_bytes(self) -> bytes:
        return self._content


class RecordingTransport:
    """Transport returning a canned response and recording every call."""

    def __init__(self, response: Optional[FakeResponse] = None) -> None:
        self.response = response or FakeResponse(
            headers={"content-type": "application/json"}, body={}
        )
        self.calls: list[dict[str, Any]] = []

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | FormData | None,
    ) -> FakeResponse:
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "body": body}
        )
        return self.response


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    return RecordingTransport
