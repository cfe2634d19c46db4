from __future__ import annotations

from collections.abc import Callable
from typing import Iterator

import httpx
import pytest
from pydantic import BaseModel

from api_client import APIClient, HTTPRequest, HTTPResponse
from api_client.config import settings as settings_module

BASE_URL = "https://mockapi.example.com"


class User(BaseModel):
    id: int
    name: str
    isPremium: bool


class StubTransport:
    """Map a request's URL path to a canned response or a canned exception."""

    def __init__(self) -> None:
        self.responses: dict[str, HTTPResponse | Exception] = {}
        self.requests: list[HTTPRequest] = []

    def set_response(self, path: str, status_code: int = 200, body: bytes = b"") -> None:
        self.responses[path] = HTTPResponse(status_code=status_code, body=body)

    def set_error(self, path: str, error: Exception) -> None:
        self.responses[path] = error

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        path = httpx.URL(request.url).path
        result = self.responses.get(path)
        if result is None:
            raise LookupError(f"no stubbed response for {path}")
        if isinstance(result, Exception):
            raise result
        return result


class RecordingDecoder:
    def __init__(self, decode: Callable[[type, bytes], object]) -> None:
        self._decode = decode
        self.calls: list[bytes] = []

    def decode(self, target, data):
        self.calls.append(data)
        return self._decode(target, data)


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def client(stub_transport: StubTransport) -> APIClient:
    return APIClient(BASE_URL, transport=stub_transport)


@pytest.fixture(autouse=True)
def clear_settings() -> Iterator[None]:
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
