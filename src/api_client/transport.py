from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

import httpx


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True, slots=True)
class HTTPRequest:
    url: str
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


class Transport(Protocol):
    """Anything that can turn an :class:`HTTPRequest` into an :class:`HTTPResponse`.

    Failures that never produced an HTTP response (DNS, refused connection,
    TLS, timeouts) are raised as the transport's own exceptions.
    """

    async def send(self, request: HTTPRequest) -> HTTPResponse: ...


class HTTPXTransport:
    """Transport backed by ``httpx.AsyncClient`` with a pluggable session factory."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        session_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._session_factory = session_factory or (lambda: httpx.AsyncClient(timeout=timeout))

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        async with self._session_factory() as session:
            response = await session.request(
                request.method.value,
                request.url,
                headers=dict(request.headers),
                content=request.body,
            )
            return HTTPResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                body=response.content,
            )


__all__ = ["HTTPMethod", "HTTPRequest", "HTTPResponse", "HTTPXTransport", "Transport"]
