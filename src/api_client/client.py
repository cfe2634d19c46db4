from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from api_client.config.settings import Settings, get_settings
from api_client.decoding import Decoder, PydanticDecoder
from api_client.endpoints import Endpoint
from api_client.errors import APIError
from api_client.transport import HTTPMethod, HTTPRequest, HTTPXTransport, Transport

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


def _is_absolute_http(url: httpx.URL) -> bool:
    return url.scheme in ("http", "https") and bool(url.host)


class APIClient:
    """Send one request, validate its status and decode the JSON body.

    Every failure leaves as exactly one :class:`~api_client.errors.APIError`,
    checked in this order: invalid URL, transport failure, non-2xx status,
    decode failure. The client holds no per-call state and can be shared
    between concurrent tasks.
    """

    __slots__ = ("_base_url", "_transport", "_decoder")

    def __init__(
        self,
        base_url: str,
        *,
        transport: Transport | None = None,
        decoder: Decoder | None = None,
    ) -> None:
        try:
            parsed = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid base URL: {base_url!r}") from exc
        if not _is_absolute_http(parsed):
            raise ValueError(f"base URL must be an absolute http(s) URL: {base_url!r}")
        self._base_url = parsed
        self._transport = transport if transport is not None else HTTPXTransport()
        self._decoder = decoder if decoder is not None else PydanticDecoder()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: Transport | None = None,
        decoder: Decoder | None = None,
    ) -> APIClient:
        if settings is None:
            settings = get_settings()
        if transport is None:
            transport = HTTPXTransport(timeout=settings.timeout_seconds)
        if decoder is None:
            decoder = PydanticDecoder(strict=settings.strict_decoding)
        return cls(settings.base_url, transport=transport, decoder=decoder)

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    async def perform_request(
        self,
        path: str,
        target: type[T],
        *,
        method: HTTPMethod = HTTPMethod.GET,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> T:
        """Resolve ``path`` against the base URL, send it and decode the reply into ``target``."""

        url = self._resolve(path)
        request = HTTPRequest(
            url=str(url),
            method=method,
            headers=dict(headers or {}),
            body=body,
        )

        LOGGER.debug("%s %s", request.method.value, request.url)
        try:
            response = await self._transport.send(request)
        except APIError:
            raise
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            LOGGER.warning("%s %s failed: %s", request.method.value, request.url, message)
            raise APIError.network_error(message) from exc

        LOGGER.debug("%s %s -> %s", request.method.value, request.url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise APIError.invalid_response(response.status_code)

        try:
            return self._decoder.decode(target, response.body)
        except Exception as exc:
            LOGGER.debug("Could not decode %s response from %s: %s", target, request.url, _summarize(exc))
            raise APIError.decoding_error(str(exc) or type(exc).__name__) from exc

    async def request(
        self,
        endpoint: Endpoint,
        target: type[T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> T:
        """Send a known :class:`~api_client.endpoints.Endpoint`, JSON-encoding its body."""

        merged = dict(headers or {})
        payload = endpoint.body
        content: bytes | None = None
        if payload is not None:
            content = _encode_json(payload)
            if not any(name.lower() == "content-type" for name in merged):
                merged["Content-Type"] = JSON_CONTENT_TYPE

        return await self.perform_request(
            endpoint.path,
            target,
            method=endpoint.method,
            headers=merged,
            body=content,
        )

    def _resolve(self, path: str) -> httpx.URL:
        try:
            url = self._base_url.join(path)
        except (httpx.InvalidURL, UnicodeError) as exc:
            LOGGER.debug("Cannot resolve %r against %s: %s", path, self._base_url, exc)
            raise APIError.invalid_url() from exc
        if not _is_absolute_http(url):
            raise APIError.invalid_url()
        return url


def _summarize(exc: Exception) -> str:
    # Error text can echo the response body; keep only the shape of the failure.
    if isinstance(exc, ValidationError):
        locations = [
            ".".join(str(part) for part in error["loc"]) or "<root>"
            for error in exc.errors(include_input=False)
        ]
        return f"{exc.error_count()} validation error(s) at {locations}"
    return type(exc).__name__


def _encode_json(payload: Any) -> bytes:
    try:
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise APIError.decoding_error(f"request body is not JSON serializable: {exc}") from exc


__all__ = ["APIClient"]
