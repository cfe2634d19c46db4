from __future__ import annotations

from enum import Enum


class APIErrorKind(str, Enum):
    INVALID_RESPONSE = "invalid_response"
    DECODING_ERROR = "decoding_error"
    NETWORK_ERROR = "network_error"
    INVALID_URL = "invalid_url"


class APIError(Exception):
    """The only error :class:`~api_client.client.APIClient` lets escape.

    ``kind`` is one of the four :class:`APIErrorKind` members; branch on it
    instead of subclassing. ``status_code`` is set for ``INVALID_RESPONSE``
    only, ``message`` for ``DECODING_ERROR`` and ``NETWORK_ERROR`` only.
    Build instances through the named constructors.
    """

    def __init__(
        self,
        kind: APIErrorKind,
        *,
        status_code: int | None = None,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.message = message
        super().__init__(self.description)

    @classmethod
    def invalid_response(cls, status_code: int) -> APIError:
        return cls(APIErrorKind.INVALID_RESPONSE, status_code=status_code)

    @classmethod
    def decoding_error(cls, message: str) -> APIError:
        return cls(APIErrorKind.DECODING_ERROR, message=message)

    @classmethod
    def network_error(cls, message: str) -> APIError:
        return cls(APIErrorKind.NETWORK_ERROR, message=message)

    @classmethod
    def invalid_url(cls) -> APIError:
        return cls(APIErrorKind.INVALID_URL)

    @property
    def description(self) -> str:
        if self.kind is APIErrorKind.INVALID_RESPONSE:
            return f"Invalid response with status code: {self.status_code}"
        if self.kind is APIErrorKind.DECODING_ERROR:
            return f"Decoding failed: {self.message}"
        if self.kind is APIErrorKind.NETWORK_ERROR:
            return f"Network error: {self.message}"
        return "Invalid URL"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return (self.kind, self.status_code, self.message) == (
            other.kind,
            other.status_code,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.status_code, self.message))

    def __repr__(self) -> str:
        if self.kind is APIErrorKind.INVALID_RESPONSE:
            return f"APIError.invalid_response({self.status_code})"
        if self.kind is APIErrorKind.INVALID_URL:
            return "APIError.invalid_url()"
        return f"APIError.{self.kind.value}({self.message!r})"


__all__ = ["APIError", "APIErrorKind"]
