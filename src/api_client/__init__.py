"""Minimal asynchronous HTTP API client with typed JSON decoding."""

from api_client.client import APIClient
from api_client.decoding import Decoder, PydanticDecoder
from api_client.endpoints import Endpoint, EndpointKind
from api_client.errors import APIError, APIErrorKind
from api_client.transport import HTTPMethod, HTTPRequest, HTTPResponse, HTTPXTransport, Transport

__all__ = [
    "APIClient",
    "APIError",
    "APIErrorKind",
    "Decoder",
    "Endpoint",
    "EndpointKind",
    "HTTPMethod",
    "HTTPRequest",
    "HTTPResponse",
    "HTTPXTransport",
    "PydanticDecoder",
    "Transport",
]
