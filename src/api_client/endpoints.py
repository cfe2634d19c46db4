from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from api_client.transport import HTTPMethod


class EndpointKind(str, Enum):
    REGISTER = "register"
    LOGIN = "login"
    USER = "user"


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Static description of a known API route: path, method and JSON body."""

    kind: EndpointKind
    email: str | None = None
    password: str | None = field(default=None, repr=False)
    user_id: int | None = None

    @classmethod
    def register(cls, email: str, password: str) -> Endpoint:
        return cls(EndpointKind.REGISTER, email=email, password=password)

    @classmethod
    def login(cls, email: str, password: str) -> Endpoint:
        return cls(EndpointKind.LOGIN, email=email, password=password)

    @classmethod
    def user(cls, user_id: int) -> Endpoint:
        return cls(EndpointKind.USER, user_id=user_id)

    @property
    def path(self) -> str:
        if self.kind is EndpointKind.REGISTER:
            return "/api/register"
        if self.kind is EndpointKind.LOGIN:
            return "/api/login"
        return f"/api/users/{self.user_id}"

    @property
    def method(self) -> HTTPMethod:
        if self.kind in (EndpointKind.REGISTER, EndpointKind.LOGIN):
            return HTTPMethod.POST
        return HTTPMethod.GET

    @property
    def body(self) -> dict[str, Any] | None:
        if self.kind in (EndpointKind.REGISTER, EndpointKind.LOGIN):
            return {"email": self.email, "password": self.password}
        return None


__all__ = ["Endpoint", "EndpointKind"]
