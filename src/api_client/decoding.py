from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class Decoder(Protocol):
    def decode(self, target: type[T], data: bytes) -> T: ...


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def get_adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable targets (e.g. Annotated metadata holding a dict) skip the cache
        return TypeAdapter(target)


class PydanticDecoder:
    """Validate raw JSON bytes into ``target`` through a pydantic ``TypeAdapter``.

    ``target`` may be anything pydantic can build a schema for: models,
    dataclasses, TypedDicts, builtins and generic containers. Adapters are
    cached per target. Raises ``pydantic.ValidationError`` on malformed JSON,
    missing fields or type mismatches.
    """

    def __init__(self, *, strict: bool = True) -> None:
        self._strict = strict

    def decode(self, target: Any, data: bytes) -> Any:
        return get_adapter(target).validate_json(data, strict=self._strict)


__all__ = ["Decoder", "PydanticDecoder", "get_adapter"]
