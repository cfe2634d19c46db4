from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_base_url(value: Any) -> str:
    url = str(value).strip()
    if not url.startswith(('http://', 'https://')):
        raise ValueError('base_url must be an absolute http(s) URL')
    return url


BaseURL = Annotated[str, BeforeValidator(_parse_base_url)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_prefix='API_CLIENT_',
        extra='ignore',
    )

    base_url: BaseURL = 'http://localhost:8000'
    timeout_seconds: float = 10.0
    strict_decoding: bool = True
    log_level: str = 'INFO'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
