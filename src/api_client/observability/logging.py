from __future__ import annotations

import logging
from typing import Sequence

from api_client.config.settings import get_settings

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None, *, extra_handlers: Sequence[logging.Handler] | None = None) -> None:
    """Configure root logging with a consistent format.

    ``level`` defaults to ``Settings.log_level`` (``API_CLIENT_LOG_LEVEL``).
    Additional handlers (file, streaming, etc.) can be supplied via ``extra_handlers``;
    each one gets the same formatter unless it already has its own.
    """

    if level is None:
        level = get_settings().log_level
    logging.basicConfig(level=level.upper(), format=DEFAULT_FORMAT)
    if extra_handlers:
        root = logging.getLogger()
        for handler in extra_handlers:
            if handler.formatter is None:
                handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            root.addHandler(handler)


__all__ = ["configure_logging", "DEFAULT_FORMAT"]
