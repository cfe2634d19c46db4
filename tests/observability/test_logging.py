from __future__ import annotations

import asyncio
import logging

import pytest

from api_client import APIError
from api_client.observability import configure_logging
from api_client.observability.logging import DEFAULT_FORMAT


def test_configure_logging_attaches_extra_handlers():
    handler = logging.NullHandler()
    root = logging.getLogger()
    try:
        configure_logging('debug', extra_handlers=[handler])
        assert handler in root.handlers
        assert handler.formatter._fmt == DEFAULT_FORMAT
    finally:
        root.removeHandler(handler)


def test_client_logs_network_failures(caplog, client, stub_transport):
    stub_transport.set_error('/user/1', ConnectionError('offline'))
    with caplog.at_level(logging.WARNING, logger='api_client.client'):
        with pytest.raises(APIError):
            asyncio.run(client.perform_request('user/1', dict))
    assert any('offline' in record.getMessage() for record in caplog.records)


def test_configure_logging_defaults_to_settings_level(monkeypatch):
    seen = {}
    monkeypatch.setenv('API_CLIENT_LOG_LEVEL', 'warning')
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: seen.update(kwargs))

    configure_logging()

    assert seen == {'level': 'WARNING', 'format': DEFAULT_FORMAT}
