import logging
from unittest.mock import MagicMock, patch

import pytest
from logging_config import setup_logging
from utils.sentry import init_sentry


@patch("logging_config.logging.basicConfig")
def test_setup_logging_development_is_debug(mock_basic_config: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "development")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    setup_logging()

    assert mock_basic_config.call_args[1]["level"] == logging.DEBUG

@patch("logging_config.logging.basicConfig")
def test_setup_logging_level_override(mock_basic_config: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "warning")

    setup_logging()

    assert mock_basic_config.call_args[1]["level"] == logging.WARNING

@patch("utils.sentry.sentry_sdk.init")
def test_init_sentry_without_dsn(mock_init: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SENTRY_DSN", raising=False)

    assert init_sentry() is False
    mock_init.assert_not_called()

@patch("utils.sentry.sentry_sdk.init")
def test_init_sentry_with_dsn(mock_init: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example.com/1")

    assert init_sentry() is True
    mock_init.assert_called_once()
    assert mock_init.call_args[1]["dsn"] == "https://key@sentry.example.com/1"
