"""Tests for the root greeting endpoint, including hostname fallback."""

import logging
import socket
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

import greeting_service.domain.hostname as hostname_module
from greeting_service.api.application import create_api_application
from greeting_service.domain import GreetingMessage

LOGGER_NAME = "tests.greeting_service.greeting"


def test_api_greeting_returns_message_with_hostname() -> None:
    """Return HTTP 200 with greeting text and the machine host name.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(create_api_application(logger=logging.getLogger(LOGGER_NAME)))
    request_started_at = datetime.now().astimezone()

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    payload = response.json()
    assert set(payload) == {"message", "timestamp", "hostname"}
    assert payload["message"] == "Hello, World!"
    assert payload["hostname"] in {socket.gethostname(), "unknown"}
    assert datetime.fromisoformat(payload["timestamp"]) >= request_started_at


def test_api_greeting_falls_back_to_unknown_hostname(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Substitute `unknown` and still succeed when hostname lookup fails.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate fallback behavior.
    """

    def _raise_lookup_error() -> str:
        raise OSError("no host name")

    monkeypatch.setattr(hostname_module.socket, "gethostname", _raise_lookup_error)
    client = TestClient(create_api_application(logger=logging.getLogger(LOGGER_NAME)))

    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        response = client.get("/")

    assert response.status_code == 200
    assert response.json()["hostname"] == "unknown"
    assert response.json()["message"] == "Hello, World!"
    assert "Error getting hostname: no host name" in caplog.text


def test_api_greeting_returns_internal_error_when_encoding_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return HTTP 500 with a generic body when the payload cannot be encoded.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate error mapping behavior.
    """

    def _raise_encoding_error(_self: GreetingMessage, **_kwargs: object) -> str:
        raise TypeError("cannot encode")

    monkeypatch.setattr(GreetingMessage, "model_dump_json", _raise_encoding_error)
    client = TestClient(create_api_application(logger=logging.getLogger(LOGGER_NAME)))

    response = client.get("/")

    assert response.status_code == 500
    assert response.text == "Internal server error"
