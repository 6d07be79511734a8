"""Regression tests for request logging middleware behavior."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from greeting_service.api import RequestLoggingMiddleware
from greeting_service.api.middleware import middleware_format_duration, middleware_remote_address

LOGGER_NAME = "tests.greeting_service.middleware"


def _build_wrapped_application(status_code: int = 200) -> FastAPI:
    """Create an application whose only route writes a fixed `test` body.

    Args:
        status_code: Status code written by the wrapped handler.

    Returns:
        FastAPI: Application wrapped with request logging middleware.
    """

    application = FastAPI()

    @application.get("/health")
    def _write_test_body() -> PlainTextResponse:
        return PlainTextResponse("test", status_code=status_code)

    application.add_middleware(RequestLoggingMiddleware, logger=logging.getLogger(LOGGER_NAME))
    return application


def _middleware_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [record for record in caplog.records if record.name == LOGGER_NAME]


def test_api_middleware_passes_response_through_and_logs_once(caplog: pytest.LogCaptureFixture) -> None:
    """Leave the wrapped response untouched and emit exactly one log line.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate pass-through and logging behavior.

    Raises:
        AssertionError: Raised when the response is altered or logging is wrong.
    """

    client = TestClient(_build_wrapped_application())

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "test"
    records = _middleware_records(caplog)
    assert len(records) == 1
    method, uri, remote_address, duration = records[0].getMessage().split(" ")
    assert method == "GET"
    assert uri == "/health"
    assert remote_address == "testclient:50000"
    assert duration.endswith("s")


def test_api_middleware_logs_full_uri_with_query_string(caplog: pytest.LogCaptureFixture) -> None:
    """Include the query string in the logged request URI.

    Args:
        caplog: Pytest log capture fixture.
    """

    client = TestClient(_build_wrapped_application())

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.get("/health?probe=liveness")

    assert _middleware_records(caplog)[0].getMessage().startswith("GET /health?probe=liveness ")


def test_api_middleware_logs_regardless_of_status_code(caplog: pytest.LogCaptureFixture) -> None:
    """Log the request line when the wrapped handler answers with an error status.

    Args:
        caplog: Pytest log capture fixture.
    """

    client = TestClient(_build_wrapped_application(status_code=503))

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.text == "test"
    assert len(_middleware_records(caplog)) == 1


def test_api_middleware_rejects_missing_logger() -> None:
    """Raise ValueError when constructed without a logger."""

    with pytest.raises(ValueError, match="logger"):
        RequestLoggingMiddleware(FastAPI(), logger=None)


@pytest.mark.parametrize(
    ("elapsed_seconds", "expected"),
    [(0.0000125, "12.500µs"), (0.0042, "4.200ms"), (1.5, "1.500s")],
)
def test_api_middleware_formats_duration_with_unit(elapsed_seconds: float, expected: str) -> None:
    """Render durations with the largest fitting unit.

    Args:
        elapsed_seconds: Duration to render.
        expected: Expected text.
    """

    assert middleware_format_duration(elapsed_seconds) == expected


@pytest.mark.parametrize(
    ("client", "expected"),
    [(("::1", 54321), "[::1]:54321"), (("10.0.0.7", 8080), "10.0.0.7:8080"), (None, "-")],
)
def test_api_middleware_formats_remote_address(client: tuple[str, int] | None, expected: str) -> None:
    """Bracket IPv6 peer hosts and fall back to `-` when the peer is unknown.

    Args:
        client: ASGI client tuple.
        expected: Expected text.
    """

    assert middleware_remote_address({"type": "http", "client": client}) == expected
