"""Tests for the server liveness probe."""

import httpx
import pytest

from happy_config.core.error_codes import ErrorKind
from happy_config.core.probe import probe_server
from tests.fixtures.mocks import RecordingHandler, make_client
from tests.fixtures.sample_data import GREETING_BODY


@pytest.mark.asyncio
async def test_greeting_means_compatible_server():
    handler = RecordingHandler(200, GREETING_BODY)

    async with make_client(handler) as client:
        result = await probe_server("https://happy.example.com", client=client)

    assert result.ok is True
    assert result.error is None
    assert result.status_code == 200


@pytest.mark.asyncio
async def test_sends_single_get_with_plain_text_accept():
    handler = RecordingHandler(200, GREETING_BODY)

    async with make_client(handler) as client:
        await probe_server("https://happy.example.com/base", client=client)

    assert len(handler.requests) == 1
    request = handler.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://happy.example.com/base"
    assert request.headers["accept"] == "text/plain"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [500, 404, 503])
async def test_error_status_is_server_error(status_code):
    handler = RecordingHandler(status_code, GREETING_BODY)

    async with make_client(handler) as client:
        result = await probe_server("https://happy.example.com", client=client)

    assert result.ok is False
    assert result.error == ErrorKind.SERVER_ERROR
    assert result.status_code == status_code
    assert result.message == "Server returned an error"


@pytest.mark.asyncio
async def test_body_without_greeting_is_not_compatible():
    handler = RecordingHandler(200, "hello")

    async with make_client(handler) as client:
        result = await probe_server("https://happy.example.com", client=client)

    assert result.ok is False
    assert result.error == ErrorKind.NOT_A_COMPATIBLE_SERVER


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raises",
    [
        lambda request: httpx.ConnectError("Connection refused", request=request),
        lambda request: httpx.ConnectTimeout("Timed out", request=request),
        lambda request: httpx.ReadTimeout("Timed out", request=request),
    ],
)
async def test_transport_failure_is_connection_failed(raises):
    handler = RecordingHandler(raises=raises)

    async with make_client(handler) as client:
        result = await probe_server("https://happy.example.com", client=client)

    assert result.ok is False
    assert result.error == ErrorKind.CONNECTION_FAILED
    assert result.status_code is None
    # No retry
    assert len(handler.requests) == 1


@pytest.mark.asyncio
async def test_surrounding_whitespace_is_trimmed_before_request():
    handler = RecordingHandler(200, GREETING_BODY)

    async with make_client(handler) as client:
        result = await probe_server("  https://padded.example.com  ", client=client)

    assert result.ok is True
    assert str(handler.requests[0].url) == "https://padded.example.com"
