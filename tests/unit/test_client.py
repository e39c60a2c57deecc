"""Unit tests for the UI's HTTP client helpers."""

import json
from unittest.mock import patch

import httpx
import pytest

from chatway.gateway.router import UnsupportedModelError
from chatway.ui.client import (
    ChatApiError,
    _default_base_url,
    reset_conversation,
    send_turn,
)

MODEL = "llama-3.3-70b-versatile"


async def test_send_turn_posts_prompt_and_returns_reply() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200, json={"response": "Hi there", "model": MODEL, "session_id": "s1"}
        )

    reply = await send_turn("Hello", MODEL, "s1", transport=httpx.MockTransport(handler))

    assert reply == "Hi there"
    assert requests[0].method == "POST"
    assert requests[0].url.path == "/chat"
    assert json.loads(requests[0].content) == {
        "message": "Hello",
        "model": MODEL,
        "session_id": "s1",
    }


async def test_send_turn_rejects_unknown_model_without_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(UnsupportedModelError):
        await send_turn("Hello", "gpt-4o", "s1", transport=httpx.MockTransport(handler))


async def test_send_turn_surfaces_api_error_detail() -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(502, json={"detail": "rate limit exceeded"})
    )

    with pytest.raises(ChatApiError) as exc_info:
        await send_turn("Hello", MODEL, "s1", transport=transport)

    assert str(exc_info.value) == "rate limit exceeded"


async def test_send_turn_falls_back_to_status_code() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500, text="oops"))

    with pytest.raises(ChatApiError, match="HTTP 500"):
        await send_turn("Hello", MODEL, "s1", transport=transport)


async def test_send_turn_reports_connection_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ChatApiError, match="Connection failed: refused"):
        await send_turn("Hello", MODEL, "s1", transport=httpx.MockTransport(handler))


async def test_reset_conversation_deletes_session() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(204)

    await reset_conversation("s1", transport=httpx.MockTransport(handler))

    assert requests[0].method == "DELETE"
    assert requests[0].url.path == "/chat/sessions/s1"


async def test_reset_conversation_raises_on_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    with pytest.raises(ChatApiError, match="HTTP 503"):
        await reset_conversation("s1", transport=transport)


def test_default_base_url_follows_port() -> None:
    with patch.dict("os.environ", {"API_BASE_URL": "", "PORT": "9000"}):
        assert _default_base_url() == "http://localhost:9000"


def test_explicit_base_url_wins() -> None:
    with patch.dict("os.environ", {"API_BASE_URL": "http://api:8000", "PORT": "9000"}):
        assert _default_base_url() == "http://api:8000"
