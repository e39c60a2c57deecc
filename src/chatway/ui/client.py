"""HTTP helpers the chat page uses to talk to the API."""

import logging
import os

import httpx

from chatway.gateway.router import UnsupportedModelError, is_supported_model

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 120.0


def _default_base_url() -> str:
    """API_BASE_URL, or the API on this host at PORT."""
    return os.getenv("API_BASE_URL") or f"http://localhost:{os.getenv('PORT', '8000')}"


API_BASE_URL = _default_base_url()


class ChatApiError(Exception):
    """Raised when the chat API cannot produce a reply."""


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"HTTP {response.status_code}"


def _client(transport: httpx.AsyncBaseTransport | None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=API_BASE_URL,
        timeout=REQUEST_TIMEOUT,
        transport=transport,
    )


async def send_turn(
    prompt: str,
    model_id: str,
    session_id: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Send one prompt to POST /chat and return the reply text.

    Raises:
        UnsupportedModelError: Before any request, for an unknown model.
        ChatApiError: If the API answers with an error or cannot be reached.
    """
    if not is_supported_model(model_id):
        raise UnsupportedModelError(model_id)

    async with _client(transport) as client:
        try:
            response = await client.post(
                "/chat",
                json={"message": prompt, "model": model_id, "session_id": session_id},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ChatApiError(_error_detail(e.response)) from e
        except httpx.RequestError as e:
            raise ChatApiError(f"Connection failed: {e}") from e

    return response.json()["response"]


async def reset_conversation(
    session_id: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Ask the API to forget a session's history.

    Raises:
        ChatApiError: If the API answers with an error or cannot be reached.
    """
    async with _client(transport) as client:
        try:
            response = await client.delete(f"/chat/sessions/{session_id}")
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ChatApiError(_error_detail(e.response)) from e
        except httpx.RequestError as e:
            raise ChatApiError(f"Connection failed: {e}") from e
