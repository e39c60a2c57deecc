"""Pydantic models for API requests, responses and displayed messages.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Immutable turn shown in the chat thread
    - ChatRequest: Incoming chat request payload
    - ChatResponse: Complete reply for one turn
    - StreamChunk: One Server-Sent Event of a streamed reply
    - ModelOption: Selectable model id and label
    - SessionHistory: Prompts held for a session
"""

from chatway.models.schemas import (
    ChatRequest,
    ChatResponse,
    Message,
    ModelOption,
    Role,
    SessionHistory,
    StreamChunk,
    StreamStatus,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "Message",
    "ModelOption",
    "Role",
    "SessionHistory",
    "StreamChunk",
    "StreamStatus",
]
