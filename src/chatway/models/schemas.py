import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chatway.gateway.router import DEFAULT_MODEL


class Role(str, Enum):
    """Speaker of a displayed message."""

    USER = "user"
    ASSISTANT = "assistant"


class StreamStatus(str, Enum):
    """Status values for streaming updates."""

    RECEIVED = "received"
    GENERATING = "generating"
    COMPLETE = "complete"
    ERROR = "error"


class Message(BaseModel):
    """A turn shown in the chat thread. Never mutated after creation.

    Attributes:
        id: Opaque unique token.
        role: Who produced the message.
        content: The message text.
        error: Whether the message reports a failed turn.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Role
    content: str
    error: bool = False


class ChatRequest(BaseModel):
    """Request payload for the chat endpoints.

    Attributes:
        message: User's prompt.
        model: Model identifier selected in the UI.
        session_id: Optional session for conversation continuity.
    """

    message: str = Field(..., min_length=1)
    model: str = DEFAULT_MODEL
    session_id: str | None = None

    @field_validator("message")
    @classmethod
    def reject_blank_message(cls, v: str) -> str:
        """Reject whitespace-only messages, keeping the text as submitted."""
        if not v.strip():
            raise ValueError("message must not be blank")
        return v


class ChatResponse(BaseModel):
    """Complete reply for one turn."""

    response: str
    model: str
    session_id: str


class StreamChunk(BaseModel):
    """A chunk of streamed response data.

    Attributes:
        content: The text content of this chunk.
        done: Whether this is the final chunk.
        status: Current processing status (received, generating, complete, error).
        error: Error message if something went wrong.
    """

    content: str
    done: bool
    status: StreamStatus | None = None
    error: str | None = None


class ModelOption(BaseModel):
    """A selectable model."""

    id: str
    label: str


class SessionHistory(BaseModel):
    """Prompts the server holds for a session."""

    session_id: str
    prompts: list[str]
    prompt_count: int = Field(ge=0)
