"""Chat endpoints.

Routes each turn to the backend serving the selected model and exposes the
server-side session history so the UI can inspect and reset it.
"""

import logging
import uuid
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import StreamingResponse

from chatway.gateway.completion import (
    CompletionError,
    CompletionGateway,
    get_completion_gateway,
)
from chatway.gateway.router import (
    SUPPORTED_MODELS,
    CompletionBackend,
    ModelRouter,
    UnsupportedModelError,
)
from chatway.models.schemas import (
    ChatRequest,
    ChatResponse,
    ModelOption,
    SessionHistory,
    StreamChunk,
    StreamStatus,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def get_model_router(
    gateway: CompletionGateway = Depends(get_completion_gateway),
) -> ModelRouter:
    """Route every supported model to the Groq gateway."""
    return ModelRouter.for_backend(gateway)


def _resolve_backend(model_router: ModelRouter, model_id: str) -> CompletionBackend:
    """Look up the backend for a model.

    Raises:
        HTTPException: 400 if the model is not supported.
    """
    try:
        return model_router.resolve(model_id)
    except UnsupportedModelError as e:
        logger.warning(f"Rejected chat request: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


def _sse(chunk: StreamChunk) -> str:
    return f"data: {chunk.model_dump_json()}\n\n"


@router.get("/models", response_model=list[ModelOption])
async def list_models() -> list[ModelOption]:
    """List the models a chat request may select."""
    return [
        ModelOption(id=model_id, label=label)
        for model_id, label in SUPPORTED_MODELS.items()
    ]


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    model_router: ModelRouter = Depends(get_model_router),
) -> ChatResponse:
    """Complete one turn.

    Args:
        request: Prompt, model and optional session id.

    Returns:
        ChatResponse with the reply and the session id used.

    Raises:
        400: Unsupported model.
        422: Empty or missing message.
        502: The hosted completion API failed.
    """
    backend = _resolve_backend(model_router, request.model)
    session_id = request.session_id or str(uuid.uuid4())

    try:
        reply = await backend.complete(request.message, request.model, session_id)
    except CompletionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return ChatResponse(response=reply, model=request.model, session_id=session_id)


@router.post("/stream")
async def chat_stream(
    request: ChatRequest,
    model_router: ModelRouter = Depends(get_model_router),
) -> StreamingResponse:
    """Complete one turn as a stream of Server-Sent Events.

    Each event carries a StreamChunk. The last one has done=true and either
    status=complete or status=error with the failure description.
    """
    backend = _resolve_backend(model_router, request.model)
    session_id = request.session_id or str(uuid.uuid4())

    async def event_stream() -> AsyncGenerator[str, None]:
        yield _sse(StreamChunk(content="", done=False, status=StreamStatus.RECEIVED))
        try:
            async for text in backend.stream(request.message, request.model, session_id):
                yield _sse(
                    StreamChunk(content=text, done=False, status=StreamStatus.GENERATING)
                )
        except CompletionError as e:
            yield _sse(
                StreamChunk(content="", done=True, status=StreamStatus.ERROR, error=str(e))
            )
            return
        yield _sse(StreamChunk(content="", done=True, status=StreamStatus.COMPLETE))

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Session-ID": session_id},
    )


@router.get("/sessions/{session_id}", response_model=SessionHistory)
async def get_session(
    session_id: str,
    gateway: CompletionGateway = Depends(get_completion_gateway),
) -> SessionHistory:
    """Return the prompts held for a session (empty for unknown sessions)."""
    prompts = gateway.history(session_id)
    return SessionHistory(session_id=session_id, prompts=prompts, prompt_count=len(prompts))


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def reset_session(
    session_id: str,
    gateway: CompletionGateway = Depends(get_completion_gateway),
) -> Response:
    """Forget a session's history. Resetting an unknown session is a no-op."""
    gateway.reset(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
