"""Completion gateway for the hosted Groq API.

Responsibilities:
    - Session-scoped prompt history with per-session locking
    - Model catalogue and backend routing
    - Blocking and streaming completion calls through agno

Maintains clean separation from the HTTP layer.
"""

from chatway.gateway.completion import (
    CompletionError,
    CompletionGateway,
    get_completion_gateway,
)
from chatway.gateway.config import GatewayConfig, get_gateway_config
from chatway.gateway.history import DEFAULT_SESSION, ConversationStore
from chatway.gateway.router import (
    DEFAULT_MODEL,
    SUPPORTED_MODELS,
    ModelRouter,
    UnsupportedModelError,
    is_supported_model,
)

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_SESSION",
    "SUPPORTED_MODELS",
    "CompletionError",
    "CompletionGateway",
    "ConversationStore",
    "GatewayConfig",
    "ModelRouter",
    "UnsupportedModelError",
    "get_completion_gateway",
    "get_gateway_config",
    "is_supported_model",
]
