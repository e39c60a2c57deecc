"""Model catalogue and backend routing.

Every supported model identifier maps to the backend that serves it. Only
the Groq gateway exists today; new backends register their identifiers here.
"""

from collections.abc import AsyncIterator, Mapping
from typing import Protocol

# Ordered: the first entry is the default selection in the UI.
SUPPORTED_MODELS: dict[str, str] = {
    "gemma2-9b-it": "Gemma 2 Instruct",
    "llama-3.3-70b-versatile": "Llama 3.3 70b Versatile",
    "deepseek-r1-distill-llama-70b": "DeepSeek R1 Distill Llama 70b",
}

DEFAULT_MODEL = next(iter(SUPPORTED_MODELS))


class UnsupportedModelError(ValueError):
    """Raised when a model identifier is not in the catalogue."""

    def __init__(self, model_id: str) -> None:
        super().__init__(f"Unsupported model: {model_id}")
        self.model_id = model_id


class CompletionBackend(Protocol):
    """Anything that can turn a prompt into a reply for a session."""

    async def complete(self, prompt: str, model_id: str, session_id: str) -> str: ...

    def stream(self, prompt: str, model_id: str, session_id: str) -> AsyncIterator[str]: ...

    def reset(self, session_id: str) -> None: ...

    def history(self, session_id: str) -> list[str]: ...


def is_supported_model(model_id: str) -> bool:
    """Check whether a model identifier belongs to the catalogue."""
    return model_id in SUPPORTED_MODELS


class ModelRouter:
    """Dispatch model identifiers to their completion backend."""

    def __init__(self, routes: Mapping[str, CompletionBackend]) -> None:
        self._routes = dict(routes)

    @classmethod
    def for_backend(cls, backend: CompletionBackend) -> "ModelRouter":
        """Route every supported model to a single backend."""
        return cls({model_id: backend for model_id in SUPPORTED_MODELS})

    @property
    def model_ids(self) -> list[str]:
        return list(self._routes)

    def resolve(self, model_id: str) -> CompletionBackend:
        """Return the backend serving a model.

        Raises:
            UnsupportedModelError: If no backend serves the identifier.
        """
        try:
            return self._routes[model_id]
        except KeyError:
            raise UnsupportedModelError(model_id) from None
