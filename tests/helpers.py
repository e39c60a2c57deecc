"""Test doubles shared by unit and integration tests."""

from collections.abc import AsyncIterator

from chatway.gateway.completion import CompletionError
from chatway.gateway.history import DEFAULT_SESSION, ConversationStore


class FakeGateway:
    """Completion backend that records turns and answers from a script."""

    def __init__(self) -> None:
        self.store = ConversationStore()
        self.reply = "Hi there"
        self.chunks = ["Hi", " there"]
        self.error: str | None = None
        self.calls: list[tuple[list[str], str, str]] = []

    def _record(self, prompt: str, model_id: str, session_id: str) -> None:
        history = self.store.append(session_id, prompt)
        self.calls.append((history, model_id, session_id))

    async def complete(
        self, prompt: str, model_id: str, session_id: str = DEFAULT_SESSION
    ) -> str:
        self._record(prompt, model_id, session_id)
        if self.error:
            raise CompletionError(self.error)
        return self.reply

    async def stream(
        self, prompt: str, model_id: str, session_id: str = DEFAULT_SESSION
    ) -> AsyncIterator[str]:
        self._record(prompt, model_id, session_id)
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise CompletionError(self.error)

    def history(self, session_id: str = DEFAULT_SESSION) -> list[str]:
        return self.store.get(session_id)

    def reset(self, session_id: str = DEFAULT_SESSION) -> None:
        self.store.reset(session_id)
