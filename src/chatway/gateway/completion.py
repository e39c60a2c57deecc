"""Groq completion gateway built on agno.

Translates one user prompt into one assistant reply while keeping the
session's prompt history on the server.

Behavior notes:

1. **Prompts only** - the history sent to the model is the ordered list of
   every prompt submitted under the session, each as a user message. Replies
   are not fed back.

2. **Append first** - the prompt is recorded before the request is issued and
   is kept even when the request fails.

3. **One turn at a time per session** - the session lock is held from append
   until the reply arrives. Different sessions run concurrently.

4. **Opaque failures** - whatever the provider raises (auth, quota, unknown
   model, network) is logged and re-raised as CompletionError. No retry.

5. **No agno storage** - the agent has no db, so agno keeps no history of its
   own; the ConversationStore is the only source of conversation state.
"""

import logging
from collections.abc import AsyncGenerator

from agno.agent import Agent
from agno.models.groq import Groq
from agno.models.message import Message

from chatway.gateway.config import GatewayConfig, get_gateway_config
from chatway.gateway.history import DEFAULT_SESSION, ConversationStore

logger = logging.getLogger(__name__)

_CONTENT_EVENT = "RunContent"
_ERROR_EVENT = "RunError"
_ERROR_STATUS = "ERROR"


class CompletionError(Exception):
    """Raised when the hosted completion API fails a request."""


def _is_error(response: object) -> bool:
    status = getattr(response, "status", None)
    return getattr(status, "value", status) == _ERROR_STATUS


class CompletionGateway:
    """Gateway between chat sessions and the Groq chat-completion API.

    Wraps one agno Agent per model with:
    - Session-scoped prompt history
    - Fixed generation parameters from GatewayConfig
    - Blocking and streaming interfaces
    - Centralized error handling and logging
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        store: ConversationStore | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            config: Optional gateway configuration.
                    Loads from environment if not provided.
            store: Optional history store. A fresh one is created if omitted.
        """
        self._config = config or get_gateway_config()
        self._store = store or ConversationStore()
        self._agents: dict[str, Agent] = {}

    @property
    def store(self) -> ConversationStore:
        return self._store

    def _create_model(self, model_id: str) -> Groq:
        return Groq(
            id=model_id,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            top_p=self._config.top_p,
            max_tokens=self._config.max_tokens,
            stop=self._config.stop,
        )

    def _get_agent(self, model_id: str) -> Agent:
        """Return the agent for a model, creating it on first use."""
        agent = self._agents.get(model_id)
        if agent is None:
            agent = Agent(model=self._create_model(model_id))
            self._agents[model_id] = agent
        return agent

    @staticmethod
    def _to_messages(prompts: list[str]) -> list[Message]:
        return [Message(role="user", content=prompt) for prompt in prompts]

    async def complete(
        self,
        prompt: str,
        model_id: str,
        session_id: str = DEFAULT_SESSION,
    ) -> str:
        """Get the complete reply for a prompt.

        Args:
            prompt: The user's message.
            model_id: Groq model identifier.
            session_id: Session whose history the prompt extends.

        Returns:
            The reply text, verbatim.

        Raises:
            CompletionError: If the hosted API fails the request.
        """
        async with self._store.lock(session_id):
            history = self._store.append(session_id, prompt)
            logger.info(
                f"Completing turn for session {session_id} "
                f"(model={model_id}, history={len(history)})"
            )
            try:
                response = await self._get_agent(model_id).arun(
                    self._to_messages(history)
                )
            except Exception as e:
                logger.error(f"Completion failed for session {session_id}: {e}")
                raise CompletionError(str(e)) from e

            if _is_error(response):
                logger.error(
                    f"Completion failed for session {session_id}: {response.content}"
                )
                raise CompletionError(str(response.content))

            return response.content or ""

    async def stream(
        self,
        prompt: str,
        model_id: str,
        session_id: str = DEFAULT_SESSION,
    ) -> AsyncGenerator[str, None]:
        """Stream reply chunks for a prompt.

        Same history semantics as complete(); the session stays locked until
        the stream is exhausted or closed.

        Yields:
            Reply text chunks as they arrive.

        Raises:
            CompletionError: If the hosted API fails the request.
        """
        async with self._store.lock(session_id):
            history = self._store.append(session_id, prompt)
            logger.info(
                f"Streaming turn for session {session_id} "
                f"(model={model_id}, history={len(history)})"
            )
            try:
                response_stream = self._get_agent(model_id).arun(
                    self._to_messages(history),
                    stream=True,
                )
                async for chunk in response_stream:
                    event = getattr(chunk, "event", None)
                    if event == _ERROR_EVENT:
                        raise CompletionError(
                            str(chunk.content or getattr(chunk, "error", None))
                        )
                    if event != _CONTENT_EVENT:
                        continue
                    if chunk.content:
                        yield chunk.content
            except CompletionError as e:
                logger.error(f"Streaming failed for session {session_id}: {e}")
                raise
            except Exception as e:
                logger.error(f"Streaming failed for session {session_id}: {e}")
                raise CompletionError(str(e)) from e

    def history(self, session_id: str = DEFAULT_SESSION) -> list[str]:
        """Return the prompts submitted under a session."""
        return self._store.get(session_id)

    def reset(self, session_id: str = DEFAULT_SESSION) -> None:
        """Drop a session's history."""
        self._store.reset(session_id)


# Module-level singleton instance
_gateway: CompletionGateway | None = None


def get_completion_gateway() -> CompletionGateway:
    """Get or create the global completion gateway.

    The API key is read from the environment once, on first call.

    Returns:
        The CompletionGateway instance.
    """
    global _gateway
    if _gateway is None:
        _gateway = CompletionGateway()
    return _gateway
