"""Per-page chat state and the lifecycle of a turn.

A turn moves Idle -> Submitting -> AwaitingReply -> Resolved | Failed -> Idle.
The user message is shown before the request is sent and is never rolled
back; a failure adds a separate error message instead.
"""

import logging
import uuid
from collections.abc import Awaitable, Callable

from chatway.gateway.router import DEFAULT_MODEL
from chatway.models.schemas import Message, Role

logger = logging.getLogger(__name__)

SendTurn = Callable[[str, str, str], Awaitable[str]]

ERROR_PREFIX = "Failed to fetch response: "


class ChatSession:
    """Manages chat state for one open page."""

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.messages: list[Message] = []
        self.input_text: str = ""
        self.selected_model: str = model_id
        self.busy: bool = False
        self.session_id: str = str(uuid.uuid4())
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, send_turn: SendTurn) -> Message | None:
        """Send the current input as a turn.

        Empty input and submits while busy are ignored.

        A reply that arrives after clear() is dropped.

        Returns:
            The assistant message appended, or None if nothing was appended.
        """
        text = self.input_text
        if not text.strip() or self.busy:
            return None
        session_id = self.session_id

        self.messages.append(Message(role=Role.USER, content=text))
        self.input_text = ""
        self.busy = True
        self._changed()

        try:
            reply = await send_turn(text, self.selected_model, session_id)
        except Exception as e:
            logger.warning(f"Turn failed for session {session_id}: {e}")
            message = Message(role=Role.ASSISTANT, content=f"{ERROR_PREFIX}{e}", error=True)
        else:
            message = Message(role=Role.ASSISTANT, content=reply)
        finally:
            self.busy = False

        if self.session_id != session_id:
            # Cleared while waiting; the reply belongs to the old conversation
            logger.info(f"Dropping reply for cleared session {session_id}")
            self._changed()
            return None

        self.messages.append(message)
        self._changed()
        return message

    def clear(self) -> str:
        """Drop every displayed message and the input.

        Starts a new session id so the next turn has no server history.

        Returns:
            The session id that was cleared.
        """
        previous = self.session_id
        self.messages = []
        self.input_text = ""
        self.session_id = str(uuid.uuid4())
        self._changed()
        return previous
