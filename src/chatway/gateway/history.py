"""Session-scoped conversation history.

Prompts are kept per session id, in submission order, for the lifetime of
the process. Replies are never stored. Each session has its own lock so a
turn can hold exclusive access to its history while the completion call is
in flight.
"""

import asyncio
import logging
from collections import defaultdict

logger = logging.getLogger(__name__)

DEFAULT_SESSION = "default"


class ConversationStore:
    """In-process, unbounded, append-only prompt history keyed by session."""

    def __init__(self) -> None:
        self._prompts: dict[str, list[str]] = defaultdict(list)
        self._locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def lock(self, session_id: str) -> asyncio.Lock:
        """Return the lock guarding a session's history."""
        return self._locks[session_id]

    def append(self, session_id: str, prompt: str) -> list[str]:
        """Append a prompt and return a snapshot of the session's history."""
        self._prompts[session_id].append(prompt)
        return list(self._prompts[session_id])

    def get(self, session_id: str) -> list[str]:
        """Return a copy of the prompts submitted under a session."""
        return list(self._prompts.get(session_id, []))

    def reset(self, session_id: str) -> None:
        """Forget every prompt of a session.

        The lock is kept so a turn already waiting on it stays serialized.
        """
        removed = self._prompts.pop(session_id, [])
        logger.info(f"Reset session {session_id} ({len(removed)} prompts dropped)")

    def sessions(self) -> list[str]:
        """List session ids that currently hold history."""
        return list(self._prompts)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._prompts
