"""FastAPI endpoints for Chat Way.

Endpoints:
    - GET /health: Service health status
    - GET /chat/models: Selectable models
    - POST /chat: Complete one turn
    - POST /chat/stream: Stream one turn as Server-Sent Events
    - GET /chat/sessions/{id}: Prompts held for a session
    - DELETE /chat/sessions/{id}: Reset a session
"""

from chatway.api.app import app, create_app

__all__ = ["app", "create_app"]
