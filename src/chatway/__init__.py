"""Chat Way - browser chat for hosted Groq language models.

Combines FastAPI for the chat API, agno for model calls, NiceGUI for the
chat interface, and Pydantic for data validation.

Components:
    - gateway: Session history, model routing and Groq completion calls
    - api: HTTP endpoints and streaming responses
    - ui: Web interface for chat interactions
    - models: Request/response and message schemas
"""

__version__ = "0.1.0"
