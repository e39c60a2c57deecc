"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat thread display with error messages and auto-scroll
    - Model selection and multiline input
    - Turn lifecycle (ChatSession) and clearing the conversation

Delegates all model calls to the API.
"""
