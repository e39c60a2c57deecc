"""Integration tests for the chat API working as a system.

Requests go through the real FastAPI app with httpx ASGITransport; only the
completion gateway is replaced.
"""
