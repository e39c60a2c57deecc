"""Unit tests for individual components in isolation.

Coverage:
    - gateway/: Configuration, history store, routing, completion calls
    - ui/: Turn lifecycle and the HTTP client helpers

Uses mocks for external services.
"""
