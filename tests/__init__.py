"""Test package for Chat Way.

Structure:
    - unit/: Individual function and class tests
    - integration/: API workflows through the ASGI app

No test calls the hosted API; the gateway is replaced by a fake or its
agno classes are patched.
"""
