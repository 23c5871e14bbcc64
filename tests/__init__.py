"""
Tests Package - Unit Tests

Test structure:
- tests/fakes.py - httpx.MockTransport helpers for a scripted upstream
- tests/conftest.py - Shared pytest fixtures (payloads, temp store)
- tests/test_*.py - One module per component

The upstream API is never contacted; the inter-iteration sleep is injected.
"""
