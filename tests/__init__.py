"""Test package for Finance Guru.

Structure:
    - unit/: Individual function and class tests
    - integration/: Components working together over HTTP

Uses httpx mock transports in place of the completion API. Tests that
need a live model are skipped without an API key.
"""
