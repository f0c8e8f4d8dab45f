"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests over ASGI
    - Conversation flow through the real completion client and OpenAI SDK
    - Live model replies (when an API key is configured)
"""
