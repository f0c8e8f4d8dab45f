"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and role translation
    - agent/: Configuration, completion outcomes, conversation state
    - ui/: Topic helpers
"""
