"""Finance Guru - a chat assistant for personal finance questions.

Combines NiceGUI for the chat interface, FastAPI for hosting, the OpenAI
SDK for completions, and Pydantic for data validation.

Components:
    - agent: Conversation state, configuration and completion client
    - api: FastAPI application and health endpoint
    - ui: Web interface for chat interactions
    - models: Message and transcript schemas
"""

__version__ = "0.1.0"
