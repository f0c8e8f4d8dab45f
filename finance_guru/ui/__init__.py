"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with markdown rendering for bot replies
    - Topic selection buttons on the welcome screen
    - Typing indicator while a reply is loading
    - Dark/light theme toggle

Contains no business logic. Delegates all conversation handling to
ConversationController.
"""
