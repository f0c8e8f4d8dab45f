"""HTTP layer for the finance assistant.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted in finance_guru.main)
"""

from finance_guru.api.app import create_app

__all__ = ["create_app"]
