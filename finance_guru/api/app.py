"""FastAPI application factory and configuration.

Hosts the NiceGUI chat page and a health endpoint, with lifespan
logging and CORS middleware.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_guru import __version__
from finance_guru.agent.config import get_chat_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    config = get_chat_config()
    logger.info(f"Starting Finance Guru API (model={config.model_name})...")
    if not config.has_credential:
        logger.warning("No LLM API key configured; chat replies will fail until one is set")
    yield
    # Shutdown
    logger.info("Shutting down Finance Guru API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Finance Guru API",
        description="Chat assistant answering personal finance questions via an LLM.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "finance-guru"}

    return application
