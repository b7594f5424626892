#!/usr/bin/env python3
"""
PeopleOps API - FastAPI Application

Contract templates, rendered contracts and application provisioning.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException

from core.app_context import AppContext
from core.config_loader import AppConfig
from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    templates_router,
    contracts_router,
    provisioning_router
)

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )


def create_app(config: Optional[AppConfig] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Application config; loaded from config.yaml when omitted.
        context: Pre-built context (tests pass one bound to SQLite).

    Returns:
        Configured FastAPI app. The context is closed on shutdown.
    """
    if context is None:
        config = config or get_config()
        configure_logging(config)
        context = AppContext.build(config)
    config = context.config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context.database.create_all()
        logger.info("Database schema ready")
        yield
        context.close()

    app = FastAPI(
        title="PeopleOps API",
        description="Contract templates, contract rendering and provisioning rules",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = context

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(templates_router)
    app.include_router(contracts_router)
    if config.provisioning.enabled:
        app.include_router(provisioning_router)
    else:
        logger.info("Provisioning endpoints disabled by config")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "peopleops-api"}

    return app


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    configure_logging(config)

    logger.info(f"Starting PeopleOps API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:create_app",
        factory=True,
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
