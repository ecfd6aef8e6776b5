"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.config import Settings, get_settings
from app.infrastructure.db import DatabaseSessionManager
from app.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    error_response,
    request_validation_handler,
)
from app.infrastructure.web.routers import health, tasks

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure the root logger."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    db_manager = DatabaseSessionManager(settings.database_url, echo=settings.database_echo)
    await db_manager.create_tables()
    app.state.db_manager = db_manager
    logger.info("Database connected")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await db_manager.close()
    app.state.db_manager = None
    logger.info("Database disconnected")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Task management API",
        debug=settings.debug,
        docs_url=settings.docs_url,
        redoc_url=None,
        openapi_url=f"{settings.docs_url}.json",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.db_manager = None

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else settings.cors_origins,
        allow_credentials=not settings.is_development,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom error handler middleware
    app.add_middleware(
        ErrorHandlerMiddleware,
        debug=settings.debug,
        expose_errors=settings.is_development
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"]
    )
    app.include_router(
        tasks.router,
        prefix=f"{settings.api_prefix}/tasks",
        tags=["Tasks"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": settings.docs_url,
            "health": "/health",
            "endpoints": {
                "tasks": f"{settings.api_prefix}/tasks",
                "openapi": f"{settings.docs_url}.json",
            }
        }

    # JSON body for unknown routes and other framework errors
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render framework HTTP errors as JSON."""
        if exc.status_code == 404:
            return error_response(request, 404, "Not Found", f"Route {request.url.path} not found")
        return error_response(request, exc.status_code, "HTTP Error", str(exc.detail))

    return app


# Create the FastAPI app instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.effective_log_level.lower(),
    )
