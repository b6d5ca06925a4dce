"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import configure_logging

from .exception_handlers import setup_exception_handlers
from .routes import admin, auth, health, medical_records, pets, posts, shops, tasks, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    logger.info(
        "Starting %s %s on %s:%s",
        settings.app_name,
        settings.app_version,
        settings.host,
        settings.port,
    )
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; authenticated endpoints will fail")
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Pet care and community API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    setup_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(pets.router, prefix="/api/pets", tags=["pets"])
    app.include_router(medical_records.router, prefix="/api/medical-records", tags=["medical-records"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])
    app.include_router(tasks.notifications_router, prefix="/api/notifications", tags=["tasks"])
    app.include_router(posts.router, prefix="/api/posts", tags=["social"])
    app.include_router(posts.comments_router, prefix="/api/comments", tags=["social"])
    app.include_router(posts.replies_router, prefix="/api/replies", tags=["social"])
    app.include_router(shops.router, prefix="/api/shops", tags=["shops"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

    return app


# Application instance for uvicorn
app = create_app()
