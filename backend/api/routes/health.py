"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends

from shared.config import Settings, get_settings
from shared.exceptions import PetPalError
from shared.models import Envelope

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(Envelope):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(Envelope):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a trivial query against the database. Missing configuration and
    an unreachable database both report not ready with a 200.
    """
    try:
        container.user_repository.ping()
    except PetPalError as e:
        logger.warning("Readiness check failed: %s", e.message)
        return ReadinessResponse(
            success=False,
            message="Database unavailable",
            status="not_ready",
            database="unavailable",
        )
    return ReadinessResponse(status="ready", database="connected")
