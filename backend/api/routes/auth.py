"""
Registration and login endpoints.
"""

from fastapi import APIRouter, Depends, status

from modules.auth.interfaces import IAuthService
from modules.auth.models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

from ..dependencies import get_auth_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Create an account.

    A profile image is optional; if it cannot be stored the account is
    still created and the response carries a `warning`.
    """
    return await service.register(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange email and password for a 24 hour session token."""
    return await service.login(request)
