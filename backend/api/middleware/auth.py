"""
Bearer token authentication.

Validates session tokens and resolves the calling user.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.exceptions import (
    ExpiredTokenError,
    ForbiddenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.tokens import TokenService
from modules.users.repository import UserRepository
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service, get_user_repository

logger = logging.getLogger(__name__)

# Bearer token extractor; missing credentials are reported by us, not FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        MissingTokenError: No `Authorization: Bearer` header
        ExpiredTokenError: Token past its expiry
        InvalidTokenError: Token malformed or signed with another key
    """
    if credentials is None or not credentials.credentials:
        logger.info("Authentication failed: missing token")
        raise MissingTokenError()

    try:
        claims = tokens.verify(credentials.credentials)
    except ExpiredTokenError:
        logger.info("Authentication failed: expired token")
        raise
    except InvalidTokenError as e:
        logger.info("Authentication failed: invalid token (%s)", e.message)
        raise

    return AuthenticatedUser(id=claims.user_id, is_admin=claims.is_admin)


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
) -> AuthenticatedUser:
    """
    Dependency that requires an administrator.

    The admin flag in the token is not trusted: the user record is read
    on every call, so revoking admin rights takes effect immediately.
    """
    record = users.get_by_id(user.id)
    if record is None or not record.is_admin:
        logger.info("Admin access denied for user %s", user.id)
        raise ForbiddenError()
    return AuthenticatedUser(id=record.id, is_admin=True)


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireAdmin = Depends(require_admin)
