"""
Session token issuance and verification.

Tokens are HS256 JWTs carrying the user id (`sub`), the admin flag at
issuance, and a fixed expiry. There is no revocation: a token stays
valid until `exp`.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel, Field

from .exceptions import ExpiredTokenError, InvalidTokenError, IssuanceError

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["exp", "iat", "sub"]


class TokenClaims(BaseModel):
    """Verified contents of a session token."""

    user_id: int = Field(..., description="Subject user id")
    is_admin: bool = Field(default=False, description="Admin flag at issuance")
    issued_at: datetime
    expires_at: datetime

    model_config = {"frozen": True}


class TokenService:
    """
    Issues and verifies signed session tokens.

    The signing secret is fixed at construction.
    """

    def __init__(self, secret: str, expire_hours: int = 24):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._lifetime = timedelta(hours=expire_hours)

    def issue(
        self,
        user_id: int,
        is_admin: bool = False,
        issued_at: Optional[datetime] = None,
    ) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: Persisted user id
            is_admin: Admin flag to embed
            issued_at: Issue time; defaults to now (UTC)

        Raises:
            IssuanceError: If user_id is missing or signing fails
        """
        if not user_id:
            raise IssuanceError("Cannot issue a token without a user id")

        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "is_admin": bool(is_admin),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise IssuanceError(str(e)) from e

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is malformed, tampered with,
                or signed with another secret
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token subject") from e
        if user_id <= 0:
            raise InvalidTokenError("Invalid token subject")

        return TokenClaims(
            user_id=user_id,
            is_admin=bool(payload.get("is_admin", False)),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
