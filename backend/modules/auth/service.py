"""
Authentication service implementation.

Registers accounts and exchanges credentials for session tokens.
"""

import asyncio
import logging
import re

from shared.validators import (
    REQUIRED_FIELDS,
    require_fields,
    validate_birthdate,
    validate_email,
    validate_password,
    validate_text,
)
from modules.storage.interfaces import IImageStorage
from modules.storage.models import StorageBucket
from modules.users.exceptions import EmailAlreadyExistsError
from modules.users.repository import UserRepository

from .exceptions import InvalidCredentialsError
from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    RegisterRequest,
    RegisterResponse,
)
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    bcrypt work runs in a worker thread so a login does not stall the
    event loop for other requests.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        images: IImageStorage,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._images = images

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a user.

        The account is stored before the profile image is handled; a failed
        upload leaves the account in place without a picture and is
        reported as a warning.
        """
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["registration"])
        full_name = validate_text(request.full_name, "fullName")
        gender = validate_text(request.gender, "gender")
        email = validate_email(request.email)
        validate_password(request.password)
        birthdate = validate_birthdate(request.birthdate)

        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)

        # A concurrent registration can still win the race; the unique
        # index turns that into EmailAlreadyExistsError inside create().
        user = self._users.create({
            "full_name": full_name,
            "gender": gender,
            "birthdate": birthdate,
            "email": email,
            "password": password_hash,
            "is_admin": False,
        })
        logger.info("Registered user %s", user.id)

        safe_email = re.sub(r"[^a-z0-9]", "_", email)
        attachment = await self._images.attach(
            request.profile_image,
            StorageBucket.PROFILE_IMAGES,
            f"{user.id}_{safe_email}",
            lambda url: self._users.update(user.id, {"profile_picture": url}),
        )

        return RegisterResponse(
            message="User registered successfully",
            user_id=user.id,
            warning=attachment.warning,
        )

    async def login(self, request: LoginRequest) -> LoginResponse:
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["login"])
        email = validate_email(request.email)

        user = self._users.get_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(
            self._hasher.verify, request.password, user.password_hash
        )
        if not matches:
            logger.info("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id, user.is_admin)
        logger.info("User %s logged in", user.id)

        return LoginResponse(
            message="Login successful",
            token=token,
            is_admin=user.is_admin,
            user=LoginUser(
                id=user.id,
                full_name=user.full_name,
                email=user.email,
                profile_picture=user.profile_picture,
            ),
        )
