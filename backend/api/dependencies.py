"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Settings are read once, when the container is first built; in
particular the token signing secret is handed to TokenService here and
nowhere else.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings
from shared.exceptions import ConfigurationError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.admin.interfaces import IAdminService
    from modules.admin.repository import AdminRepository
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.medical_records.interfaces import IMedicalRecordService
    from modules.medical_records.repository import MedicalRecordRepository
    from modules.pets.interfaces import IPetService
    from modules.pets.repository import PetRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository
    from modules.shops.interfaces import IShopService
    from modules.shops.repository import ShopRepository
    from modules.storage.interfaces import IImageStorage
    from modules.tasks.interfaces import ITaskService
    from modules.tasks.repository import TaskRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._db: "Client | None" = None
        self._hasher: "PasswordHasher | None" = None
        self._tokens: "TokenService | None" = None
        self._images: "IImageStorage | None" = None
        self._user_repository: "UserRepository | None" = None
        self._pet_repository: "PetRepository | None" = None
        self._medical_record_repository: "MedicalRecordRepository | None" = None
        self._task_repository: "TaskRepository | None" = None
        self._post_repository: "PostRepository | None" = None
        self._shop_repository: "ShopRepository | None" = None
        self._admin_repository: "AdminRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._pet_service: "IPetService | None" = None
        self._medical_record_service: "IMedicalRecordService | None" = None
        self._task_service: "ITaskService | None" = None
        self._post_service: "IPostService | None" = None
        self._shop_service: "IShopService | None" = None
        self._admin_service: "IAdminService | None" = None

    # -------------------------------------------------------------------------
    # Infrastructure
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the Supabase service-role client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def hasher(self) -> "PasswordHasher":
        if self._hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._hasher

    @property
    def tokens(self) -> "TokenService":
        """
        Get the token issuer/verifier.

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            if not self.settings.jwt_secret:
                raise ConfigurationError(
                    "Server authentication not configured",
                    code="AUTH_NOT_CONFIGURED",
                )
            self._tokens = TokenService(
                self.settings.jwt_secret,
                expire_hours=self.settings.jwt_expire_hours,
            )
        return self._tokens

    @property
    def images(self) -> "IImageStorage":
        if self._images is None:
            from modules.storage.service import ImageStorageService
            self._images = ImageStorageService(
                self.db,
                max_bytes=self.settings.image_max_bytes,
                decode_timeout=self.settings.image_decode_timeout_seconds,
            )
        return self._images

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def pet_repository(self) -> "PetRepository":
        if self._pet_repository is None:
            from modules.pets.repository import PetRepository
            self._pet_repository = PetRepository(self.db)
        return self._pet_repository

    @property
    def medical_record_repository(self) -> "MedicalRecordRepository":
        if self._medical_record_repository is None:
            from modules.medical_records.repository import MedicalRecordRepository
            self._medical_record_repository = MedicalRecordRepository(self.db)
        return self._medical_record_repository

    @property
    def task_repository(self) -> "TaskRepository":
        if self._task_repository is None:
            from modules.tasks.repository import TaskRepository
            self._task_repository = TaskRepository(self.db)
        return self._task_repository

    @property
    def post_repository(self) -> "PostRepository":
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            self._post_repository = PostRepository(self.db)
        return self._post_repository

    @property
    def shop_repository(self) -> "ShopRepository":
        if self._shop_repository is None:
            from modules.shops.repository import ShopRepository
            self._shop_repository = ShopRepository(self.db)
        return self._shop_repository

    @property
    def admin_repository(self) -> "AdminRepository":
        if self._admin_repository is None:
            from modules.admin.repository import AdminRepository
            self._admin_repository = AdminRepository(self.db)
        return self._admin_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.hasher,
                tokens=self.tokens,
                images=self.images,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user profile service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository, self.images)
        return self._user_service

    @property
    def pets(self) -> "IPetService":
        """Get the pet service instance."""
        if self._pet_service is None:
            from modules.pets.service import PetService
            self._pet_service = PetService(self.pet_repository, self.user_repository, self.images)
        return self._pet_service

    @property
    def medical_records(self) -> "IMedicalRecordService":
        """Get the medical record service instance."""
        if self._medical_record_service is None:
            from modules.medical_records.service import MedicalRecordService
            self._medical_record_service = MedicalRecordService(
                self.medical_record_repository, self.pet_repository
            )
        return self._medical_record_service

    @property
    def tasks(self) -> "ITaskService":
        """Get the task service instance."""
        if self._task_service is None:
            from modules.tasks.service import TaskService
            self._task_service = TaskService(self.task_repository, self.pet_repository)
        return self._task_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(self.post_repository, self.images)
        return self._post_service

    @property
    def shops(self) -> "IShopService":
        """Get the shop service instance."""
        if self._shop_service is None:
            from modules.shops.service import ShopService
            self._shop_service = ShopService(self.shop_repository, self.images)
        return self._shop_service

    @property
    def admin(self) -> "IAdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.service import AdminService
            self._admin_service = AdminService(
                admin=self.admin_repository,
                users=self.user_repository,
                pets=self.pet_repository,
                posts=self.post_repository,
            )
        return self._admin_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__(self._settings)


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token verifier."""
    return get_container().tokens


def get_user_repository() -> "UserRepository":
    """FastAPI dependency for user lookups (admin re-checks)."""
    return get_container().user_repository


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user profile service."""
    return get_container().users


def get_pet_service() -> "IPetService":
    """FastAPI dependency for pet service."""
    return get_container().pets


def get_medical_record_service() -> "IMedicalRecordService":
    """FastAPI dependency for medical record service."""
    return get_container().medical_records


def get_task_service() -> "ITaskService":
    """FastAPI dependency for task service."""
    return get_container().tasks


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_shop_service() -> "IShopService":
    """FastAPI dependency for shop service."""
    return get_container().shops


def get_admin_service() -> "IAdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin
