"""Tests for api/dependencies.py."""

from unittest.mock import MagicMock, patch

import pytest

from api.dependencies import ServiceContainer, get_container, reset_container
from modules.auth.tokens import TokenService
from shared.config import Settings
from shared.exceptions import ConfigurationError


def make_settings(**overrides) -> Settings:
    values = {"jwt_secret": "test-secret-key-for-testing-only", "bcrypt_rounds": 4}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestServiceContainer:
    def test_missing_secret_is_a_configuration_error(self):
        container = ServiceContainer(make_settings(jwt_secret=""))

        with pytest.raises(ConfigurationError) as exc_info:
            container.tokens
        assert exc_info.value.message == "Server authentication not configured"

    def test_tokens_use_configured_secret(self):
        container = ServiceContainer(make_settings(jwt_expire_hours=2))

        tokens = container.tokens

        assert isinstance(tokens, TokenService)
        claims = tokens.verify(tokens.issue(3))
        assert (claims.expires_at - claims.issued_at).total_seconds() == 2 * 3600

    def test_services_are_cached(self):
        container = ServiceContainer(make_settings())
        container._db = MagicMock()

        assert container.pets is container.pets
        assert container.hasher is container.hasher

    def test_services_share_repositories(self):
        container = ServiceContainer(make_settings())
        container._db = MagicMock()

        container.pets
        container.tasks

        assert container.pets._pets is container.tasks._pets

    def test_reset_keeps_settings(self):
        settings = make_settings()
        container = ServiceContainer(settings)
        container._db = MagicMock()
        first = container.auth

        container.reset()
        container._db = MagicMock()

        assert container.settings is settings
        assert container.auth is not first

    @patch("shared.database.get_settings")
    def test_database_not_configured(self, mock_settings):
        from shared.database import reset_client_cache

        reset_client_cache()
        mock_settings.return_value.supabase_url = ""
        mock_settings.return_value.supabase_service_role_key = ""

        with pytest.raises(ConfigurationError):
            ServiceContainer(make_settings()).db


class TestContainerSingleton:
    def test_get_container_is_singleton(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first
