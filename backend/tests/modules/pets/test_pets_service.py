"""Tests for the pet profile service."""

from unittest.mock import MagicMock

import pytest

from modules.pets.exceptions import PetNotFoundError
from modules.pets.models import CreatePetRequest, Pet, UpdatePetRequest
from modules.pets.repository import PetRepository
from modules.pets.service import PetService
from modules.storage.service import ATTACH_FAILED_WARNING
from shared.exceptions import InvalidFieldError, MissingFieldError


def make_pet(pet_id: int = 10, user_id: int = 1, **overrides) -> Pet:
    """Helper to create a pet."""
    values = {"id": pet_id, "user_id": user_id, "name": "Rex", "age": 3, "type": "Dog", "breed": "Labrador"}
    values.update(overrides)
    return Pet(**values)


@pytest.fixture
def pets() -> MagicMock:
    repo = MagicMock(spec=PetRepository)
    repo.create.side_effect = lambda data: make_pet(**{k: v for k, v in data.items()})
    repo.update.side_effect = lambda pet_id, data: make_pet(pet_id, **data)
    return repo


@pytest.fixture
def service(pets, user_store, images) -> PetService:
    return PetService(pets, user_store, images)


class TestCreatePet:
    @pytest.mark.asyncio
    async def test_creates_for_caller(self, service, pets, user):
        result = await service.create_pet(
            user, CreatePetRequest.model_validate({"name": " Rex ", "age": 3, "type": "Dog", "breed": "Labrador"})
        )

        data = pets.create.call_args.args[0]
        assert data == {"user_id": 1, "name": "Rex", "age": 3, "type": "Dog", "breed": "Labrador"}
        assert result.message == "Pet created successfully"
        assert result.data.pet_picture is None

    @pytest.mark.asyncio
    async def test_first_missing_field(self, service, user):
        with pytest.raises(MissingFieldError) as exc_info:
            await service.create_pet(user, CreatePetRequest(name="Rex", type="Dog"))
        assert exc_info.value.field == "age"

    @pytest.mark.asyncio
    async def test_negative_age(self, service, user):
        with pytest.raises(InvalidFieldError):
            await service.create_pet(user, CreatePetRequest(name="Rex", age=-1, type="Dog", breed="Lab"))

    @pytest.mark.asyncio
    async def test_picture_attached(self, service, pets, images, user):
        result = await service.create_pet(
            user,
            CreatePetRequest(name="Rex", age=3, type="Dog", breed="Lab", image_base64="aGVsbG8="),
        )

        bucket, stem = images.calls[0]
        assert bucket == "pet-images"
        assert stem.startswith("pet_1_10_")
        assert result.data.pet_picture.startswith("https://storage.test/pet-images/")

    @pytest.mark.asyncio
    async def test_failed_picture_keeps_pet(self, pets, user_store, failing_images, user):
        service = PetService(pets, user_store, failing_images)

        result = await service.create_pet(
            user,
            CreatePetRequest(name="Rex", age=3, type="Dog", breed="Lab", image_base64="aGVsbG8="),
        )

        assert result.success is True
        assert result.warning == ATTACH_FAILED_WARNING
        assert result.data.id == 10
        pets.update.assert_not_called()


class TestListPets:
    @pytest.mark.asyncio
    async def test_owner_sees_own_pets(self, service, pets, user_store, make_user, user):
        user_store.add(make_user(user_id=1))
        pets.list_by_user.return_value = [make_pet()]

        result = await service.list_pets(user)

        pets.list_by_user.assert_called_once_with(1)
        pets.list_all.assert_not_called()
        assert len(result.data) == 1

    @pytest.mark.asyncio
    async def test_admin_sees_every_pet(self, service, pets, user_store, make_user, user):
        user_store.add(make_user(user_id=1, is_admin=True))
        pets.list_all.return_value = [make_pet(), make_pet(11, user_id=2)]

        result = await service.list_pets(user)

        assert [p.id for p in result.data] == [10, 11]

    @pytest.mark.asyncio
    async def test_stale_admin_token_not_trusted(self, service, pets, user_store, make_user):
        from shared.models import AuthenticatedUser

        user_store.add(make_user(user_id=1, is_admin=False))
        pets.list_by_user.return_value = []

        await service.list_pets(AuthenticatedUser(id=1, is_admin=True))

        pets.list_all.assert_not_called()


class TestOwnership:
    @pytest.mark.asyncio
    async def test_get_other_users_pet_is_not_found(self, service, pets, other_user):
        pets.get_owned.return_value = None

        with pytest.raises(PetNotFoundError) as exc_info:
            await service.get_pet(other_user, 10)

        pets.get_owned.assert_called_once_with(10, 2)
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Pet not found"

    @pytest.mark.asyncio
    async def test_update_other_users_pet(self, service, pets, other_user):
        pets.get_owned.return_value = None

        with pytest.raises(PetNotFoundError):
            await service.update_pet(other_user, 10, UpdatePetRequest(name="Max"))
        pets.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_other_users_pet(self, service, pets, other_user):
        pets.get_owned.return_value = None

        with pytest.raises(PetNotFoundError):
            await service.delete_pet(other_user, 10)
        pets.delete.assert_not_called()


class TestUpdatePet:
    @pytest.mark.asyncio
    async def test_partial_update(self, service, pets, user):
        pets.get_owned.return_value = make_pet()

        result = await service.update_pet(user, 10, UpdatePetRequest(age=4))

        pets.update.assert_called_once_with(10, {"age": 4})
        assert result.message == "Pet updated successfully"
        assert result.data.age == 4

    @pytest.mark.asyncio
    async def test_empty_update_writes_nothing(self, service, pets, user):
        pets.get_owned.return_value = make_pet()

        result = await service.update_pet(user, 10, UpdatePetRequest())

        pets.update.assert_not_called()
        assert result.data.name == "Rex"

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, service, pets, user):
        pets.get_owned.return_value = make_pet()

        with pytest.raises(MissingFieldError):
            await service.update_pet(user, 10, UpdatePetRequest(name="  "))


class TestDeletePet:
    @pytest.mark.asyncio
    async def test_deletes(self, service, pets, user):
        pets.get_owned.return_value = make_pet()

        result = await service.delete_pet(user, 10)

        pets.delete.assert_called_once_with(10)
        assert result.message == "Pet deleted successfully"


class TestPetRepositoryDelete:
    def test_children_deleted_first(self):
        mock_db = MagicMock()
        tables = []
        mock_db.table.side_effect = lambda name: tables.append(name) or MagicMock()

        PetRepository(mock_db).delete(10)

        assert tables == ["tasks", "medical_records", "pets"]
