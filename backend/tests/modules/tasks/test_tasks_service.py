"""Tests for the task service."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from modules.pets.exceptions import PetNotFoundError
from modules.pets.models import Pet
from modules.pets.repository import PetRepository
from modules.tasks.exceptions import DuplicateTaskError, TaskNotFoundError
from modules.tasks.models import Task, TaskRequest
from modules.tasks.repository import TaskRepository
from modules.tasks.service import TaskService
from shared.exceptions import InvalidFieldError, MissingFieldError


def make_task(task_id: int = 20, **overrides) -> Task:
    values = {
        "id": task_id,
        "user_id": 1,
        "pet_id": 10,
        "type": "Feeding",
        "description": "Crucial",
        "time": datetime(2026, 1, 15, 8, 0, tzinfo=timezone.utc),
        "frequency": "daily",
    }
    values.update(overrides)
    return Task(**values)


def task_request(**overrides) -> TaskRequest:
    body = {"petId": 10, "type": "Feeding", "frequency": "daily", "time": "2026-01-15T08:00:00Z"}
    body.update(overrides)
    return TaskRequest.model_validate(body)


@pytest.fixture
def pets() -> MagicMock:
    repo = MagicMock(spec=PetRepository)
    repo.get_owned.side_effect = lambda pet_id, user_id: (
        Pet(id=pet_id, user_id=1, name="Rex", age=3, type="Dog", breed="Lab")
        if user_id == 1 and pet_id == 10
        else None
    )
    return repo


@pytest.fixture
def tasks() -> MagicMock:
    repo = MagicMock(spec=TaskRepository)
    repo.find_by_type.return_value = None
    repo.create.side_effect = lambda data: make_task(**data)
    repo.update.side_effect = lambda task_id, data: make_task(task_id, **data)
    return repo


@pytest.fixture
def service(tasks, pets) -> TaskService:
    return TaskService(tasks, pets)


class TestCreateTask:
    @pytest.mark.asyncio
    async def test_core_type_gets_crucial_description(self, service, tasks, user):
        result = await service.create_task(user, task_request(description="ignored"))

        data = tasks.create.call_args.args[0]
        assert data["description"] == "Crucial"
        assert data["time"] == datetime(2026, 1, 15, 8, 0, tzinfo=timezone.utc)
        assert result.message == "Task created successfully"

    @pytest.mark.asyncio
    async def test_second_core_task_rejected(self, service, tasks, user):
        tasks.find_by_type.return_value = make_task()

        with pytest.raises(DuplicateTaskError) as exc_info:
            await service.create_task(user, task_request())

        assert exc_info.value.message == "A Feeding task already exists for this pet."
        assert exc_info.value.status_code == 400
        tasks.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_custom_types_may_repeat(self, service, tasks, user):
        tasks.find_by_type.return_value = make_task(type="Walk")

        await service.create_task(user, task_request(type="Walk", description="Evening walk"))
        await service.create_task(user, task_request(type="Walk", description="Morning walk"))

        assert tasks.create.call_count == 2
        tasks.find_by_type.assert_not_called()

    @pytest.mark.parametrize(
        "description, name, expected",
        [
            ("Evening walk", "Walkies", "Evening walk"),
            (None, "Walkies", "Walkies"),
            ("  ", None, "Custom Task"),
            (None, None, "Custom Task"),
        ],
    )
    @pytest.mark.asyncio
    async def test_custom_description_fallback(self, service, tasks, user, description, name, expected):
        await service.create_task(user, task_request(type="Walk", description=description, name=name))

        assert tasks.create.call_args.args[0]["description"] == expected

    @pytest.mark.asyncio
    async def test_unknown_frequency(self, service, user):
        with pytest.raises(InvalidFieldError) as exc_info:
            await service.create_task(user, task_request(frequency="hourly"))
        assert exc_info.value.field == "frequency"

    @pytest.mark.asyncio
    async def test_bad_time(self, service, user):
        with pytest.raises(InvalidFieldError):
            await service.create_task(user, task_request(time="breakfast"))

    @pytest.mark.asyncio
    async def test_missing_pet(self, service, user):
        with pytest.raises(MissingFieldError) as exc_info:
            await service.create_task(user, task_request(petId=None))
        assert exc_info.value.field == "petId"

    @pytest.mark.asyncio
    async def test_someone_elses_pet(self, service, tasks, other_user):
        with pytest.raises(PetNotFoundError):
            await service.create_task(other_user, task_request())
        tasks.create.assert_not_called()


class TestUpdateTask:
    @pytest.mark.asyncio
    async def test_keeping_own_core_type_is_allowed(self, service, tasks, user):
        tasks.get_owned.return_value = make_task(20)
        tasks.find_by_type.return_value = make_task(20)

        result = await service.update_task(user, 20, task_request(frequency="weekly"))

        assert result.data.frequency.value == "weekly"
        assert result.message == "Task updated successfully"

    @pytest.mark.asyncio
    async def test_switching_to_taken_core_type(self, service, tasks, user):
        tasks.get_owned.return_value = make_task(20, type="Walk", description="Walk")
        tasks.find_by_type.return_value = make_task(21, type="Drinking")

        with pytest.raises(DuplicateTaskError):
            await service.update_task(user, 20, task_request(type="Drinking"))
        tasks.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_owned(self, service, tasks, other_user):
        tasks.get_owned.return_value = None

        with pytest.raises(TaskNotFoundError):
            await service.update_task(other_user, 20, task_request())


class TestListAndDelete:
    @pytest.mark.asyncio
    async def test_list_filters_by_pet(self, service, tasks, user):
        tasks.list_by_user.return_value = [make_task()]

        await service.list_tasks(user, pet_id=10)

        tasks.list_by_user.assert_called_once_with(1, 10)

    @pytest.mark.asyncio
    async def test_delete(self, service, tasks, user):
        tasks.get_owned.return_value = make_task()

        result = await service.delete_task(user, 20)

        tasks.delete.assert_called_once_with(20)
        assert result.message == "Task deleted successfully"

    @pytest.mark.asyncio
    async def test_delete_not_owned(self, service, tasks, other_user):
        tasks.get_owned.return_value = None

        with pytest.raises(TaskNotFoundError):
            await service.delete_task(other_user, 20)
        tasks.delete.assert_not_called()


class TestNotifications:
    @pytest.mark.asyncio
    async def test_due_tasks(self, service, tasks, user, now):
        tasks.list_due.return_value = [make_task()]

        result = await service.list_notifications(user, now=now)

        tasks.list_due.assert_called_once_with(1, now)
        assert len(result.data) == 1

    def test_due_query_uses_time_cutoff(self, now):
        mock_db = MagicMock()
        chain = mock_db.table.return_value.select.return_value.eq.return_value.lte
        chain.return_value.order.return_value.execute.return_value.data = [{
            "id": 20,
            "user_id": 1,
            "pet_id": 10,
            "type": "Feeding",
            "description": "Crucial",
            "time": "2026-01-15T08:00:00+00:00",
            "frequency": "daily",
            "pets": {"id": 10, "name": "Rex", "type": "Dog", "breed": "Lab", "pet_picture": None},
        }]

        due = TaskRepository(mock_db).list_due(1, now)

        chain.assert_called_once_with("time", now.isoformat())
        assert due[0].pet.name == "Rex"
