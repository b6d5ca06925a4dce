"""
Pet care task service.

Core task types (feeding, pooping, drinking) are limited to one per pet
and always carry the description "Crucial". Any other type is a custom
task; a pet may have many of those.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import AuthenticatedUser, DataResponse, Envelope
from shared.validators import (
    REQUIRED_FIELDS,
    require_fields,
    validate_choice,
    validate_datetime,
    validate_text,
)
from modules.pets.exceptions import PetNotFoundError
from modules.pets.repository import PetRepository

from .exceptions import DuplicateTaskError, TaskNotFoundError
from .interfaces import ITaskService
from .models import CORE_TASK_DESCRIPTION, CORE_TASK_TYPES, Task, TaskFrequency, TaskRequest
from .repository import TaskRepository

logger = logging.getLogger(__name__)

CUSTOM_TASK_DESCRIPTION = "Custom Task"


class TaskService(ITaskService):
    """Implementation of task and notification operations."""

    def __init__(self, tasks: TaskRepository, pets: PetRepository):
        self._tasks = tasks
        self._pets = pets

    async def create_task(self, user: AuthenticatedUser, request: TaskRequest) -> DataResponse[Task]:
        values = self._validate(user, request, task_id=None)
        task = self._tasks.create({"user_id": user.id, **values})
        logger.info("User %s created %s task %s", user.id, task.type, task.id)
        return DataResponse[Task](message="Task created successfully", data=task)

    async def list_tasks(
        self, user: AuthenticatedUser, pet_id: Optional[int] = None
    ) -> DataResponse[list[Task]]:
        return DataResponse[list[Task]](data=self._tasks.list_by_user(user.id, pet_id))

    async def update_task(
        self, user: AuthenticatedUser, task_id: int, request: TaskRequest
    ) -> DataResponse[Task]:
        existing = self._get_owned(user, task_id)
        values = self._validate(user, request, task_id=task_id)
        task = self._tasks.update(task_id, values) or existing
        logger.info("User %s updated task %s", user.id, task_id)
        return DataResponse[Task](message="Task updated successfully", data=task)

    async def delete_task(self, user: AuthenticatedUser, task_id: int) -> Envelope:
        self._get_owned(user, task_id)
        self._tasks.delete(task_id)
        logger.info("User %s deleted task %s", user.id, task_id)
        return Envelope(message="Task deleted successfully")

    async def list_notifications(
        self, user: AuthenticatedUser, now: Optional[datetime] = None
    ) -> DataResponse[list[Task]]:
        now = now or datetime.now(timezone.utc)
        return DataResponse[list[Task]](data=self._tasks.list_due(user.id, now))

    def _validate(
        self, user: AuthenticatedUser, request: TaskRequest, task_id: Optional[int]
    ) -> dict[str, Any]:
        """
        Validate a create/update body and return the columns to write.

        On update, the task being edited does not count as a duplicate
        of itself.
        """
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["task"])
        task_type = validate_text(request.type, "type")
        frequency = validate_choice(
            request.frequency, [f.value for f in TaskFrequency], "frequency"
        )
        time = validate_datetime(request.time, "time")

        if self._pets.get_owned(request.pet_id, user.id) is None:
            raise PetNotFoundError(request.pet_id, user.id)

        if task_type in CORE_TASK_TYPES:
            existing = self._tasks.find_by_type(user.id, request.pet_id, task_type)
            if existing is not None and existing.id != task_id:
                raise DuplicateTaskError(task_type, request.pet_id)
            description = CORE_TASK_DESCRIPTION
        else:
            description = (
                (request.description or "").strip()
                or (request.name or "").strip()
                or CUSTOM_TASK_DESCRIPTION
            )

        return {
            "pet_id": request.pet_id,
            "type": task_type,
            "description": description,
            "time": time,
            "frequency": frequency,
        }

    def _get_owned(self, user: AuthenticatedUser, task_id: int) -> Task:
        task = self._tasks.get_owned(task_id, user.id)
        if task is None:
            raise TaskNotFoundError(task_id, user.id)
        return task
