"""
Tasks module interface.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser, DataResponse, Envelope

from .models import Task, TaskRequest


@runtime_checkable
class ITaskService(Protocol):
    """Interface for pet care tasks and due-task notifications."""

    async def create_task(self, user: AuthenticatedUser, request: TaskRequest) -> DataResponse[Task]:
        """
        Create a task for one of the caller's pets.

        Raises:
            ValidationError: If a field is missing or invalid
            PetNotFoundError: If the pet is not the caller's
            DuplicateTaskError: If the pet already has this core task type
        """
        ...

    async def list_tasks(
        self, user: AuthenticatedUser, pet_id: Optional[int] = None
    ) -> DataResponse[list[Task]]:
        ...

    async def update_task(
        self, user: AuthenticatedUser, task_id: int, request: TaskRequest
    ) -> DataResponse[Task]:
        ...

    async def delete_task(self, user: AuthenticatedUser, task_id: int) -> Envelope:
        ...

    async def list_notifications(
        self, user: AuthenticatedUser, now: Optional[datetime] = None
    ) -> DataResponse[list[Task]]:
        """List the caller's tasks that are due at `now` (default: current time)."""
        ...
