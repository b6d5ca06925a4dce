"""
Task and notification API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from modules.tasks.interfaces import ITaskService
from modules.tasks.models import Task, TaskRequest
from shared.models import AuthenticatedUser, DataResponse, Envelope

from ..dependencies import get_task_service
from ..middleware.auth import get_current_user

router = APIRouter()
notifications_router = APIRouter()


@router.post("", response_model=DataResponse[Task], status_code=status.HTTP_201_CREATED)
async def create_task(
    request: TaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> DataResponse[Task]:
    """
    Create a care task.

    Feeding, Pooping and Drinking tasks are limited to one per pet.
    """
    return await service.create_task(user, request)


@router.get("", response_model=DataResponse[list[Task]])
async def list_tasks(
    pet_id: Optional[int] = Query(default=None, alias="petId"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> DataResponse[list[Task]]:
    return await service.list_tasks(user, pet_id)


@router.put("/{task_id}", response_model=DataResponse[Task])
async def update_task(
    task_id: int,
    request: TaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> DataResponse[Task]:
    return await service.update_task(user, task_id, request)


@router.delete("/{task_id}", response_model=Envelope)
async def delete_task(
    task_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Envelope:
    return await service.delete_task(user, task_id)


@notifications_router.get("", response_model=DataResponse[list[Task]])
async def list_notifications(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> DataResponse[list[Task]]:
    """Tasks that are due now or overdue, each with its pet."""
    return await service.list_notifications(user)
