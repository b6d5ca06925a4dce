"""
Tasks module exceptions.
"""

from typing import Any

from shared.exceptions import DuplicateError, OwnershipError


class TaskNotFoundError(OwnershipError):
    """Raised when a task does not exist or belongs to someone else."""

    def __init__(self, task_id: Any, user_id: Any = None):
        super().__init__("Task", task_id, user_id)


class DuplicateTaskError(DuplicateError):
    """Raised when a pet already has a task of a core type."""

    def __init__(self, task_type: str, pet_id: int):
        super().__init__(
            f"A {task_type} task already exists for this pet.",
            code="DUPLICATE_TASK",
            details={"type": task_type, "pet_id": pet_id},
        )
