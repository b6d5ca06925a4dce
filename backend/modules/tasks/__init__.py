"""
Tasks module.

Pet care tasks and the notifications derived from them.

Public API:
- ITaskService: Interface for task operations
- TaskRepository: Data access for the tasks table
- Task, TaskRequest, TaskFrequency: Models
- Task exceptions
"""

from .interfaces import ITaskService
from .models import CORE_TASK_TYPES, Task, TaskFrequency, TaskRequest
from .repository import TaskRepository
from .exceptions import DuplicateTaskError, TaskNotFoundError

__all__ = [
    "ITaskService",
    "TaskRepository",
    "CORE_TASK_TYPES",
    "Task",
    "TaskFrequency",
    "TaskRequest",
    "DuplicateTaskError",
    "TaskNotFoundError",
]
