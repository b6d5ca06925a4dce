"""
Tasks module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import Field

from shared.models import CamelModel
from modules.pets.models import PetSummary


class TaskFrequency(str, Enum):
    """How often a care task repeats."""

    DAILY = "daily"
    WEEKLY = "weekly"
    SCHEDULED = "scheduled"


# Essential care types: at most one of each per pet.
CORE_TASK_TYPES = frozenset({"Feeding", "Pooping", "Drinking"})
CORE_TASK_DESCRIPTION = "Crucial"


class Task(CamelModel):
    """A recurring or scheduled care task for a pet."""

    id: int
    user_id: int
    pet_id: int
    type: str
    description: str
    time: datetime
    frequency: TaskFrequency
    created_at: Optional[datetime] = None
    pet: Optional[PetSummary] = None


class TaskRequest(CamelModel):
    """
    Body for creating or updating a task.

    Custom task types take their description from `description`, or
    `name` when no description is given.
    """

    pet_id: Optional[int] = None
    type: Optional[str] = None
    description: Optional[str] = None
    name: Optional[str] = Field(None, description="Fallback description for custom tasks")
    time: Optional[str] = Field(None, description="ISO date-time the task is due")
    frequency: Optional[str] = None
