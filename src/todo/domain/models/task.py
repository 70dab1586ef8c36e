from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.todo.domain.models.task_status import TaskStatus

DESCRIPTION_MAX_LENGTH = 500


class Task(BaseModel):
    id: UUID | None = Field(default=None, description="Unique task identifier.")
    description: str = Field(description="What needs to be done.")
    status: TaskStatus = Field(
        default=TaskStatus.ACTIVE, description="Lifecycle status of the task."
    )
    completed: bool = Field(default=False, description="Whether the task is done.")
    created_at: datetime | None = Field(
        default=None, description="When the task was first stored."
    )
    updated_at: datetime | None = Field(
        default=None, description="When the task was last stored."
    )
    completed_at: datetime | None = Field(
        default=None, description="When the task was completed, if ever."
    )
