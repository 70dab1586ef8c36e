from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateTaskRequest(BaseModel):
    # Constraints are enforced by validate_create_task, not by the model.
    description: str | None = Field(
        default=None, description="Task description, 1 to 500 characters."
    )


class TaskResponse(BaseModel):
    """Public projection of a stored task."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(description="Unique task identifier.")
    description: str = Field(description="What needs to be done.")
    completed: bool = Field(description="Whether the task is done.")
    status: str = Field(description="Lifecycle status name, e.g. ACTIVE.")
    created_at: datetime = Field(alias="createdAt", description="Creation time.")
    updated_at: datetime = Field(alias="updatedAt", description="Last update time.")


class ErrorResponse(BaseModel):
    status: int = Field(description="HTTP status code.")
    error: str = Field(description="Error category label.")
    message: str | None = Field(default=None, description="Human-readable detail.")
    path: str = Field(description="Request path that failed.")
    timestamp: datetime = Field(description="When the error was produced.")
