from __future__ import annotations

from typing import cast

import inject
from fastapi import APIRouter, Depends, status

from src.todo.application.dtos import CreateTaskRequest, ErrorResponse, TaskResponse
from src.todo.application.services import TaskService
from src.todo.application.validation import validate_create_task

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


def get_task_service() -> TaskService:
    return cast(TaskService, inject.instance(TaskService))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    description="Stores a new ACTIVE task with the given description (1 to 500 characters).",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed."},
        500: {"model": ErrorResponse, "description": "Internal server error."},
    },
)
async def create_task(
    body: CreateTaskRequest,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    validate_create_task(body).raise_for_violations()
    return await service.create_task(cast(str, body.description))
