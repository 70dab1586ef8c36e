import logging
from typing import cast

import inject

from src.todo.application.dtos import TaskResponse
from src.todo.domain.models import Task
from src.todo.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Creates tasks and projects them for API consumers."""

    def __init__(self, repository: TaskRepository | None = None) -> None:
        self._repository = repository or cast(
            TaskRepository, inject.instance(TaskRepository)
        )

    async def create_task(self, description: str) -> TaskResponse:
        """
        Store a new active, not completed task and return its projection.

        ``description`` is expected to be validated already.
        """
        task = Task(description=description)
        saved = await self._repository.save(task)
        logger.info("Task created", extra={"task_id": str(saved.id)})
        return self.to_response(saved)

    @staticmethod
    def to_response(task: Task) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            description=task.description,
            completed=task.completed,
            status=task.status.name,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
