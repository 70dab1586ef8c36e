from __future__ import annotations

from typing import Protocol

from src.todo.domain.models.task import Task


class TaskRepository(Protocol):
    """Repository contract for durable task storage."""

    async def save(self, task: Task) -> Task:
        """
        Store ``task`` and return the stored entity.

        Assigns the identifier when it is missing and stamps ``created_at`` and
        ``updated_at`` with the same instant on first save. Later saves of an
        existing id only refresh ``updated_at``.
        """
