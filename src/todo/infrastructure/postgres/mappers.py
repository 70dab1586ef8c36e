from __future__ import annotations

from datetime import UTC, datetime

from src.todo.domain.models.task import Task
from src.todo.infrastructure.postgres.orm import TaskRow


class OrmMapper:
    @staticmethod
    def to_task_row(task: Task) -> TaskRow:
        if task.id is None:
            raise ValueError("Task id is required to persist TaskRow.")
        return TaskRow(
            id=task.id,
            description=task.description,
            status=task.status,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
            completed_at=task.completed_at,
        )

    @staticmethod
    def update_task_row(row: TaskRow, task: Task) -> None:
        """Copy mutable fields onto an existing row. ``id`` and ``created_at`` stay."""
        row.description = task.description
        row.status = task.status
        row.completed = task.completed
        row.updated_at = task.updated_at
        row.completed_at = task.completed_at

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            description=row.description,
            status=row.status,
            completed=row.completed,
            created_at=OrmMapper._as_utc(row.created_at),
            updated_at=OrmMapper._as_utc(row.updated_at),
            completed_at=OrmMapper._as_utc(row.completed_at),
        )

    @staticmethod
    def _as_utc(value: datetime | None) -> datetime | None:
        # Some backends (SQLite) drop the offset; stored values are always UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
