from __future__ import annotations

import logging
from datetime import UTC, datetime
from uuid import uuid4

from src.todo.domain.models.task import Task
from src.todo.domain.repositories import TaskRepository
from src.todo.infrastructure.postgres.mappers import OrmMapper
from src.todo.infrastructure.postgres.orm import PostgresOrm, TaskRow

logger = logging.getLogger(__name__)


class PostgresTaskRepository(TaskRepository):
    """Relational task storage using SQLAlchemy async sessions."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def save(self, task: Task) -> Task:
        """Insert or update a task, stamping identity and timestamps."""
        now = datetime.now(UTC)
        async with self._orm.session_factory() as session:
            async with session.begin():
                existing = None
                if task.id is not None:
                    existing = await session.get(TaskRow, task.id)

                if existing is None:
                    stored = task.model_copy(
                        update={
                            "id": task.id or uuid4(),
                            "created_at": now,
                            "updated_at": now,
                        }
                    )
                    row = OrmMapper.to_task_row(stored)
                    session.add(row)
                    logger.debug("Inserting task", extra={"task_id": str(stored.id)})
                else:
                    row = existing
                    OrmMapper.update_task_row(
                        row, task.model_copy(update={"updated_at": now})
                    )
                    logger.debug("Updating task", extra={"task_id": str(task.id)})
        return OrmMapper.to_domain_task(row)
