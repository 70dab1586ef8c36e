import logging

import inject

from src.setup.db_config import DatabaseSettings, get_database_settings
from src.todo.application.services import TaskService
from src.todo.domain.repositories import TaskRepository
from src.todo.infrastructure.postgres.orm import PostgresOrm
from src.todo.infrastructure.postgres.repositories import PostgresTaskRepository

logger = logging.getLogger(__name__)


def configure_di(settings: DatabaseSettings | None = None) -> None:
    """Build the object graph once and bind it into the DI container."""
    if inject.is_configured():
        return
    if settings is None:
        settings = get_database_settings()

    orm = PostgresOrm(settings.DATABASE_URL, echo=settings.DB_ECHO)
    repository = PostgresTaskRepository(orm)
    service = TaskService(repository)

    def _config(binder: inject.Binder) -> None:
        binder.bind(PostgresOrm, orm)
        binder.bind(TaskRepository, repository)
        binder.bind(TaskService, service)

    inject.configure(_config)
    logger.info("Dependencies configured")
