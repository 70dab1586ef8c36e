from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import inject
from fastapi import FastAPI

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.logging_config import configure_logging
from src.todo.infrastructure.postgres.orm import PostgresOrm
from src.todo.presentation.app import create_app

logger = logging.getLogger(__name__)

settings = get_api_settings()
configure_logging(settings.LOG_LEVEL)
configure_di()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    orm = inject.instance(PostgresOrm)
    if settings.CREATE_SCHEMA_ON_STARTUP:
        await orm.create_schema()
        logger.info("Database schema ensured")
    yield
    await orm.dispose()


app = create_app(settings, lifespan=lifespan)
