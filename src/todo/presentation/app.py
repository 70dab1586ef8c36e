from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from fastapi import FastAPI

from src.setup.api_config import ApiSettings, get_api_settings
from src.todo.presentation.errors import register_exception_handlers
from src.todo.presentation.routes import router as tasks_router

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def create_app(
    settings: ApiSettings | None = None, lifespan: Lifespan | None = None
) -> FastAPI:
    """Assemble the FastAPI application. DI must be configured before serving."""
    if settings is None:
        settings = get_api_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Task management API",
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(tasks_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
