from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from src.setup.api_config import ApiSettings
from src.todo.application.services import TaskService
from src.todo.domain.repositories import TaskRepository
from src.todo.presentation.app import create_app

from .fakes import FailingTaskRepository, StubTaskRepository


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> ApiSettings:
    """Provide environment variables for ApiSettings."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    return ApiSettings()


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch, repository: TaskRepository
) -> Callable[[object], object]:
    """Patch `inject.instance` to resolve services backed by ``repository``."""
    import inject

    service = TaskService(repository)

    def fake_instance(interface: object) -> object:
        if interface is TaskRepository:
            return repository
        if interface is TaskService:
            return service
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def stub_repository() -> StubTaskRepository:
    return StubTaskRepository()


@pytest.fixture
def api_client(
    env_settings: ApiSettings,
    monkeypatch: pytest.MonkeyPatch,
    stub_repository: StubTaskRepository,
):
    """FastAPI test client with the service wired to the in-memory repository."""
    _patch_inject_instance(monkeypatch, stub_repository)
    app = create_app(env_settings)
    return TestClient(app), stub_repository


@pytest.fixture
def failing_api_client(env_settings: ApiSettings, monkeypatch: pytest.MonkeyPatch):
    """Test client whose repository raises on every save."""
    _patch_inject_instance(monkeypatch, FailingTaskRepository())
    app = create_app(env_settings)
    # The catch-all handler responds, then Starlette re-raises; keep the response.
    return TestClient(app, raise_server_exceptions=False)
