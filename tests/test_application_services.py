from datetime import UTC, datetime
from uuid import uuid4

import pytest

from src.todo.application.services import TaskService
from src.todo.domain.models import Task, TaskStatus

from .fakes import FailingTaskRepository, StubTaskRepository


@pytest.mark.asyncio
async def test_create_task_saves_active_incomplete_task() -> None:
    repository = StubTaskRepository()
    service = TaskService(repository)

    response = await service.create_task("Buy groceries")

    assert len(repository.saved) == 1
    captured = repository.saved[0]
    assert captured.id is None
    assert captured.description == "Buy groceries"
    assert captured.status is TaskStatus.ACTIVE
    assert captured.completed is False
    assert captured.completed_at is None

    assert response.id is not None
    assert response.description == "Buy groceries"
    assert response.completed is False
    assert response.status == "ACTIVE"
    assert response.created_at == response.updated_at


@pytest.mark.asyncio
async def test_create_task_accepts_500_characters() -> None:
    service = TaskService(StubTaskRepository())

    response = await service.create_task("A" * 500)

    assert len(response.description) == 500


@pytest.mark.asyncio
async def test_create_task_propagates_storage_failure() -> None:
    service = TaskService(FailingTaskRepository("connection lost"))

    with pytest.raises(RuntimeError, match="connection lost"):
        await service.create_task("Buy groceries")


@pytest.mark.asyncio
async def test_service_resolves_repository_from_container(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    repository = StubTaskRepository()

    import inject

    monkeypatch.setattr(inject, "instance", lambda interface: repository)

    service = TaskService()
    await service.create_task("Water plants")

    assert [task.description for task in repository.saved] == ["Water plants"]


def test_to_response_projects_status_name_and_skips_completed_at() -> None:
    now = datetime.now(UTC)
    task = Task(
        id=uuid4(),
        description="Archive me",
        status=TaskStatus.ARCHIVED,
        completed=True,
        created_at=now,
        updated_at=now,
        completed_at=now,
    )

    response = TaskService.to_response(task)
    body = response.model_dump(by_alias=True)

    assert body["status"] == "ARCHIVED"
    assert body["completed"] is True
    assert set(body) == {"id", "description", "completed", "status", "createdAt", "updatedAt"}
