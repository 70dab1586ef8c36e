from src.todo.domain.models.task import DESCRIPTION_MAX_LENGTH, Task
from src.todo.domain.models.task_status import TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "DESCRIPTION_MAX_LENGTH",
]
