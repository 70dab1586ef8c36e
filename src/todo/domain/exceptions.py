from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


class TaskValidationError(Exception):
    """Raised when a task request is rejected before reaching the service."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        super().__init__(", ".join(violation.message for violation in violations))
        self.violations = violations
