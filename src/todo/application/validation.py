from __future__ import annotations

from dataclasses import dataclass, field

from src.todo.application.dtos import CreateTaskRequest
from src.todo.domain.exceptions import FieldViolation, TaskValidationError
from src.todo.domain.models.task import DESCRIPTION_MAX_LENGTH

EMPTY_DESCRIPTION_MESSAGE = "Task description cannot be empty"
INVALID_TEXT_MESSAGE = "Task description must be valid text"
DESCRIPTION_TOO_LONG_MESSAGE = (
    f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
)

# Space and the ASCII control characters, the set a blank check trims.
_TRIMMED_CHARACTERS = "".join(chr(code) for code in range(0x21))


def _is_encodable(value: str) -> bool:
    # Lone surrogates survive JSON decoding but cannot be stored or echoed.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass
class ValidationResult:
    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def message(self) -> str:
        return ", ".join(violation.message for violation in self.violations)

    def raise_for_violations(self) -> None:
        if self.violations:
            raise TaskValidationError(self.violations)


def validate_create_task(request: CreateTaskRequest) -> ValidationResult:
    """
    Check a creation request without side effects.

    The description must be non-blank once spaces and control characters are
    trimmed, must be encodable as UTF-8, and the untrimmed value must fit in
    ``DESCRIPTION_MAX_LENGTH`` characters.
    """
    result = ValidationResult()
    description = request.description
    if description is None or not description.strip(_TRIMMED_CHARACTERS):
        result.violations.append(
            FieldViolation("description", EMPTY_DESCRIPTION_MESSAGE)
        )
    if description is not None and not _is_encodable(description):
        result.violations.append(FieldViolation("description", INVALID_TEXT_MESSAGE))
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        result.violations.append(
            FieldViolation("description", DESCRIPTION_TOO_LONG_MESSAGE)
        )
    return result
