from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.todo.application.dtos import ErrorResponse
from src.todo.domain.exceptions import TaskValidationError

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation Failed"
INTERNAL_SERVER_ERROR = "Internal Server Error"


def _error_response(
    request: Request, status_code: int, error: str, message: str | None
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_task_validation_error(
    request: Request, exc: TaskValidationError
) -> JSONResponse:
    logger.info(
        "Task request rejected",
        extra={"path": request.url.path, "violations": [v.field for v in exc.violations]},
    )
    return _error_response(request, status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, str(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = ", ".join(str(error.get("msg", "")) for error in exc.errors())
    logger.info("Malformed request body", extra={"path": request.url.path})
    return _error_response(request, status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # Starlette re-raises after this handler responds, so the server logs the traceback.
    logger.error(
        "Unhandled error while serving request",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR, str(exc)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskValidationError, handle_task_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
