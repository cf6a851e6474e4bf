"""
Exception boundary for the API.

Every error leaves the service as JSON with snake_case keys: request
validation failures as ValidationProblemDetails (400), everything else as
ErrorDetails. Stack traces only go to the server log.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from schemas.errors import ErrorDetails, ValidationProblemDetails
from services.validation import validation_problem_from_errors
from utils.responses import JsonErrorResponse

logger = logging.getLogger(__name__)


def validation_error_response(problem: ValidationProblemDetails) -> JsonErrorResponse:
    logger.warning(
        "Request validation failed (request_id=%s): %s",
        problem.request_id,
        ", ".join(e.name for e in problem.validation_errors),
    )
    return JsonErrorResponse(problem)


def register_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on the FastAPI application."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(_request: Request, exc: RequestValidationError) -> JsonErrorResponse:
        problem = validation_problem_from_errors(exc.errors(), instance=settings.problem_instance)
        return validation_error_response(problem)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JsonErrorResponse:
        message = exc.detail if isinstance(exc.detail, str) else None
        error = ErrorDetails(status=exc.status_code, message=message)
        logger.info(
            "%s %s -> %d (request_id=%s)", request.method, request.url.path, exc.status_code, error.request_id
        )
        return JsonErrorResponse(error, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JsonErrorResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        error = ErrorDetails(status=500)
        logger.exception(
            "Unhandled %s on %s %s (request_id=%s)",
            type(exc).__name__,
            request.method,
            request.url.path,
            error.request_id,
        )
        return JsonErrorResponse(error)
