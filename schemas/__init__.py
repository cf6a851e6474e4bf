from schemas.account import FormData
from schemas.errors import (
    DEFAULT_PROBLEM_INSTANCE,
    DEFAULT_SERVER_ERROR_MESSAGE,
    VALIDATION_STATUS_CODE,
    VALIDATION_TITLE,
    ErrorDetails,
    ValidationError,
    ValidationProblemDetails,
)

__all__ = [
    "FormData",
    "ErrorDetails",
    "ValidationError",
    "ValidationProblemDetails",
    "DEFAULT_PROBLEM_INSTANCE",
    "DEFAULT_SERVER_ERROR_MESSAGE",
    "VALIDATION_STATUS_CODE",
    "VALIDATION_TITLE",
]
