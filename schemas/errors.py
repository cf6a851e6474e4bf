"""
Error payloads returned by the API.

Field names are declared in snake_case and are written to the wire in
declaration order by utils.serialization.serialize.
"""
import uuid
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SERVER_ERROR_MESSAGE = "Internal Server Error"
VALIDATION_STATUS_CODE = 400
VALIDATION_TITLE = "Request Validation Error"
DEFAULT_PROBLEM_INSTANCE = "CT Portal"


def new_request_id() -> str:
    return str(uuid.uuid4())


class ErrorDetails(BaseModel):
    """Generic error body for faults other than request validation."""

    model_config = ConfigDict(frozen=True)

    status: int
    message: str = DEFAULT_SERVER_ERROR_MESSAGE
    request_id: str = Field(default_factory=new_request_id)

    @field_validator("message", mode="before")
    @classmethod
    def _default_message(cls, v: Optional[str]) -> str:
        return DEFAULT_SERVER_ERROR_MESSAGE if v is None else v


class ValidationError(BaseModel):
    """One failed check on one request field."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class ValidationProblemDetails(BaseModel):
    """400 body listing every field that failed validation."""

    model_config = ConfigDict(frozen=True)

    status: Literal[400] = VALIDATION_STATUS_CODE
    title: str = VALIDATION_TITLE
    # Node name once requests are balanced across several instances.
    instance: str = DEFAULT_PROBLEM_INSTANCE
    validation_errors: list[ValidationError] = Field(default_factory=list)
    request_id: str = Field(default_factory=new_request_id)
