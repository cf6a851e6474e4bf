from typing import Any

from fastapi import APIRouter, Body
from pydantic import ValidationError as PydanticValidationError

from api.errors import validation_error_response
from config import settings
from schemas.account import FormData
from schemas.errors import ValidationProblemDetails
from services.validation import validation_problem_from_errors

router = APIRouter(prefix="/account", tags=["account"])


@router.post(
    "/register",
    response_model=FormData,
    responses={400: {"model": ValidationProblemDetails}},
)
async def register(payload: dict[str, Any] = Body(...)):
    """Validate the registration form and echo it back with snake_case keys."""
    try:
        data = FormData.model_validate(payload)
    except PydanticValidationError as e:
        problem = validation_problem_from_errors(e.errors(), instance=settings.problem_instance)
        return validation_error_response(problem)
    return data
