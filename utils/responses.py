"""
JSON responses whose property names are snake_case.

The body is rendered once at construction; Starlette writes status, headers
and body to the ASGI send channel when the response is awaited.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel
from starlette.responses import JSONResponse

from utils.serialization import serialize


class SnakeCaseJSONResponse(JSONResponse):
    """JSONResponse that renames every object key to snake_case."""

    def render(self, content: Any) -> bytes:
        return serialize(content).encode("utf-8")


class JsonErrorResponse(SnakeCaseJSONResponse):
    """Error body response; the status code defaults to the error's own status."""

    def __init__(
        self,
        error: BaseModel,
        status_code: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        if status_code is None:
            status_code = getattr(error, "status", 500)
        super().__init__(content=error, status_code=status_code, headers=headers)
