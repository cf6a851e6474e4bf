"""
Build ValidationProblemDetails from field errors reported by model validation.

Field names are converted with the naming policy; messages keep the order in
which they were reported. Passing an unordered collection (e.g. a set of pairs)
makes the output order follow its iteration order.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

from schemas.errors import DEFAULT_PROBLEM_INSTANCE, ValidationError, ValidationProblemDetails
from utils.case import NamingPolicy, snake_case_policy

FieldErrors = Iterable[tuple[str, Iterable[str]]]

REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})
REQUIRED_MESSAGE = "The {field} field is required."


def collect_validation_errors(
    field_errors: FieldErrors,
    naming_policy: NamingPolicy = snake_case_policy,
) -> list[ValidationError]:
    """One ValidationError per message; fields without messages are skipped."""
    errors: list[ValidationError] = []
    for field_name, messages in field_errors:
        name = naming_policy(field_name)
        errors.extend(ValidationError(name=name, description=message) for message in messages)
    return errors


def build_validation_problem(
    field_errors: FieldErrors,
    instance: Optional[str] = None,
    naming_policy: NamingPolicy = snake_case_policy,
) -> ValidationProblemDetails:
    return ValidationProblemDetails(
        instance=instance or DEFAULT_PROBLEM_INSTANCE,
        validation_errors=collect_validation_errors(field_errors, naming_policy),
    )


def _field_path(loc: Sequence[Any]) -> str:
    """('Address', 'Lines', 0, 'ZipCode') -> 'Address.Lines[0].ZipCode'"""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _message(error: dict[str, Any]) -> str:
    field = str(error["loc"][-1]) if error.get("loc") else "request"
    if error.get("type") == "missing" or (error.get("type") == "string_type" and error.get("input") is None):
        return REQUIRED_MESSAGE.format(field=field)
    return error.get("msg", "Invalid value")


def group_pydantic_errors(
    errors: Iterable[dict[str, Any]],
) -> list[tuple[str, list[str]]]:
    """
    Group pydantic/FastAPI error dicts into (field_name, [messages]) pairs.

    Names are returned as reported (aliases included); collect_validation_errors
    applies the naming policy. The request location prefix ("body", "query", ...)
    is dropped; an error on the location itself (malformed JSON, wrong body
    type) is reported under the location name.
    Field order follows the first error reported for each field.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = tuple(error.get("loc") or ())
        if error.get("type") == "json_invalid":
            # loc carries the decode offset, not a field
            loc = loc[:1]
        if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field_name = _field_path(loc)
        grouped.setdefault(field_name, []).append(_message(error))
    return list(grouped.items())


def validation_problem_from_errors(
    errors: Iterable[dict[str, Any]],
    instance: Optional[str] = None,
) -> ValidationProblemDetails:
    """Shortcut: group pydantic errors, then build the problem details body."""
    return build_validation_problem(group_pydantic_errors(errors), instance=instance)
