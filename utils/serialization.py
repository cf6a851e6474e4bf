"""
JSON serialization with a pluggable key naming policy.

Every object key (dict keys, pydantic model fields including extras and
computed fields, dataclass fields) is passed through the naming policy
before encoding; values are left exactly as they are.
"""
import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from utils.case import NamingPolicy, snake_case_policy


class SerializationError(ValueError):
    """Raised when a value cannot be rendered as JSON."""


def _is_object(value: Any) -> bool:
    if isinstance(value, (BaseModel, Mapping)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _object_items(value: Any) -> list[tuple[Any, Any]]:
    """Key/value pairs in the order pydantic dumps them: fields, extras, computed fields."""
    if isinstance(value, BaseModel):
        model = type(value)
        items = [(name, getattr(value, name)) for name in model.model_fields]
        items.extend((value.__pydantic_extra__ or {}).items())
        items.extend((name, getattr(value, name)) for name in model.model_computed_fields)
        return items
    if isinstance(value, Mapping):
        return list(value.items())
    return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]


def _encoded_key(key: Any) -> str:
    # pydantic-core writes non-str keys as their JSON scalar text
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _rename_keys(value: Any, naming_policy: NamingPolicy, active: set[int]) -> Any:
    """Copy containers with renamed keys. `active` holds ids of containers on the current path."""
    is_object = _is_object(value)
    if not is_object and not isinstance(value, (list, tuple)):
        return value

    container_id = id(value)
    if container_id in active:
        raise SerializationError(f"Circular reference detected in {type(value).__name__}")
    active.add(container_id)

    if is_object:
        out: dict[Any, Any] = {}
        seen: dict[str, Any] = {}
        for key, item in _object_items(value):
            new_key = naming_policy(key) if isinstance(key, str) else key
            encoded = _encoded_key(new_key)
            if encoded in seen:
                raise SerializationError(
                    f"Duplicate key {encoded!r} after renaming {seen[encoded]!r} and {key!r}"
                )
            seen[encoded] = key
            out[new_key] = _rename_keys(item, naming_policy, active)
        result: Any = out
    else:
        result = [_rename_keys(item, naming_policy, active) for item in value]

    active.discard(container_id)
    return result


def serialize(value: Any, naming_policy: NamingPolicy = snake_case_policy) -> str:
    """
    Render value as compact JSON text with every object key renamed by naming_policy.

    >>> serialize({"FirstName": "Ann"})
    '{"first_name":"Ann"}'
    """
    renamed = _rename_keys(value, naming_policy, set())
    try:
        return to_json(renamed).decode("utf-8")
    except PydanticSerializationError as e:
        raise SerializationError(str(e)) from e
