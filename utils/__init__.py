"""Shared utilities for the backend."""
from utils.case import NamingPolicy, snake_case_policy, to_pascal_key, to_snake_key
from utils.serialization import SerializationError, serialize

__all__ = [
    "NamingPolicy",
    "snake_case_policy",
    "to_pascal_key",
    "to_snake_key",
    "SerializationError",
    "serialize",
]
