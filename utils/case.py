"""
Shared case conversion for API request/response normalization.

to_snake_key is the naming policy applied to every JSON property name the API
emits. to_pascal_key comes from Pydantic's alias_generators and is used to
accept the PascalCase names of incoming records.
"""
import re
from typing import Callable

from pydantic.alias_generators import to_pascal

NamingPolicy = Callable[[str], str]

# Word boundaries: lower/digit -> upper ("firstName", "Address2Line") and the
# last capital of an acronym run before a new word ("HTTPServer").
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_key(s: str) -> str:
    """Convert a single PascalCase or camelCase key to snake_case.

    >>> to_snake_key("UserID"), to_snake_key("HTTPServer"), to_snake_key("first_name")
    ('user_id', 'http_server', 'first_name')
    """
    if not isinstance(s, str):
        raise TypeError(f"identifier must be a str, not {type(s).__name__}")
    return _WORD_BOUNDARY.sub("_", s).lower()


def to_pascal_key(s: str) -> str:
    """Convert a single snake_case key to PascalCase."""
    return to_pascal(s)


snake_case_policy: NamingPolicy = to_snake_key
