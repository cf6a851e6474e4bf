from pydantic import BaseModel, ConfigDict

from utils.case import to_pascal_key


class FormData(BaseModel):
    """Registration payload. Accepts snake_case keys or the PascalCase aliases (FirstName, ...)."""

    email: str
    password: str
    first_name: str
    last_name: str

    model_config = ConfigDict(alias_generator=to_pascal_key, populate_by_name=True)
