# backend/wishwello/shared/schemas.py
"""
Base schema for everything the API exposes.

The dashboard UI speaks camelCase; Python code stays snake_case.
Both spellings are accepted on input.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
