"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
