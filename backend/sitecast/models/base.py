"""Base model for camelCase JSON payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Pydantic model serialized with camelCase keys.

    Fields may be populated by either their Python name or their alias.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
