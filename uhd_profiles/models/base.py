"""Base model for persisted catalog documents."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Base model whose persisted form uses camelCase keys.

    Attributes keep their snake_case names in Python; ``populate_by_name``
    lets callers construct models either way.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
