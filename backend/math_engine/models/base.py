"""Base Pydantic model shared by every engine input/result record."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EngineModel(BaseModel):
    """
    Immutable value object with camelCase JSON aliases.

    Python code uses snake_case attributes; the wire format (and the chat
    composer that calls the API) uses camelCase. Both names are accepted on
    input; model_dump(by_alias=True) produces the wire format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
