"""Base schema with camelCase wire names."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Snake_case attributes, camelCase aliases.

    Accepts either spelling on input; dump with by_alias=True to get the
    names the dashboard uses (sharePercentage, netResult, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
