"""Base model for declarative service configuration"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConfigModel(BaseModel):
    """
    Configuration record fed by the declarative infrastructure layer.

    Input keys are camelCase (``validatorIdentities``); snake_case field
    names are accepted too. Unknown keys are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )
