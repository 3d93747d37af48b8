from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Shared config: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        # Infinity/NaN parse as floats but are never a valid amount
        allow_inf_nan=False,
    )


class MessageResponse(BaseSchema):
    success: bool = True
    message: str
