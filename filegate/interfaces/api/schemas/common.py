"""Shared response envelope and serialization settings."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, as the web client expects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel):
    success: bool = True
    message: str | None = None


__all__ = ["ApiResponse", "CamelModel"]
