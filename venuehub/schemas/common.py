"""Shared schema pieces: camelCase base model, response envelope, order update."""

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase in JSON; built from DTO attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope of every response. Failures carry error_code (see exception handlers)."""

    success: bool = True
    data: T | None = None
    message: str = ""


class OrderUpdateRequest(CamelModel):
    """Body of PUT .../order: move one entity to a new display position."""

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "testimonialId", "imageId"),
    )
    new_order: int = Field(..., ge=0, strict=True)
