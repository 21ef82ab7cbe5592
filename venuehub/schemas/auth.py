"""Auth record administration API schemas."""

from datetime import datetime

from pydantic import Field

from venuehub.domain.enums import EntityStatus, UserRole
from venuehub.schemas.common import CamelModel


class AuthUpdateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    role: UserRole


class AuthStatusRequest(CamelModel):
    status: EntityStatus


class AuthRecordResponse(CamelModel):
    """Auth record; links maps link field names (hotelId, ...) to profile ids."""

    id: str
    name: str | None = None
    email: str | None = None
    role: str | None = None
    status: str | None = None
    links: dict[str, str] = Field(default_factory=dict)
    created_on: datetime | None = None
    updated_on: datetime | None = None
