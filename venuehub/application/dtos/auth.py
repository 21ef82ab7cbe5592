"""DTOs for auth records and the role profiles they link to."""

from dataclasses import dataclass, field
from datetime import datetime

from venuehub.domain.enums import UserRole


@dataclass(frozen=True)
class AuthRecordResult:
    """Authentication record. links maps link field (e.g. 'hotelId') to profile id."""

    id: str
    name: str | None
    email: str | None
    role: str | None
    status: str | None
    links: dict[str, str] = field(default_factory=dict)
    created_on: datetime | None = None
    updated_on: datetime | None = None

    def profile_id(self, role: UserRole | None = None) -> str | None:
        """Profile id linked for role (defaults to the record's own role)."""
        if role is None:
            try:
                role = UserRole(self.role)
            except ValueError:
                return None
        return self.links.get(role.link_field)


@dataclass(frozen=True)
class RoleProfileResult:
    """Role profile document (hotels/{id}, vendors/{id}, ...)."""

    id: str
    collection: str
    name: str | None
    email: str | None
    status: str | None
    is_premium: bool
