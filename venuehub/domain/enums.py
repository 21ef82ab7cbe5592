"""Domain enumerations (statuses, roles, image slots)."""

from enum import Enum


class EntityStatus(str, Enum):
    """Visibility of a content entity; only ACTIVE shows on public pages."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class UserRole(str, Enum):
    """Roles an auth record can hold; each role owns a profile collection."""

    ADMIN = "admin"
    SUPER_ADMIN = "super-admin"
    HOTEL = "hotel"
    VENDOR = "vendor"
    USER = "user"
    BLOG = "blog"
    MARKETING = "marketing"

    @property
    def collection(self) -> str:
        """Firestore collection holding this role's profile documents."""
        return _ROLE_COLLECTIONS[self]

    @property
    def link_field(self) -> str:
        """Auth record field that points at the profile (e.g. hotelId)."""
        return f"{self.value}Id"


_ROLE_COLLECTIONS: dict[UserRole, str] = {
    UserRole.ADMIN: "admins",
    UserRole.SUPER_ADMIN: "admins",
    UserRole.HOTEL: "hotels",
    UserRole.VENDOR: "vendors",
    UserRole.USER: "users",
    UserRole.BLOG: "blog",
    UserRole.MARKETING: "marketing",
}


class HotelEnquiryStatus(str, Enum):
    PENDING = "Pending"
    CONTACTED = "Contacted"
    CLOSED = "Closed"


class VendorEnquiryStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class BanquetEnquiryStatus(str, Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class EnquiryOwner(str, Enum):
    """Account kinds that receive enquiries and may list them while premium."""

    HOTEL = "hotel"
    VENDOR = "vendor"
    BANQUET = "banquet"

    @property
    def collection(self) -> str:
        """Firestore collection holding the owner profiles (carries isPremium)."""
        return _OWNER_COLLECTIONS[self]


_OWNER_COLLECTIONS: dict[EnquiryOwner, str] = {
    EnquiryOwner.HOTEL: "hotels",
    EnquiryOwner.VENDOR: "vendors",
    EnquiryOwner.BANQUET: "banquets",
}


class HeroImageType(str, Enum):
    """Layout slot of a hero-extension image on the home page collage."""

    TALL_LEFT = "tall_left"
    MAIN_CENTER = "main_center"
    BOTTOM_LEFT = "bottom_left"
    CENTER_BOTTOM = "center_bottom"
    TOP_RIGHT = "top_right"
    FAR_RIGHT = "far_right"
