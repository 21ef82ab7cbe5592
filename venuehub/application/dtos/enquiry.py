"""DTOs for enquiries submitted to hotels, vendors and banquets."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HotelEnquiryResult:
    id: str
    auth_id: str
    hotel_name: str
    city: str
    status: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class VendorEnquiryResult:
    id: str
    auth_id: str
    name: str | None
    email: str
    phone_number: str
    status: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class BanquetEnquiryResult:
    id: str
    auth_id: str
    name: str
    email: str
    phone_number: str
    message: str
    status: str
    created_at: datetime | None
    updated_at: datetime | None
