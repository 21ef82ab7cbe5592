"""Hotel, vendor and banquet enquiry API schemas."""

from datetime import datetime

from pydantic import Field

from venuehub.domain.enums import BanquetEnquiryStatus, HotelEnquiryStatus, VendorEnquiryStatus
from venuehub.schemas.common import CamelModel


class HotelEnquiryCreateRequest(CamelModel):
    auth_id: str = Field(..., min_length=1)
    hotel_name: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    status: HotelEnquiryStatus = HotelEnquiryStatus.PENDING


class HotelEnquiryUpdateRequest(CamelModel):
    """Partial update; authId is ignored if sent."""

    hotel_name: str | None = Field(default=None, min_length=1)
    city: str | None = Field(default=None, min_length=1)
    status: HotelEnquiryStatus | None = None


class HotelEnquiryResponse(CamelModel):
    id: str
    auth_id: str
    hotel_name: str
    city: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VendorEnquiryCreateRequest(CamelModel):
    auth_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: str = Field(..., min_length=1)
    name: str | None = None
    status: VendorEnquiryStatus = VendorEnquiryStatus.PENDING


class VendorEnquiryUpdateRequest(CamelModel):
    """Partial update; authId is ignored if sent."""

    email: str | None = Field(default=None, min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: str | None = Field(default=None, min_length=1)
    name: str | None = None
    status: VendorEnquiryStatus | None = None


class VendorEnquiryResponse(CamelModel):
    id: str
    auth_id: str
    name: str | None = None
    email: str
    phone_number: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BanquetEnquiryCreateRequest(CamelModel):
    auth_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    message: str | None = None
    status: BanquetEnquiryStatus = BanquetEnquiryStatus.NEW


class BanquetEnquiryUpdateRequest(CamelModel):
    """Partial update; authId and message are fixed once submitted."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: str | None = Field(default=None, min_length=1)
    status: BanquetEnquiryStatus | None = None


class BanquetEnquiryResponse(CamelModel):
    id: str
    auth_id: str
    name: str
    email: str
    phone_number: str
    message: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
