"""Application DTOs (read-models returned by repositories)."""

from venuehub.application.dtos.auth import AuthRecordResult, RoleProfileResult
from venuehub.application.dtos.content import (
    AboutContentResult,
    HeroContentResult,
    HeroImageResult,
    HeroSlideResult,
    ProcessStepResult,
    TestimonialResult,
    WeddingImages,
    WeddingResult,
)
from venuehub.application.dtos.enquiry import (
    BanquetEnquiryResult,
    HotelEnquiryResult,
    VendorEnquiryResult,
)

__all__ = [
    "AboutContentResult",
    "AuthRecordResult",
    "BanquetEnquiryResult",
    "HeroContentResult",
    "HeroImageResult",
    "HeroSlideResult",
    "HotelEnquiryResult",
    "ProcessStepResult",
    "RoleProfileResult",
    "TestimonialResult",
    "VendorEnquiryResult",
    "WeddingImages",
    "WeddingResult",
]
