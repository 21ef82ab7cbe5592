"""Application services (use cases spanning more than one repository)."""

from venuehub.application.services.enquiry_access_service import EnquiryAccessService

__all__ = ["EnquiryAccessService"]
