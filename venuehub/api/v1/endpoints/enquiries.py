"""Hotel, vendor and banquet enquiries API.

Owner lists (/hotel/{auth_id}, /vendor/{auth_id}, /banquet/{auth_id}) are
premium-gated: 404 when the owner's profile does not exist, 403 when it is
not premium.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from venuehub.api.v1.dependencies import (
    get_banquet_enquiry_repo,
    get_enquiry_access_service,
    get_hotel_enquiry_repo,
    get_vendor_enquiry_repo,
)
from venuehub.api.v1.endpoints._crud import add_crud_routes
from venuehub.application.services.enquiry_access_service import EnquiryAccessService
from venuehub.schemas.common import ApiResponse
from venuehub.schemas.enquiry import (
    BanquetEnquiryCreateRequest,
    BanquetEnquiryResponse,
    BanquetEnquiryUpdateRequest,
    HotelEnquiryCreateRequest,
    HotelEnquiryResponse,
    HotelEnquiryUpdateRequest,
    VendorEnquiryCreateRequest,
    VendorEnquiryResponse,
    VendorEnquiryUpdateRequest,
)

AccessService = Annotated[EnquiryAccessService, Depends(get_enquiry_access_service)]

hotel_router = APIRouter()
vendor_router = APIRouter()
banquet_router = APIRouter()


@hotel_router.get("/hotel/{auth_id}", response_model=ApiResponse[list[HotelEnquiryResponse]])
async def list_enquiries_for_hotel(auth_id: str, service: AccessService):
    """Enquiries submitted by a premium hotel, newest first."""
    items = await service.list_for_hotel(auth_id)
    return ApiResponse[list[HotelEnquiryResponse]](
        data=[HotelEnquiryResponse.model_validate(i) for i in items],
        message="Hotel enquiries fetched successfully",
    )


@vendor_router.get("/vendor/{auth_id}", response_model=ApiResponse[list[VendorEnquiryResponse]])
async def list_enquiries_for_vendor(auth_id: str, service: AccessService):
    """Enquiries submitted by a premium vendor, newest first."""
    items = await service.list_for_vendor(auth_id)
    return ApiResponse[list[VendorEnquiryResponse]](
        data=[VendorEnquiryResponse.model_validate(i) for i in items],
        message="Vendor enquiries fetched successfully",
    )


@banquet_router.get("/banquet/{auth_id}", response_model=ApiResponse[list[BanquetEnquiryResponse]])
async def list_enquiries_for_banquet(auth_id: str, service: AccessService):
    """Enquiries received by a premium banquet hall, newest first."""
    items = await service.list_for_banquet(auth_id)
    return ApiResponse[list[BanquetEnquiryResponse]](
        data=[BanquetEnquiryResponse.model_validate(i) for i in items],
        message="Banquet enquiries fetched successfully",
    )


add_crud_routes(
    hotel_router,
    get_repo=get_hotel_enquiry_repo,
    create_model=HotelEnquiryCreateRequest,
    update_model=HotelEnquiryUpdateRequest,
    response_model=HotelEnquiryResponse,
    label="Hotel enquiry",
    plural="Hotel enquiries",
    with_active=False,
)

add_crud_routes(
    vendor_router,
    get_repo=get_vendor_enquiry_repo,
    create_model=VendorEnquiryCreateRequest,
    update_model=VendorEnquiryUpdateRequest,
    response_model=VendorEnquiryResponse,
    label="Vendor enquiry",
    plural="Vendor enquiries",
    with_active=False,
)

add_crud_routes(
    banquet_router,
    get_repo=get_banquet_enquiry_repo,
    create_model=BanquetEnquiryCreateRequest,
    update_model=BanquetEnquiryUpdateRequest,
    response_model=BanquetEnquiryResponse,
    label="Banquet enquiry",
    plural="Banquet enquiries",
    with_active=False,
)
