"""Premium-gated enquiry lists for hotel, vendor and banquet owners.

An owner may read the enquiries it received only while its profile is
premium. A missing profile is reported as not found; a profile that exists
but is not premium is refused with AccessDeniedException.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from venuehub.domain.enums import EnquiryOwner
from venuehub.domain.exceptions import AccessDeniedException, ResourceNotFoundException

if TYPE_CHECKING:
    from venuehub.application.dtos.enquiry import (
        BanquetEnquiryResult,
        HotelEnquiryResult,
        VendorEnquiryResult,
    )
    from venuehub.application.interfaces.repositories import (
        IEnquiryRepository,
        IRoleProfileRepository,
    )

logger = logging.getLogger(__name__)


class EnquiryAccessService:
    """Checks the owner's premium entitlement before listing its enquiries."""

    def __init__(
        self,
        profiles: IRoleProfileRepository,
        hotel_enquiries: IEnquiryRepository[HotelEnquiryResult],
        vendor_enquiries: IEnquiryRepository[VendorEnquiryResult],
        banquet_enquiries: IEnquiryRepository[BanquetEnquiryResult],
    ) -> None:
        self._profiles = profiles
        self._hotel_enquiries = hotel_enquiries
        self._vendor_enquiries = vendor_enquiries
        self._banquet_enquiries = banquet_enquiries

    async def _require_premium(self, owner: EnquiryOwner, owner_id: str) -> None:
        profile = await self._profiles.get_profile(owner.collection, owner_id)
        if profile is None:
            raise ResourceNotFoundException(owner.value, owner_id)
        if not profile.is_premium:
            logger.info("Enquiry list refused for non-premium %s %s", owner.value, owner_id)
            raise AccessDeniedException(
                f"Access denied: {owner.value.capitalize()} is not premium", resource_id=owner_id
            )

    async def list_for_hotel(self, auth_id: str) -> list[HotelEnquiryResult]:
        """Enquiries of a premium hotel, newest first."""
        await self._require_premium(EnquiryOwner.HOTEL, auth_id)
        return await self._hotel_enquiries.list_by_owner(auth_id=auth_id)

    async def list_for_vendor(self, auth_id: str) -> list[VendorEnquiryResult]:
        """Enquiries of a premium vendor, newest first."""
        await self._require_premium(EnquiryOwner.VENDOR, auth_id)
        return await self._vendor_enquiries.list_by_owner(auth_id=auth_id)

    async def list_for_banquet(self, auth_id: str) -> list[BanquetEnquiryResult]:
        """Enquiries of a premium banquet hall, newest first."""
        await self._require_premium(EnquiryOwner.BANQUET, auth_id)
        return await self._banquet_enquiries.list_by_owner(auth_id=auth_id)
