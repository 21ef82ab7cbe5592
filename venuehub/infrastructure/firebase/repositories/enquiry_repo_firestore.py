"""Firestore-backed hotel, vendor and banquet enquiries (newest first).

Enquiries keep the createdAt/updatedAt field names, default to "Pending"
("New" for banquets) and have no active view. The submitting account
(authId) cannot be changed by an update.
"""

from __future__ import annotations

from typing import Any, TypeVar

from venuehub.application.dtos.enquiry import (
    BanquetEnquiryResult,
    HotelEnquiryResult,
    VendorEnquiryResult,
)
from venuehub.core.constants import FIELD_CREATED_AT, FIELD_UPDATED_AT
from venuehub.domain.enums import (
    BanquetEnquiryStatus,
    HotelEnquiryStatus,
    VendorEnquiryStatus,
)
from venuehub.infrastructure.firebase._rest_client import DESCENDING, FirestoreRESTClient
from venuehub.infrastructure.firebase.collections import (
    COLLECTION_BANQUET_ENQUIRIES,
    COLLECTION_HOTEL_ENQUIRIES,
    COLLECTION_VENDOR_ENQUIRIES,
)
from venuehub.infrastructure.firebase.repositories._fields import timestamp
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    CachedFirestoreRepository,
    RepositoryConfig,
)
from venuehub.shared.telemetry import traced

E = TypeVar("E")

FIELD_AUTH_ID = "authId"


def _hotel_to_result(doc_id: str, data: dict[str, Any]) -> HotelEnquiryResult:
    return HotelEnquiryResult(
        id=doc_id,
        auth_id=data.get(FIELD_AUTH_ID, ""),
        hotel_name=data.get("hotelName", ""),
        city=data.get("city", ""),
        status=data.get("status", HotelEnquiryStatus.PENDING.value),
        created_at=timestamp(data.get(FIELD_CREATED_AT)),
        updated_at=timestamp(data.get(FIELD_UPDATED_AT)),
    )


def _vendor_to_result(doc_id: str, data: dict[str, Any]) -> VendorEnquiryResult:
    return VendorEnquiryResult(
        id=doc_id,
        auth_id=data.get(FIELD_AUTH_ID, ""),
        name=data.get("name"),
        email=data.get("email", ""),
        phone_number=data.get("phoneNumber", ""),
        status=data.get("status", VendorEnquiryStatus.PENDING.value),
        created_at=timestamp(data.get(FIELD_CREATED_AT)),
        updated_at=timestamp(data.get(FIELD_UPDATED_AT)),
    )


def _banquet_to_result(doc_id: str, data: dict[str, Any]) -> BanquetEnquiryResult:
    return BanquetEnquiryResult(
        id=doc_id,
        auth_id=data.get(FIELD_AUTH_ID, ""),
        name=data.get("name", ""),
        email=data.get("email", ""),
        phone_number=data.get("phoneNumber", ""),
        message=data.get("message", ""),
        status=data.get("status", BanquetEnquiryStatus.NEW.value),
        created_at=timestamp(data.get(FIELD_CREATED_AT)),
        updated_at=timestamp(data.get(FIELD_UPDATED_AT)),
    )


def _enquiry_config(collection: str, kind: str, materialize, default_status: str) -> RepositoryConfig:
    return RepositoryConfig(
        collection=collection,
        kind=kind,
        materialize=materialize,
        order_by=((FIELD_CREATED_AT, DESCENDING),),
        created_field=FIELD_CREATED_AT,
        updated_field=FIELD_UPDATED_AT,
        default_status=default_status,
        immutable_fields=frozenset({"id", FIELD_AUTH_ID}),
    )


HOTEL_ENQUIRY_CONFIG = _enquiry_config(
    COLLECTION_HOTEL_ENQUIRIES, "hotel enquiry", _hotel_to_result, HotelEnquiryStatus.PENDING.value
)
VENDOR_ENQUIRY_CONFIG = _enquiry_config(
    COLLECTION_VENDOR_ENQUIRIES, "vendor enquiry", _vendor_to_result, VendorEnquiryStatus.PENDING.value
)
BANQUET_ENQUIRY_CONFIG = _enquiry_config(
    COLLECTION_BANQUET_ENQUIRIES, "banquet enquiry", _banquet_to_result, BanquetEnquiryStatus.NEW.value
)


class FirestoreEnquiryRepository(CachedFirestoreRepository[E]):
    @traced("repository.list_by_owner")
    async def list_by_owner(self, auth_id: str) -> list[E]:
        """Enquiries submitted by one account, newest first (always a fresh query)."""
        return await self._query_store(((FIELD_AUTH_ID, "==", auth_id),))


class FirestoreHotelEnquiryRepository(FirestoreEnquiryRepository[HotelEnquiryResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, HOTEL_ENQUIRY_CONFIG)


class FirestoreVendorEnquiryRepository(FirestoreEnquiryRepository[VendorEnquiryResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, VENDOR_ENQUIRY_CONFIG)


class FirestoreBanquetEnquiryRepository(FirestoreEnquiryRepository[BanquetEnquiryResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, BANQUET_ENQUIRY_CONFIG)
