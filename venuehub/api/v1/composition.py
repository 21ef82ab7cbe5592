"""Composition root: builds every repository and service once per process.

The lifespan calls build_repositories() with the Firestore client and stores
the result on app.state.repositories; the Depends() functions in
dependencies.py hand the pieces to routes.
"""

from __future__ import annotations

from dataclasses import dataclass

from venuehub.application.services.enquiry_access_service import EnquiryAccessService
from venuehub.infrastructure.firebase._rest_client import FirestoreRESTClient
from venuehub.infrastructure.firebase.repositories import (
    FirestoreAboutContentRepository,
    FirestoreBanquetEnquiryRepository,
    FirestoreHeroExtensionRepository,
    FirestoreHeroSlideRepository,
    FirestoreHotelEnquiryRepository,
    FirestoreProcessStepRepository,
    FirestoreRoleProfileRepository,
    FirestoreTestimonialRepository,
    FirestoreVendorEnquiryRepository,
    FirestoreWeddingRepository,
)
from venuehub.infrastructure.firebase.services import FirestoreAuthSynchronizer


@dataclass(frozen=True)
class Repositories:
    """Process-wide repositories (each owns its cache) and services."""

    hero_slides: FirestoreHeroSlideRepository
    testimonials: FirestoreTestimonialRepository
    about_content: FirestoreAboutContentRepository
    process_steps: FirestoreProcessStepRepository
    weddings: FirestoreWeddingRepository
    hero_extension: FirestoreHeroExtensionRepository
    hotel_enquiries: FirestoreHotelEnquiryRepository
    vendor_enquiries: FirestoreVendorEnquiryRepository
    banquet_enquiries: FirestoreBanquetEnquiryRepository
    profiles: FirestoreRoleProfileRepository
    enquiry_access: EnquiryAccessService
    auth_sync: FirestoreAuthSynchronizer


def build_repositories(client: FirestoreRESTClient) -> Repositories:
    """Wire all repositories and services against one Firestore client."""
    hotel_enquiries = FirestoreHotelEnquiryRepository(client)
    vendor_enquiries = FirestoreVendorEnquiryRepository(client)
    banquet_enquiries = FirestoreBanquetEnquiryRepository(client)
    profiles = FirestoreRoleProfileRepository(client)
    return Repositories(
        hero_slides=FirestoreHeroSlideRepository(client),
        testimonials=FirestoreTestimonialRepository(client),
        about_content=FirestoreAboutContentRepository(client),
        process_steps=FirestoreProcessStepRepository(client),
        weddings=FirestoreWeddingRepository(client),
        hero_extension=FirestoreHeroExtensionRepository(client),
        hotel_enquiries=hotel_enquiries,
        vendor_enquiries=vendor_enquiries,
        banquet_enquiries=banquet_enquiries,
        profiles=profiles,
        enquiry_access=EnquiryAccessService(
            profiles, hotel_enquiries, vendor_enquiries, banquet_enquiries
        ),
        auth_sync=FirestoreAuthSynchronizer(client),
    )
