"""Presentation-layer dependency injection.

Routes depend on these functions only; nothing here constructs repositories.
When the store is not configured every store-backed route answers 503.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from venuehub.api.v1.composition import Repositories
from venuehub.application.services.enquiry_access_service import EnquiryAccessService
from venuehub.domain.exceptions import StoreNotConfiguredException
from venuehub.infrastructure.firebase.repositories import (
    FirestoreAboutContentRepository,
    FirestoreBanquetEnquiryRepository,
    FirestoreHeroExtensionRepository,
    FirestoreHeroSlideRepository,
    FirestoreHotelEnquiryRepository,
    FirestoreProcessStepRepository,
    FirestoreTestimonialRepository,
    FirestoreVendorEnquiryRepository,
    FirestoreWeddingRepository,
)
from venuehub.infrastructure.firebase.services import FirestoreAuthSynchronizer


def get_repositories(request: Request) -> Repositories:
    """Return the process-wide Repositories built at startup."""
    repos = getattr(request.app.state, "repositories", None)
    if repos is None:
        raise StoreNotConfiguredException()
    return repos


RepositoriesDep = Annotated[Repositories, Depends(get_repositories)]


def get_hero_slide_repo(repos: RepositoriesDep) -> FirestoreHeroSlideRepository:
    return repos.hero_slides


def get_testimonial_repo(repos: RepositoriesDep) -> FirestoreTestimonialRepository:
    return repos.testimonials


def get_about_content_repo(repos: RepositoriesDep) -> FirestoreAboutContentRepository:
    return repos.about_content


def get_process_step_repo(repos: RepositoriesDep) -> FirestoreProcessStepRepository:
    return repos.process_steps


def get_wedding_repo(repos: RepositoriesDep) -> FirestoreWeddingRepository:
    return repos.weddings


def get_hero_extension_repo(repos: RepositoriesDep) -> FirestoreHeroExtensionRepository:
    return repos.hero_extension


def get_hotel_enquiry_repo(repos: RepositoriesDep) -> FirestoreHotelEnquiryRepository:
    return repos.hotel_enquiries


def get_vendor_enquiry_repo(repos: RepositoriesDep) -> FirestoreVendorEnquiryRepository:
    return repos.vendor_enquiries


def get_banquet_enquiry_repo(repos: RepositoriesDep) -> FirestoreBanquetEnquiryRepository:
    return repos.banquet_enquiries


def get_enquiry_access_service(repos: RepositoriesDep) -> EnquiryAccessService:
    return repos.enquiry_access


def get_auth_synchronizer(repos: RepositoriesDep) -> FirestoreAuthSynchronizer:
    return repos.auth_sync
