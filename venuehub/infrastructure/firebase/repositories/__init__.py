"""Firestore repository implementations."""

from venuehub.infrastructure.firebase.repositories.about_repo_firestore import (
    FirestoreAboutContentRepository,
    FirestoreProcessStepRepository,
)
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    CachedFirestoreRepository,
    ContentFirestoreRepository,
    OrderedFirestoreRepository,
    RepositoryConfig,
)
from venuehub.infrastructure.firebase.repositories.enquiry_repo_firestore import (
    FirestoreBanquetEnquiryRepository,
    FirestoreEnquiryRepository,
    FirestoreHotelEnquiryRepository,
    FirestoreVendorEnquiryRepository,
)
from venuehub.infrastructure.firebase.repositories.hero_extension_repo_firestore import (
    FirestoreHeroExtensionRepository,
)
from venuehub.infrastructure.firebase.repositories.hero_slide_repo_firestore import (
    FirestoreHeroSlideRepository,
)
from venuehub.infrastructure.firebase.repositories.role_profile_repo_firestore import (
    FirestoreRoleProfileRepository,
)
from venuehub.infrastructure.firebase.repositories.testimonial_repo_firestore import (
    FirestoreTestimonialRepository,
)
from venuehub.infrastructure.firebase.repositories.wedding_repo_firestore import (
    FirestoreWeddingRepository,
)

__all__ = [
    "CachedFirestoreRepository",
    "ContentFirestoreRepository",
    "FirestoreAboutContentRepository",
    "FirestoreBanquetEnquiryRepository",
    "FirestoreEnquiryRepository",
    "FirestoreHeroExtensionRepository",
    "FirestoreHeroSlideRepository",
    "FirestoreHotelEnquiryRepository",
    "FirestoreProcessStepRepository",
    "FirestoreRoleProfileRepository",
    "FirestoreTestimonialRepository",
    "FirestoreVendorEnquiryRepository",
    "FirestoreWeddingRepository",
    "OrderedFirestoreRepository",
    "RepositoryConfig",
]
