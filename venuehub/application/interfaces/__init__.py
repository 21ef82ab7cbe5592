"""Ports implemented by the infrastructure layer."""

from venuehub.application.interfaces.repositories import (
    IAuthSynchronizer,
    ICachedRepository,
    IContentRepository,
    IEnquiryRepository,
    IHeroExtensionRepository,
    IOrderedRepository,
    IRoleProfileRepository,
)

__all__ = [
    "IAuthSynchronizer",
    "ICachedRepository",
    "IContentRepository",
    "IEnquiryRepository",
    "IHeroExtensionRepository",
    "IOrderedRepository",
    "IRoleProfileRepository",
]
