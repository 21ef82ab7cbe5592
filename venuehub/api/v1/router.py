"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from venuehub.api.v1.dependencies.
"""

from fastapi import APIRouter

from venuehub.api.v1.endpoints import (
    about,
    auth,
    enquiries,
    health,
    hero,
    hero_extension,
    testimonials,
    weddings,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(hero.router, prefix="/hero", tags=["hero"])
api_router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
# Before about.router, whose /{item_id} would capture "process-steps".
api_router.include_router(
    about.process_steps_router, prefix="/about/process-steps", tags=["about"]
)
api_router.include_router(about.router, prefix="/about", tags=["about"])
api_router.include_router(weddings.router, prefix="/weddings", tags=["weddings"])
api_router.include_router(
    hero_extension.router, prefix="/hero-extension", tags=["hero-extension"]
)
api_router.include_router(
    enquiries.hotel_router, prefix="/hotel-enquiries", tags=["enquiries"]
)
api_router.include_router(
    enquiries.vendor_router, prefix="/vendor-enquiries", tags=["enquiries"]
)
api_router.include_router(
    enquiries.banquet_router, prefix="/banquet-enquiries", tags=["enquiries"]
)
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
