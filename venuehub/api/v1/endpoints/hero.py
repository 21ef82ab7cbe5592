"""Hero slides API."""

from fastapi import APIRouter

from venuehub.api.v1.dependencies import get_hero_slide_repo
from venuehub.api.v1.endpoints._crud import add_crud_routes
from venuehub.schemas.content import (
    HeroSlideCreateRequest,
    HeroSlideResponse,
    HeroSlideUpdateRequest,
)

router = add_crud_routes(
    APIRouter(),
    get_repo=get_hero_slide_repo,
    create_model=HeroSlideCreateRequest,
    update_model=HeroSlideUpdateRequest,
    response_model=HeroSlideResponse,
    label="Hero slide",
    plural="Hero slides",
)
