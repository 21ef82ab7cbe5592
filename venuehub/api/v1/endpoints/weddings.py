"""Showcase weddings API."""

from fastapi import APIRouter

from venuehub.api.v1.dependencies import get_wedding_repo
from venuehub.api.v1.endpoints._crud import add_crud_routes
from venuehub.schemas.content import (
    WeddingCreateRequest,
    WeddingResponse,
    WeddingUpdateRequest,
)

router = add_crud_routes(
    APIRouter(),
    get_repo=get_wedding_repo,
    create_model=WeddingCreateRequest,
    update_model=WeddingUpdateRequest,
    response_model=WeddingResponse,
    label="Wedding",
    plural="Weddings",
)
