"""Hero-extension API: slot images (standard routes plus extras) and the content block."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from venuehub.api.v1.dependencies import get_hero_extension_repo
from venuehub.api.v1.endpoints._crud import ForceRefresh, add_crud_routes, create_payload
from venuehub.application.interfaces import IHeroExtensionRepository
from venuehub.core.limiter import limit_writes
from venuehub.domain.enums import HeroImageType
from venuehub.schemas.common import ApiResponse, OrderUpdateRequest
from venuehub.schemas.content import (
    HeroContentRequest,
    HeroContentResponse,
    HeroImageCreateRequest,
    HeroImageResponse,
    HeroImageUpdateRequest,
)

router = APIRouter()

HeroExtensionRepo = Annotated[IHeroExtensionRepository, Depends(get_hero_extension_repo)]


@router.get("/content", response_model=ApiResponse[HeroContentResponse])
async def get_hero_extension_content(repo: HeroExtensionRepo):
    """Return the content block; data is null until it is first saved."""
    content = await repo.get_content()
    return ApiResponse[HeroContentResponse](
        data=HeroContentResponse.model_validate(content) if content else None,
        message="Hero extension content fetched successfully",
    )


@router.post("/content", response_model=ApiResponse[HeroContentResponse])
@limit_writes
async def save_hero_extension_content(
    request: Request, body: HeroContentRequest, repo: HeroExtensionRepo
):
    """Create or overwrite the content block."""
    content = await repo.upsert_content(create_payload(body))
    return ApiResponse[HeroContentResponse](
        data=HeroContentResponse.model_validate(content),
        message="Hero extension content saved successfully",
    )


@router.put("/order", response_model=ApiResponse[HeroImageResponse])
@limit_writes
async def update_hero_image_order(
    request: Request, body: OrderUpdateRequest, repo: HeroExtensionRepo
):
    """Move one image to a new position within its slot."""
    updated = await repo.update_order(entity_id=body.id, new_order=body.new_order)
    return ApiResponse[HeroImageResponse](
        data=HeroImageResponse.model_validate(updated),
        message="Hero extension image order updated successfully",
    )


@router.get("/counts", response_model=ApiResponse[dict[str, int]])
async def count_active_hero_images(repo: HeroExtensionRepo):
    """Number of active images in every slot."""
    counts = await repo.count_active_by_type()
    return ApiResponse[dict[str, int]](data=counts, message="Image counts fetched successfully")


@router.get("/type/{image_type}", response_model=ApiResponse[list[HeroImageResponse]])
async def list_hero_images_by_type(
    image_type: HeroImageType, repo: HeroExtensionRepo, force_refresh: ForceRefresh = False
):
    images = await repo.get_by_type(image_type=image_type.value, force_refresh=force_refresh)
    return ApiResponse[list[HeroImageResponse]](
        data=[HeroImageResponse.model_validate(i) for i in images],
        message=f"{image_type.value} images fetched successfully",
    )


@router.get("/type/{image_type}/active", response_model=ApiResponse[list[HeroImageResponse]])
async def list_active_hero_images_by_type(
    image_type: HeroImageType, repo: HeroExtensionRepo, force_refresh: ForceRefresh = True
):
    images = await repo.get_active_by_type(image_type=image_type.value, force_refresh=force_refresh)
    return ApiResponse[list[HeroImageResponse]](
        data=[HeroImageResponse.model_validate(i) for i in images],
        message=f"Active {image_type.value} images fetched successfully",
    )


@router.get("/type/{image_type}/random", response_model=ApiResponse[HeroImageResponse])
async def random_hero_image_by_type(image_type: HeroImageType, repo: HeroExtensionRepo):
    """One active image of the slot picked at random; data is null for an empty slot."""
    image = await repo.get_random_active_by_type(image_type=image_type.value)
    return ApiResponse[HeroImageResponse](
        data=HeroImageResponse.model_validate(image) if image else None,
        message="Random image fetched successfully" if image else "No active image for this type",
    )


add_crud_routes(
    router,
    get_repo=get_hero_extension_repo,
    create_model=HeroImageCreateRequest,
    update_model=HeroImageUpdateRequest,
    response_model=HeroImageResponse,
    label="Hero extension image",
    plural="Hero extension images",
)
