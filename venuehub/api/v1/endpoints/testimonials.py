"""Testimonials API: standard routes plus PUT /order."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from venuehub.api.v1.dependencies import get_testimonial_repo
from venuehub.api.v1.endpoints._crud import add_crud_routes
from venuehub.application.dtos import TestimonialResult
from venuehub.application.interfaces import IOrderedRepository
from venuehub.core.limiter import limit_writes
from venuehub.schemas.common import ApiResponse, OrderUpdateRequest
from venuehub.schemas.content import (
    TestimonialCreateRequest,
    TestimonialResponse,
    TestimonialUpdateRequest,
)

router = APIRouter()


@router.put("/order", response_model=ApiResponse[TestimonialResponse])
@limit_writes
async def update_testimonial_order(
    request: Request,
    body: OrderUpdateRequest,
    repo: Annotated[IOrderedRepository[TestimonialResult], Depends(get_testimonial_repo)],
):
    """Move one testimonial to a new display position (writes only the order)."""
    updated = await repo.update_order(entity_id=body.id, new_order=body.new_order)
    return ApiResponse[TestimonialResponse](
        data=TestimonialResponse.model_validate(updated),
        message="Testimonial order updated successfully",
    )


add_crud_routes(
    router,
    get_repo=get_testimonial_repo,
    create_model=TestimonialCreateRequest,
    update_model=TestimonialUpdateRequest,
    response_model=TestimonialResponse,
    label="Testimonial",
    plural="Testimonials",
)
