"""About-page content and process steps API.

process_steps_router must be mounted before router: /about/{item_id} would
otherwise capture /about/process-steps.
"""

from fastapi import APIRouter

from venuehub.api.v1.dependencies import get_about_content_repo, get_process_step_repo
from venuehub.api.v1.endpoints._crud import add_crud_routes
from venuehub.schemas.content import (
    AboutContentCreateRequest,
    AboutContentResponse,
    AboutContentUpdateRequest,
    ProcessStepCreateRequest,
    ProcessStepResponse,
    ProcessStepUpdateRequest,
)

router = add_crud_routes(
    APIRouter(),
    get_repo=get_about_content_repo,
    create_model=AboutContentCreateRequest,
    update_model=AboutContentUpdateRequest,
    response_model=AboutContentResponse,
    label="About content",
    plural="About content",
)

process_steps_router = add_crud_routes(
    APIRouter(),
    get_repo=get_process_step_repo,
    create_model=ProcessStepCreateRequest,
    update_model=ProcessStepUpdateRequest,
    response_model=ProcessStepResponse,
    label="Process step",
    plural="Process steps",
)
