"""Auth record administration API (list, inspect, edit, status, delete)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from venuehub.api.v1.dependencies import get_auth_synchronizer
from venuehub.application.interfaces import IAuthSynchronizer
from venuehub.core.limiter import limit_writes
from venuehub.schemas.auth import AuthRecordResponse, AuthStatusRequest, AuthUpdateRequest
from venuehub.schemas.common import ApiResponse

router = APIRouter()

Synchronizer = Annotated[IAuthSynchronizer, Depends(get_auth_synchronizer)]


@router.get("", response_model=ApiResponse[list[AuthRecordResponse]])
async def list_auth_entries(sync: Synchronizer):
    records = await sync.list_auth()
    return ApiResponse[list[AuthRecordResponse]](
        data=[AuthRecordResponse.model_validate(r) for r in records],
        message="Auth entries fetched successfully",
    )


@router.get("/{auth_id}", response_model=ApiResponse[AuthRecordResponse])
async def get_auth_entry(auth_id: str, sync: Synchronizer):
    record = await sync.get_auth(auth_id)
    return ApiResponse[AuthRecordResponse](
        data=AuthRecordResponse.model_validate(record),
        message="Auth entry fetched successfully",
    )


@router.put("/{auth_id}", response_model=ApiResponse[AuthRecordResponse])
@limit_writes
async def update_auth_entry(
    request: Request, auth_id: str, body: AuthUpdateRequest, sync: Synchronizer
):
    """Change name, email and role; linked profiles receive the new name and email."""
    record = await sync.update_auth(
        auth_id=auth_id, name=body.name, email=body.email, role=body.role.value
    )
    return ApiResponse[AuthRecordResponse](
        data=AuthRecordResponse.model_validate(record),
        message="Auth entry updated successfully",
    )


@router.patch("/{auth_id}/status", response_model=ApiResponse[AuthRecordResponse])
@limit_writes
async def update_auth_entry_status(
    request: Request, auth_id: str, body: AuthStatusRequest, sync: Synchronizer
):
    """Activate or deactivate an account and (except for users) its profile."""
    record = await sync.update_auth_status(auth_id=auth_id, status=body.status.value)
    return ApiResponse[AuthRecordResponse](
        data=AuthRecordResponse.model_validate(record),
        message="Auth status updated successfully",
    )


@router.delete("/{auth_id}", response_model=ApiResponse[dict[str, str]])
@limit_writes
async def delete_auth_entry(request: Request, auth_id: str, sync: Synchronizer):
    """Delete the account's profile and auth record together."""
    await sync.delete_auth(auth_id=auth_id)
    return ApiResponse[dict[str, str]](
        data={"id": auth_id}, message="Auth entry deleted successfully"
    )
