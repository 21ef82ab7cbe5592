"""Health check endpoint. No store access; used for liveness probes."""

from fastapi import APIRouter, Request

from venuehub.schemas.common import ApiResponse
from venuehub.schemas.health import HealthStatus

router = APIRouter()


@router.get("", response_model=ApiResponse[HealthStatus])
def health_check(request: Request) -> ApiResponse[HealthStatus]:
    """Return ok, and whether the document store is configured."""
    configured = getattr(request.app.state, "repositories", None) is not None
    return ApiResponse[HealthStatus](
        data=HealthStatus(store_configured=configured), message="Service is healthy"
    )
