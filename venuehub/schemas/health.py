"""Health check API schemas."""

from pydantic import Field

from venuehub.schemas.common import CamelModel


class HealthStatus(CamelModel):
    """Payload of GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    store_configured: bool = Field(default=False, description="Firestore credentials loaded")
