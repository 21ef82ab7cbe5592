"""API request/response schemas (pydantic, camelCase on the wire)."""

from venuehub.schemas.common import ApiResponse, CamelModel, OrderUpdateRequest

__all__ = ["ApiResponse", "CamelModel", "OrderUpdateRequest"]
