"""
Standardized API response models.
Documents the error envelope produced by the handlers in api.middleware.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(..., description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


# Shared OpenAPI documentation for authenticated routes
AUTH_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing or expired session"},
    403: {"model": ErrorResponse, "description": "Role not allowed"},
}
