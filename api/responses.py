"""
Standardized API response models.
Used to document error and health payloads in the OpenAPI schema.
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
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


NOT_FOUND = {404: {"model": ErrorResponse, "description": "User or meal not found"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Email already registered"}}
BAD_MEAL_TIME = {400: {"model": ErrorResponse, "description": "Unparseable day or hour"}}
