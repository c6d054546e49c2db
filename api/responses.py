"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Dict, Generic, TypeVar, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from fastapi import status
from fastapi.responses import RedirectResponse

T = TypeVar("T")


class ViewResponse(BaseModel, Generic[T]):
    """A named view together with the data it renders"""

    view: str = Field(..., description="Name of the view to render")
    model: T = Field(..., description="Data handed to the view")
    errors: Optional[Dict[str, str]] = Field(
        None, description="Field-level validation messages, when redisplaying a form"
    )


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Additional error details")


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
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


def redirect_to(path: str) -> RedirectResponse:
    """Post/redirect/get: send the client to the page it should GET next"""
    return RedirectResponse(url=path, status_code=status.HTTP_303_SEE_OTHER)


def error_response(code: str, message: str, details: dict = None) -> dict:
    """Create a standardized error response body"""
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details,
        },
        "timestamp": datetime.utcnow().isoformat(),
    }
