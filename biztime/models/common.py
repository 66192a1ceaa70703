"""Common models used across the application."""
from typing import Literal
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Overall health status")
    timestamp: str = Field(..., description="ISO timestamp")
    version: str = Field(..., description="Application version")
    dependencies: dict[str, str] = Field(
        ...,
        description="Status of each dependency"
    )


class ErrorResponse(BaseModel):
    """Body of a 500 response: the underlying store or server message."""
    error: str


class MessageResponse(BaseModel):
    """Body of a 404 response naming the missing resource."""
    message: str


class DeletedResponse(BaseModel):
    """Acknowledgement returned by every DELETE."""
    status: Literal["deleted"] = "deleted"
