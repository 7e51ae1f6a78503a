"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field contents are checked by the domain validator, not here, so the JSON
endpoint reports the same messages as the HTML form.
"""

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Request model for user sign-up."""

    email: str = Field("", description="Email address to register")
    password: str = Field("", description="Password (min 6 characters)")
    confirm_password: str = Field("", description="Password repeated")


class SignUpResponse(BaseModel):
    """Response model for a sign-up attempt that reached the provider."""

    status: str
    message: str | None = None
    redirect_to: str | None = None


class IdentityResponse(BaseModel):
    """Response model for the current identity."""

    authenticated: bool
    email: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
