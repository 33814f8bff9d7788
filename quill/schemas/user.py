"""User request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """User creation model (excludes auto-generated fields)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str = Field(
        ...,
        alias="userName",
        min_length=3,
        max_length=50,
        description="Username",
        examples=["ada"],
    )
    email: EmailStr = Field(..., description="Email address", examples=["ada@example.com"])
    first_name: str | None = Field(alias="firstName", default=None)
    last_name: str | None = Field(alias="lastName", default=None)


class UserResponse(BaseModel):
    """Public user representation."""

    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: str
    email_verified_at: datetime | None = None
    created_at: datetime


class EmailVerificationResponse(BaseModel):
    """Result of an email verification request."""

    user_id: UUID
    verified: bool
    newly_verified: bool = Field(
        description="False when the address had already been verified",
    )
