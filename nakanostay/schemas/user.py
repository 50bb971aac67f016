"""Pydantic v2 request/response schemas for user endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., min_length=1, max_length=100)
    dni: str = Field(..., pattern=r"^[0-9]{10}$")
    email: EmailStr
    phone: str | None = Field(None, max_length=20)


class UserUpdate(BaseModel):
    """Schema for partially updating a user. All fields optional."""

    name: str | None = Field(None, min_length=1, max_length=100)
    dni: str | None = Field(None, pattern=r"^[0-9]{10}$")
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    id: uuid.UUID
    name: str
    dni: str
    email: str
    phone: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    """Paginated list of users."""

    items: list[UserResponse]
    total: int
