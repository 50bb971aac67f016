"""Pydantic v2 request/response schemas for hotel endpoints.

Request schemas only enforce types; field rules (lengths, email format,
star range) are checked by ``nakanostay.services.hotel_service`` so the
API returns its specific messages.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class HotelCreate(BaseModel):
    """Schema for creating a new hotel."""

    name: str
    address: str
    city: str | None = None
    stars: int | None = None
    email: str


class HotelUpdate(BaseModel):
    """Schema for partially updating a hotel. All fields optional."""

    name: str | None = None
    address: str | None = None
    city: str | None = None
    stars: int | None = None
    email: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class HotelResponse(BaseModel):
    """Public hotel information."""

    id: uuid.UUID
    name: str
    address: str
    city: str | None = None
    stars: int | None = None
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HotelListResponse(BaseModel):
    """Paginated list of hotels."""

    items: list[HotelResponse]
    total: int
