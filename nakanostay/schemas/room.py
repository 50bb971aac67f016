"""Pydantic v2 request/response schemas for room endpoints."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RoomCreate(BaseModel):
    """Schema for creating a room in an existing hotel."""

    hotel_id: uuid.UUID
    room_number: str
    room_type: str | None = None
    price_per_night: Decimal
    is_available: bool = True


class RoomUpdate(BaseModel):
    """Schema for partially updating a room. All fields optional."""

    hotel_id: uuid.UUID | None = None
    room_number: str | None = None
    room_type: str | None = None
    price_per_night: Decimal | None = None
    is_available: bool | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RoomResponse(BaseModel):
    """Public room information."""

    id: uuid.UUID
    hotel_id: uuid.UUID
    room_number: str
    room_type: str | None = None
    price_per_night: Decimal
    is_available: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoomListResponse(BaseModel):
    """Paginated list of rooms."""

    items: list[RoomResponse]
    total: int


class DateRangeResponse(BaseModel):
    """Inclusive range of occupied dates."""

    start: date
    end: date

    model_config = ConfigDict(from_attributes=True)


class AvailabilityResponse(BaseModel):
    """Free dates and occupied ranges of a room over a date window."""

    room_id: uuid.UUID
    available_dates: list[date]
    occupied_ranges: list[DateRangeResponse]

    model_config = ConfigDict(from_attributes=True)
