"""Pydantic v2 request/response schemas for booking endpoints."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from nakanostay.models.booking import BookingStatus

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingDetailCreate(BaseModel):
    """A room requested in a new booking."""

    room_id: uuid.UUID
    guests: int


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    The booking code, status and prices are set by the server. Guest data
    and dates are validated by the booking service so that errors come
    back with their specific messages.
    """

    guest_name: str
    guest_dni: str
    guest_email: str
    guest_phone: str | None = None
    check_in: date
    check_out: date
    details: list[BookingDetailCreate]


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BookingDetailResponse(BaseModel):
    room_id: uuid.UUID
    guests: int
    price_at_booking: Decimal

    model_config = ConfigDict(from_attributes=True)


class BookingResponse(BaseModel):
    """Booking with its rooms and derived total."""

    id: uuid.UUID
    booking_code: str
    guest_name: str
    guest_dni: str
    guest_email: str
    guest_phone: str | None = None
    booking_date: datetime
    check_in: date
    check_out: date
    status: BookingStatus
    total: Decimal
    details: list[BookingDetailResponse] = Field(
        validation_alias=AliasChoices("details", "booking_details"),
    )

    model_config = ConfigDict(from_attributes=True)


class BookingListResponse(BaseModel):
    """Paginated list of bookings."""

    items: list[BookingResponse]
    total: int
