"""Bookings API router.

Guests create bookings, look them up and cancel them without an account,
identifying a booking by its code plus their DNI. Listing, confirming,
completing and deleting bookings is admin-only.
"""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.api.deps import get_current_admin, get_db
from nakanostay.models.booking import Booking, BookingStatus
from nakanostay.schemas.booking import BookingCreate, BookingListResponse, BookingResponse
from nakanostay.schemas.common import MessageResponse
from nakanostay.services import booking_service
from nakanostay.services.booking_service import RoomRequest

router = APIRouter(prefix="/api/v1/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
)
async def create_booking(body: BookingCreate, db: AsyncSession = Depends(get_db)) -> Booking:
    """Create a PENDING booking and return it with its generated code.

    Returns:
    - 404 if a requested room does not exist.
    - 400 if guest data, guest counts or dates are invalid.
    - 409 if a room is already booked for overlapping dates or is closed.
    """
    return await booking_service.create_booking(
        db,
        guest_name=body.guest_name,
        guest_dni=body.guest_dni,
        guest_email=body.guest_email,
        guest_phone=body.guest_phone,
        check_in=body.check_in,
        check_out=body.check_out,
        rooms=[RoomRequest(room_id=detail.room_id, guests=detail.guests) for detail in body.details],
    )


@router.get(
    "",
    response_model=BookingListResponse,
    summary="List bookings",
)
async def list_bookings(
    status_filter: BookingStatus | None = Query(None, alias="status", description="Filter by booking status"),
    skip: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=100, description="Pagination limit"),
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> dict:
    items, total = await booking_service.list_bookings(db, skip=skip, limit=limit, status=status_filter)
    return {"items": items, "total": total}


@router.get(
    "/code/{booking_code}",
    response_model=BookingResponse,
    summary="Find a booking by code and guest DNI",
)
async def get_booking_by_code(
    booking_code: str,
    dni: str = Query(..., description="DNI of the guest who made the booking"),
    db: AsyncSession = Depends(get_db),
) -> Booking:
    """Returns 404 unless both the code and the DNI match the same booking."""
    return await booking_service.get_booking_by_code_and_dni(db, booking_code, dni)


@router.put(
    "/code/{booking_code}/cancel",
    response_model=BookingResponse,
    summary="Cancel a booking",
)
async def cancel_booking(
    booking_code: str,
    dni: str = Query(..., description="DNI of the guest who made the booking"),
    db: AsyncSession = Depends(get_db),
) -> Booking:
    """Cancel a PENDING or CONFIRMED booking. Returns 409 from any other status."""
    return await booking_service.cancel_booking(db, booking_code, dni)


@router.put(
    "/code/{booking_code}/confirm",
    response_model=BookingResponse,
    summary="Confirm a pending booking",
)
async def confirm_booking(
    booking_code: str,
    dni: str = Query(..., description="DNI of the guest who made the booking"),
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Booking:
    return await booking_service.confirm_booking(db, booking_code, dni)


@router.put(
    "/code/{booking_code}/complete",
    response_model=BookingResponse,
    summary="Mark a confirmed booking as completed",
)
async def complete_booking(
    booking_code: str,
    dni: str = Query(..., description="DNI of the guest who made the booking"),
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Booking:
    return await booking_service.complete_booking(db, booking_code, dni)


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking by ID",
)
async def get_booking(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Booking:
    return await booking_service.get_booking(db, booking_id)


@router.delete(
    "/{booking_id}",
    response_model=MessageResponse,
    summary="Delete a booking",
)
async def delete_booking(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> MessageResponse:
    await booking_service.delete_booking(db, booking_id)
    return MessageResponse(message="Booking deleted")
