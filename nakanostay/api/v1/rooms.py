"""Rooms API router.

Listing rooms and querying availability is public; everything that changes
a room is admin-only.
"""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.api.deps import get_current_admin, get_db
from nakanostay.models.room import Room
from nakanostay.schemas.common import MessageResponse
from nakanostay.schemas.room import (
    AvailabilityResponse,
    RoomCreate,
    RoomListResponse,
    RoomResponse,
    RoomUpdate,
)
from nakanostay.services import hotel_service, room_service
from nakanostay.services.availability import RoomAvailability, get_room_availability

router = APIRouter(prefix="/api/v1/rooms", tags=["rooms"])


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a room in a hotel",
)
async def create_room(
    body: RoomCreate,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Room:
    """Create a room. Returns 404 if the hotel does not exist, 409 if the number is taken."""
    await hotel_service.get_hotel(db, body.hotel_id)
    return await room_service.create_room(db, Room(**body.model_dump()))


@router.get(
    "",
    response_model=RoomListResponse,
    summary="List rooms",
)
async def list_rooms(
    skip: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=100, description="Pagination limit"),
    db: AsyncSession = Depends(get_db),
) -> dict:
    items, total = await room_service.list_rooms(db, skip=skip, limit=limit)
    return {"items": items, "total": total}


@router.get(
    "/hotel/{hotel_id}",
    response_model=list[RoomResponse],
    summary="List the rooms of a hotel",
)
async def list_rooms_by_hotel(hotel_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> list[Room]:
    return await room_service.list_rooms_by_hotel(db, hotel_id)


@router.get(
    "/{room_id}",
    response_model=RoomResponse,
    summary="Get a room by ID",
)
async def get_room(room_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Room:
    return await room_service.get_room(db, room_id)


@router.get(
    "/{room_id}/availability",
    response_model=AvailabilityResponse,
    summary="Free dates and occupied ranges of a room",
)
async def room_availability(
    room_id: uuid.UUID,
    start_date: date = Query(..., description="First date of the window (inclusive)"),
    end_date: date = Query(..., description="Last date of the window (inclusive)"),
    db: AsyncSession = Depends(get_db),
) -> RoomAvailability:
    """Return every free date in the window and the occupied ranges.

    A booking occupies its room from check-in up to the night before
    check-out. Returns 400 if the window is inverted or starts in the past.
    """
    return await get_room_availability(db, room_id, start_date, end_date)


@router.put(
    "/{room_id}",
    response_model=RoomResponse,
    summary="Update a room",
)
async def update_room(
    room_id: uuid.UUID,
    body: RoomUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Room:
    """Partially update a room. Moving it to another hotel checks that hotel exists."""
    changes = body.model_dump(exclude_unset=True)
    if changes.get("hotel_id") is not None:
        await hotel_service.get_hotel(db, changes["hotel_id"])
    return await room_service.update_room(db, room_id, changes)


@router.put(
    "/{room_id}/available",
    response_model=RoomResponse,
    summary="Open a room for bookings",
)
async def make_room_available(
    room_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Room:
    return await room_service.set_room_availability(db, room_id, available=True)


@router.put(
    "/{room_id}/unavailable",
    response_model=RoomResponse,
    summary="Close a room for bookings",
)
async def make_room_unavailable(
    room_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Room:
    return await room_service.set_room_availability(db, room_id, available=False)


@router.delete(
    "/{room_id}",
    response_model=MessageResponse,
    summary="Delete a room",
)
async def delete_room(
    room_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> MessageResponse:
    await room_service.delete_room(db, room_id)
    return MessageResponse(message="Room deleted")
