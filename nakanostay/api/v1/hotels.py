"""Hotels API router.

Reading hotels is public; creating, updating and deleting them is admin-only.
"""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.api.deps import get_current_admin, get_db
from nakanostay.models.hotel import Hotel
from nakanostay.schemas.common import MessageResponse
from nakanostay.schemas.hotel import HotelCreate, HotelListResponse, HotelResponse, HotelUpdate
from nakanostay.services import hotel_service

router = APIRouter(prefix="/api/v1/hotels", tags=["hotels"])


@router.post(
    "",
    response_model=HotelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new hotel",
)
async def create_hotel(
    body: HotelCreate,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Hotel:
    """Create a hotel. Name+address and email must be unused (409 otherwise)."""
    return await hotel_service.create_hotel(db, Hotel(**body.model_dump()))


@router.get(
    "",
    response_model=HotelListResponse,
    summary="List hotels",
)
async def list_hotels(
    skip: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=100, description="Pagination limit"),
    db: AsyncSession = Depends(get_db),
) -> dict:
    items, total = await hotel_service.list_hotels(db, skip=skip, limit=limit)
    return {"items": items, "total": total}


@router.get(
    "/{hotel_id}",
    response_model=HotelResponse,
    summary="Get a hotel by ID",
)
async def get_hotel(hotel_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Hotel:
    return await hotel_service.get_hotel(db, hotel_id)


@router.put(
    "/{hotel_id}",
    response_model=HotelResponse,
    summary="Update a hotel",
)
async def update_hotel(
    hotel_id: uuid.UUID,
    body: HotelUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> Hotel:
    """Partially update a hotel. Only explicitly set fields are changed."""
    return await hotel_service.update_hotel(db, hotel_id, body.model_dump(exclude_unset=True))


@router.delete(
    "/{hotel_id}",
    response_model=MessageResponse,
    summary="Delete a hotel",
)
async def delete_hotel(
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(get_current_admin),
) -> MessageResponse:
    """Delete a hotel and its rooms. Refused with 409 while any room has bookings."""
    await hotel_service.delete_hotel(db, hotel_id)
    return MessageResponse(message="Hotel deleted")
